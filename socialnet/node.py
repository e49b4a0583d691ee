"""Per-user state held in the social graph."""

from __future__ import annotations

from socialnet.models import Message, Notification, Post, User
from socialnet.structures import Queue, Stack


class GraphNode:
    """A user together with their relations, posts, mail and notifications."""

    def __init__(self, user: User) -> None:
        self.user = user
        self.followers: list[GraphNode] = []
        self.following: list[GraphNode] = []
        self.pending_requests: Queue[str] = Queue()
        self.posts: Stack[Post] = Stack()
        self.news_feed: Stack[Post] = Stack()
        self.notifications: Queue[Notification] = Queue()
        self.blocked_users: Stack[str] = Stack()
        self.outbox: Stack[Message] = Stack()
        self.inbox: Stack[Message] = Stack()

    @property
    def username(self) -> str:
        return self.user.username

    @property
    def follower_count(self) -> int:
        return len(self.followers)

    @property
    def following_count(self) -> int:
        return len(self.following)

    @property
    def post_count(self) -> int:
        return len(self.posts)

    def render_followers(self) -> str:
        names = " ".join(node.username for node in self.followers) or "None"
        return (
            f"Total followers: {self.follower_count}\n"
            f"Followers of {self.username}: {names}"
        )

    def render_following(self) -> str:
        names = " ".join(node.username for node in self.following) or "None"
        return (
            f"Total following: {self.following_count}\n"
            f"{self.username}'s Followings: {names}"
        )

    def render_pending_requests(self) -> str:
        names = " ".join(self.pending_requests)
        return f"Pending follow requests for {self.username}: {names}"

    def create_post(self, content: str) -> Post:
        """Publish a new post on top of this user's posts and return it."""
        post = Post(content, self.user)
        self.posts.push(post)
        return post

    def render_posts(self) -> str:
        """Show this user's posts, newest first."""
        if self.posts.empty():
            return f"{self.username} has no posts."
        lines = [
            f"Total posts by {self.username}: {self.post_count}",
            f"Posts by {self.username}:",
        ]
        lines.extend(post.render() for post in self.posts)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GraphNode({self.username!r})"