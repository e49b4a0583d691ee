"""Users, posts, messages and notifications."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from socialnet.structures import Queue, Stack

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _now() -> int:
    return int(time.time())


def format_timestamp(timestamp: float) -> str:
    """Format a Unix timestamp in local time."""
    return time.strftime(TIME_FORMAT, time.localtime(timestamp))


@dataclass
class Message:
    """A direct message from one user to another."""

    sender: str = ""
    receiver: str = ""
    content: str = ""
    timestamp: int = 0

    def render(self) -> str:
        """Show the message, stamped with the time it is displayed."""
        return (
            f"From: {self.sender}\nTo: {self.receiver}\nMessage: {self.content}"
            f"\nTime: {format_timestamp(time.time())}"
        )


@dataclass
class Notification:
    """A short notice delivered to a user."""

    content: str = ""
    timestamp: int = field(default_factory=_now)

    def render(self) -> str:
        return f"{self.content}\n {format_timestamp(self.timestamp)}"


@dataclass(eq=False)
class User:
    """An account with its own private mailbox."""

    username: str
    password: str
    city: str = ""
    is_public: bool = True
    last_login: int = field(default_factory=_now)
    inbox: Queue[Message] = field(default_factory=Queue, repr=False)
    sent_messages: Stack[Message] = field(default_factory=Stack, repr=False)

    def send_message(self, receiver: User, content: str) -> Message:
        """Deliver a message to receiver and keep a copy among the sent ones."""
        message = Message(self.username, receiver.username, content)
        receiver.receive_message(message)
        self.sent_messages.push(message)
        return message

    def receive_message(self, message: Message) -> None:
        self.inbox.push(message)

    def view_inbox(self) -> str:
        """Render and empty the inbox, oldest message first."""
        lines = [f"Inbox for {self.username}:"]
        while not self.inbox.empty():
            lines.append(self.inbox.pop().render())
        return "\n".join(lines)

    def view_sent_messages(self) -> str:
        """Render and empty the sent messages, newest first."""
        lines = [f"Sent Messages from {self.username}:"]
        while not self.sent_messages.empty():
            lines.append(self.sent_messages.pop().render())
        return "\n".join(lines)


@dataclass(eq=False)
class Post:
    """A post with the list of users who liked it."""

    content: str = ""
    author: User | None = None
    timestamp: int = field(default_factory=_now)
    liked_by: list[User] = field(default_factory=list)

    @property
    def likes(self) -> int:
        return len(self.liked_by)

    def _liked(self, user: User) -> bool:
        return any(liker is user for liker in self.liked_by)

    def like(self, user: User | None) -> str:
        """Record a like by user and return the notice to show."""
        if user is None:
            return ""
        if self._liked(user):
            return f"{user.username} has already liked this post."
        self.liked_by.append(user)
        return f"{user.username} liked the post."

    def unlike(self, user: User | None) -> str:
        """Withdraw a like by user and return the notice to show."""
        if user is None or not self.liked_by:
            return ""
        for position, liker in enumerate(self.liked_by):
            if liker is user:
                del self.liked_by[position]
                return f"{user.username} unliked the post."
        return f"{user.username} has not liked this post."

    def render(self) -> str:
        author = self.author.username if self.author else ""
        if self.liked_by:
            likers = " ".join(liker.username for liker in self.liked_by)
        else:
            likers = "No likes yet."
        return (
            f"Post by {author}: {self.content}\n"
            f"Posted at: {format_timestamp(self.timestamp)}\n"
            f"Likes: {self.likes} Liked by: {likers}"
        )

    def copy(self) -> Post:
        """Return a post with the same data and its own list of likers."""
        return Post(self.content, self.author, self.timestamp, list(self.liked_by))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Post):
            return NotImplemented
        return (
            self.author is other.author
            and self.content == other.content
            and self.timestamp == other.timestamp
        )

    __hash__ = None  # type: ignore[assignment]