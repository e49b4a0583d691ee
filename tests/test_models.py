import time

import pytest

from socialnet.models import Message, Notification, Post, User, format_timestamp


@pytest.fixture
def alice():
    password = "password"
    return User("alice", password, "FSD", True)


@pytest.fixture
def bob():
    password = "password"
    return User("bob", password, "LHR", False)


def test_format_timestamp_round_trip():
    stamp = time.mktime((2024, 1, 2, 3, 4, 5, 0, 0, -1))
    text = format_timestamp(stamp)
    assert text == "2024-01-02 03:04:05"
    parsed = time.mktime(time.strptime(text, "%Y-%m-%d %H:%M:%S"))
    assert parsed == stamp


def test_message_render_layout():
    message = Message("alice", "bob", "hello there")
    lines = message.render().split("\n")
    assert lines[:3] == ["From: alice", "To: bob", "Message: hello there"]
    assert lines[3].startswith("Time: ")
    assert message.timestamp == 0


def test_notification_render_includes_content_and_time():
    note = Notification("alice has followed you", timestamp=0)
    content, stamp = note.render().split("\n")
    assert content == "alice has followed you"
    assert stamp == " " + format_timestamp(0)


def test_send_message_delivers_and_records(alice, bob):
    message = alice.send_message(bob, "hi")
    assert bob.inbox.front() is message
    assert alice.sent_messages.top() is message
    assert message.sender == "alice"
    assert message.receiver == "bob"


def test_view_inbox_drains_oldest_first(alice, bob):
    alice.send_message(bob, "first")
    alice.send_message(bob, "second")
    text = bob.view_inbox()
    assert text.startswith("Inbox for bob:")
    assert text.index("Message: first") < text.index("Message: second")
    assert bob.inbox.empty()


def test_view_sent_messages_newest_first(alice, bob):
    alice.send_message(bob, "first")
    alice.send_message(bob, "second")
    text = alice.view_sent_messages()
    assert text.startswith("Sent Messages from alice:")
    assert text.index("Message: second") < text.index("Message: first")
    assert alice.sent_messages.empty()


def test_like_and_duplicate_like(alice, bob):
    post = Post("hello", alice)
    assert post.like(bob) == "bob liked the post."
    assert post.like(bob) == "bob has already liked this post."
    assert post.likes == 1
    assert post.liked_by == [bob]


def test_like_none_does_nothing(alice):
    post = Post("hello", alice)
    assert post.like(None) == ""
    assert post.likes == 0


def test_unlike(alice, bob):
    post = Post("hello", alice)
    assert post.unlike(bob) == ""
    post.like(alice)
    assert post.unlike(bob) == "bob has not liked this post."
    post.like(bob)
    assert post.unlike(alice) == "alice unliked the post."
    assert post.liked_by == [bob]
    assert post.likes == 1


def test_render_without_and_with_likes(alice, bob):
    post = Post("sunny day", alice, timestamp=0)
    lines = post.render().split("\n")
    assert lines[0] == "Post by alice: sunny day"
    assert lines[1] == "Posted at: " + format_timestamp(0)
    assert lines[2] == "Likes: 0 Liked by: No likes yet."
    post.like(bob)
    post.like(alice)
    assert post.render().split("\n")[2] == "Likes: 2 Liked by: bob alice"


def test_copy_is_equal_but_independent(alice, bob):
    post = Post("hello", alice)
    post.like(bob)
    duplicate = post.copy()
    assert duplicate == post
    duplicate.unlike(bob)
    assert post.likes == 1
    assert duplicate.likes == 0


def test_post_equality_uses_author_identity(alice):
    password = "password"
    twin = User("alice", password, "FSD", True)
    first = Post("hello", alice, timestamp=10)
    assert first == Post("hello", alice, timestamp=10)
    assert not first == Post("hello", twin, timestamp=10)
    assert not first == Post("other", alice, timestamp=10)
    assert not first == Post("hello", alice, timestamp=11)