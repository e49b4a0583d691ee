# socialnet

Building blocks for a small social network that lives entirely in memory:
simple containers, users with their own mailboxes, posts that can be liked,
notifications, a username-ordered directory of users, and a per-user graph
node that holds followers, followings, posts, a news feed, pending follow
requests, a block list and message boxes.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `socialnet.structures`

- `HashMap`: a separate-chaining map from strings to values. `insert(key,
  value)` stores or replaces a value, `get(key)` returns it or raises
  `KeyError`, `find(key)` tells whether the key is present. It also
  supports `in` and `len()`.
- `Stack`: last in, first out. `push`, `pop` (raises `IndexError` when
  empty), `top` (raises `IndexError` when empty), `empty`, `copy`.
  Iteration runs from the top down.
- `Queue`: first in, first out. `push`, `pop` (returns `None` when empty),
  `front` (raises `IndexError` when empty), `empty`, `copy`. Iteration runs
  from the front back.
- `MaxHeap`: a binary max-heap with `insert`, `extract_max` and `peek_max`;
  the last two raise `IndexError` when the heap is empty.

### `socialnet.models`

- `User`: username, password, city, public or private. `send_message(receiver,
  content)` delivers a `Message` to the receiver's inbox and keeps it among
  the sent messages. `view_inbox()` renders and empties the inbox, oldest
  first; `view_sent_messages()` renders and empties the sent messages,
  newest first.
- `Post`: content, author, timestamp and the users who liked it.
  `like(user)` and `unlike(user)` update the likers and return the notice
  to show; `likes` counts them; `render()` shows the post; `copy()` gives a
  post with its own list of likers. Two posts are equal when they have the
  same author, content and timestamp.
- `Message` and `Notification`, each with `render()`.
- `format_timestamp(timestamp)` formats a Unix time in local time as
  `YYYY-MM-DD HH:MM:SS`.

### `socialnet.userbst`

`UserBST` keeps users in username order. `insert(user)` returns `False` if
the username is already there; `search(username)` returns the user or
`None`; `in_order()` yields the users sorted by name; `render()` lists each
user with their city, or says the tree is empty.

### `socialnet.node`

`GraphNode(user)` holds one user's state: `followers` and `following`
(lists of nodes), `pending_requests`, `posts`, `news_feed`,
`notifications`, `blocked_users`, `inbox` and `outbox`. It offers
`create_post(content)`, `render_posts()`, `render_followers()`,
`render_following()` and `render_pending_requests()`, and the counts
`follower_count`, `following_count` and `post_count`.

## Example

```python
from socialnet.models import User
from socialnet.node import GraphNode
from socialnet.structures import HashMap
from socialnet.userbst import UserBST

alice = User("alice", "password", "Springfield", True)
bob = User("bob", "password", "Shelbyville", False)

directory = UserBST()
directory.insert(bob)
directory.insert(alice)
print(directory.render())
# Username: alice, City: Springfield
# Username: bob, City: Shelbyville

nodes = HashMap()
nodes.insert("alice", GraphNode(alice))
nodes.insert("bob", GraphNode(bob))

post = nodes.get("bob").create_post("hello")
print(post.like(alice))   # alice liked the post.
print(post.like(alice))   # alice has already liked this post.
print(nodes.get("bob").render_posts())

alice.send_message(bob, "hi")
print(bob.view_inbox())
```

## What it does not do

The package provides the pieces a social network is built from, not the
network itself. There is no object that ties users together and enforces
the rules between them: following and unfollowing, follow requests and
their acceptance, blocking, news-feed delivery, login and password checks
are left to the caller, who works with the `GraphNode` fields directly.
There is no console program or command to run, and nothing is stored
beyond the running process.