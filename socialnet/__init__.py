"""Building blocks for an in-memory social network: containers, users, posts, messages and graph nodes."""

__version__ = "0.1.0"