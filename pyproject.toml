[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "socialnet"
version = "0.1.0"
description = "Building blocks for an in-memory social network: containers, users, posts, messages, notifications and per-user graph nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["social network", "followers", "posts", "messaging", "data structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["socialnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
