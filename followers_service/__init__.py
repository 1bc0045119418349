"""HTTP service that stores follow relationships between users and lists followers and followings."""

__version__ = "0.1.0"