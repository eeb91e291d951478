"""git-github: local Git branch context augmented with GitHub state."""

__version__ = "0.1.0"
