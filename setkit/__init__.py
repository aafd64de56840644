"""Integer set containers: a coalesced-chaining hash set and a relation-ordered sorted set."""

__version__ = "0.1.0"
__all__ = ["hashset", "sortedset"]