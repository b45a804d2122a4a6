"""Classic data structures and algorithms: search trees, heaps, hash tables, tries, queues, lists, sorts and expression parsing."""

__version__ = "0.1.0"