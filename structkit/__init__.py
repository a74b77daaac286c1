"""Classic data structures: binary search trees, linked lists, stacks, queues and a list menu."""

__version__ = "0.1.0"