"""Classic data structures and algorithms in plain Python: stacks, queues,
linked lists, trees, heaps, graphs, hashing, searching and sorting."""

__version__ = "0.1.0"