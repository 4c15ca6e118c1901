"""Classic data structures (stack, queue, array and linked lists) with small demonstration programs."""

__version__ = "0.1.0"