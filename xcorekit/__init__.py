"""Bounded containers, bit and byte-order helpers, and synchronisation primitives."""

__version__ = "0.1.0"
__all__ = ["array", "byte_queue", "ring_queue", "linked_list", "tree", "bits", "sync"]