"""Linked lists, circular lists, lists of lists and a chained hash table over catalogue records."""

__version__ = "0.1.0"