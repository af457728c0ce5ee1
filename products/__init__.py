"""
Products module - read-only Product directory.

Business records show the product name and version they were registered for.
"""
