"""
KV User Service Package.

A small FastAPI service that lists, fetches, creates and updates user
records stored as Redis hashes.
"""

__version__ = "1.0.0"
__description__ = "User CRUD service backed by a key-value store"
