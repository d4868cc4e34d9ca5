"""
Link storage.

LinkStore is the only code that talks to the links table. Every operation
is a single statement in its own transaction; the database provides the
atomicity and uniqueness guarantees.
"""

from .link_store import LinkStore

__all__ = ["LinkStore"]
