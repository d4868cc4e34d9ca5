"""
Database models for the link registry.

A single table: every short code and its click analytics live on one row.
"""

from .link import Link

__all__ = ["Link"]
