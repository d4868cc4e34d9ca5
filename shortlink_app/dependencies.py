"""
FastAPI dependencies for dependency injection.

The request's database session comes from get_db (shared pool); the store
and service are built per request on top of it. Tests override get_db to
point everything at a throw-away database.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from shortlink_app.database.connection import get_db
from shortlink_app.services.link_service import LinkService
from shortlink_app.storage.link_store import LinkStore


def get_link_store(db: Session = Depends(get_db)) -> LinkStore:
    return LinkStore(db)


def get_link_service(store: LinkStore = Depends(get_link_store)) -> LinkService:
    """
    Get LinkService with its store injected.

    Controllers depend on the service only; the service depends on storage.
    """
    return LinkService(store=store)
