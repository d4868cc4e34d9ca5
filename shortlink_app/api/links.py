from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from shortlink_app.schemas.link import LinkCreate, LinkResponse
from shortlink_app.services.link_service import LinkService
from shortlink_app.dependencies import get_link_service

router = APIRouter(prefix="/api/links", tags=["links"])


@router.get("", response_model=List[LinkResponse])
def list_links(
    q: Optional[str] = Query(None, description="Filter by code or URL substring"),
    link_service: LinkService = Depends(get_link_service)
):
    """List all links, most recent first"""
    return link_service.list_links(query=q)


@router.post("", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
def create_link(
    link_data: LinkCreate,
    link_service: LinkService = Depends(get_link_service)
):
    """Create a link; a 6-character code is generated when none is given"""
    return link_service.create_link(link_data.url, link_data.code)


@router.get("/{code}", response_model=LinkResponse)
def get_link(
    code: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Get one link with its click statistics"""
    return link_service.get_link(code)
