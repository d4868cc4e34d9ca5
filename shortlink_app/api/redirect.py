from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from shortlink_app.schemas.link import DeleteResponse
from shortlink_app.services.link_service import LinkService
from shortlink_app.dependencies import get_link_service

router = APIRouter(tags=["redirect"])


@router.get("/{code}")
def redirect_to_url(
    code: str,
    link_service: LinkService = Depends(get_link_service)
):
    """
    Redirect to the stored URL.

    The click is counted in the same statement that reads the URL,
    so the redirect is only sent once the increment has committed.
    """
    url = link_service.resolve(code)
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


@router.delete("/{code}", response_model=DeleteResponse)
def delete_link(
    code: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Delete a link permanently"""
    link_service.delete_link(code)
    return DeleteResponse(ok=True)
