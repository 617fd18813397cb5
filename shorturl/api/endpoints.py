"""
FastAPI Endpoints for the ShortURL Service

Exactly two routes exist:
- GET /url/add/{origin_url}: create a short URL
- GET /{short_id}: redirect to the origin URL

Endpoints only translate between HTTP and the service layer; errors are
raised as HTTPException and rendered as plain text by the handler
installed in shorturl.main.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from shorturl.api.schemas import AddUrlResponse
from shorturl.api.dependencies import get_app_settings, get_link_service
from shorturl.core.exceptions import DatabaseError, InvalidURLError, ShortLinkNotFoundError
from shorturl.core.setting import Settings
from shorturl.services.link_service import ShortLinkService


router = APIRouter()


@router.get(
    "/url/add/{origin_url:path}",
    response_model=AddUrlResponse,
    summary="Create a short URL",
    description="Takes a path-embedded URL and returns its generated short URL"
)
async def add_url(
    origin_url: str,
    service: ShortLinkService = Depends(get_link_service),
    settings: Settings = Depends(get_app_settings)
) -> AddUrlResponse:
    """
    Create a new short URL for a path-embedded origin URL.

    Returns:
        AddUrlResponse with gen_url and the origin_url echoed back

    Raises:
        HTTPException 400: If origin_url is not a valid URL
        HTTPException 500: If the pool or the database fails
    """
    try:
        short_link = await service.create_short_link(origin_url)
    except InvalidURLError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.reason
        )
    except DatabaseError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return AddUrlResponse(
        gen_url=f"{settings.service_address}/{short_link.id}",
        origin_url=origin_url
    )


@router.get(
    "/{short_id}",
    status_code=status.HTTP_302_FOUND,
    summary="Redirect to original URL",
    description="Takes a short id and redirects to the original URL"
)
async def redirect_to(
    short_id: str,
    service: ShortLinkService = Depends(get_link_service)
) -> RedirectResponse:
    """
    Redirect to the original URL for a given short id.

    Returns:
        RedirectResponse (HTTP 302) to the original URL

    Raises:
        HTTPException 404: If the short id is unknown
        HTTPException 500: If the pool or the database fails
    """
    try:
        origin_url = await service.resolve(short_id)
    except ShortLinkNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Not found"
        )
    except DatabaseError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    response = RedirectResponse(
        url=origin_url,
        status_code=status.HTTP_302_FOUND
    )
    # RedirectResponse percent-quotes its target; stored URLs are printable
    # ASCII already, so send them exactly as stored
    response.headers["location"] = origin_url
    return response
