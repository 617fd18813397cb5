"""
FastAPI Dependencies

Request handlers reach process-wide objects (settings, session factory,
id generator) through app.state, which the app factory fills once at
startup. Nothing here is mutable global state.
"""

from fastapi import Depends, Request

from shorturl.core.setting import Settings
from shorturl.db.gateway import ShortLinkGateway
from shorturl.services.link_service import ShortLinkService


def get_app_settings(request: Request) -> Settings:
    """Settings injected into the application at creation time."""
    return request.app.state.settings


def get_gateway(request: Request) -> ShortLinkGateway:
    """Gateway bound to the application's pooled session factory."""
    return ShortLinkGateway(request.app.state.session_maker)


def get_link_service(
    request: Request,
    gateway: ShortLinkGateway = Depends(get_gateway),
) -> ShortLinkService:
    """Short link service wired with the gateway and the id generator."""
    return ShortLinkService(
        gateway,
        request.app.state.id_generator,
        max_attempts=request.app.state.settings.ID_GENERATION_ATTEMPTS,
    )
