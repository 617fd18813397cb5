"""
Short Link Service

This service handles the core business logic for URL shortening:
- Validating origin URLs before anything is generated or stored
- Generating short ids and storing them through the gateway
- Retrying with a fresh id when a generated id collides
- Resolving short ids back to origin URLs

Separated from the API layer so endpoints stay thin and the logic can be
tested against any gateway.
"""

import logging

from shorturl.db.gateway import ShortLinkGateway
from shorturl.db.models import ShortLink
from shorturl.services.id_generator import IdGenerator
from shorturl.core.exceptions import (
    DuplicateShortIdError,
    InvalidURLError,
    ShortIdExhaustedError,
    ShortLinkNotFoundError,
)
from shorturl.core.validators import is_valid_url

logger = logging.getLogger(__name__)


class ShortLinkService:
    """
    Core business logic for creating and resolving short links.
    """

    def __init__(
        self,
        gateway: ShortLinkGateway,
        id_generator: IdGenerator,
        max_attempts: int = 3
    ):
        """
        Initialize the short link service.

        Args:
            gateway: Persistence gateway for ShortLink records
            id_generator: Source of new short ids
            max_attempts: Insert attempts before giving up on id collisions
        """
        self.gateway = gateway
        self.id_generator = id_generator
        self.max_attempts = max_attempts

    async def create_short_link(self, origin_url: str) -> ShortLink:
        """
        Create a new short link for an origin URL.

        Every call generates a fresh id, even for a URL shortened before.

        Args:
            origin_url: The URL to shorten, stored verbatim

        Returns:
            The stored ShortLink

        Raises:
            InvalidURLError: If origin_url is not a well-formed URL
            ShortIdExhaustedError: If every generated id collided
            DatabaseError: If the database or the pool fails
        """
        if not is_valid_url(origin_url):
            raise InvalidURLError(origin_url)

        for attempt in range(1, self.max_attempts + 1):
            short_id = self.id_generator.generate()
            try:
                short_link = await self.gateway.insert(short_id, origin_url)
            except DuplicateShortIdError:
                logger.warning(
                    f"Short id collision on '{short_id}' "
                    f"(attempt {attempt}/{self.max_attempts})"
                )
                continue

            logger.info(f"Created short id {short_link.id}")
            return short_link

        raise ShortIdExhaustedError(self.max_attempts)

    async def resolve(self, short_id: str) -> str:
        """
        Resolve a short id to its origin URL. Read-only.

        Raises:
            ShortLinkNotFoundError: If no record exists for short_id
            DatabaseError: If the database or the pool fails
        """
        short_link = await self.gateway.find_by_id(short_id)
        if short_link is None:
            raise ShortLinkNotFoundError(short_id)
        return short_link.url
