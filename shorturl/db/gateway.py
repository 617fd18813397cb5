"""
ShortLink Persistence Gateway

All reads and writes of the ``urls`` table go through this module.

Each operation opens its own session, which checks one connection out of
the engine's pool and returns it when the ``async with`` block exits,
whether the operation succeeded or raised. No connection is held across
operations or requests.

Failures are surfaced, never discarded:
- Primary-key collisions raise DuplicateShortIdError
- Every other storage or pool failure raises DatabaseError
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from shorturl.db.models import ShortLink
from shorturl.core.exceptions import DatabaseError, DuplicateShortIdError

logger = logging.getLogger(__name__)


class ShortLinkGateway:
    """Stores and retrieves ShortLink records through pooled sessions."""

    def __init__(self, session_maker: async_sessionmaker):
        """
        Args:
            session_maker: Factory producing sessions bound to the pooled engine
        """
        self.session_maker = session_maker

    async def insert(self, short_id: str, url: str) -> ShortLink:
        """
        Insert a new ShortLink record.

        Args:
            short_id: Generated short id (primary key)
            url: Origin URL, stored verbatim

        Returns:
            The stored ShortLink

        Raises:
            DuplicateShortIdError: If short_id is already taken
            DatabaseError: If the pool or the database fails
        """
        short_link = ShortLink(id=short_id, url=url)
        try:
            async with self.session_maker() as session:
                session.add(short_link)
                try:
                    await session.commit()
                except IntegrityError as e:
                    await session.rollback()
                    raise DuplicateShortIdError(short_id, original_error=e) from e
        except DuplicateShortIdError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert short id {short_id}: {e}", exc_info=True)
            raise DatabaseError(str(e), original_error=e) from e

        return short_link

    async def find_by_id(self, short_id: str) -> Optional[ShortLink]:
        """
        Look up a ShortLink by its short id.

        Args:
            short_id: The short id to look up

        Returns:
            ShortLink if found, None otherwise

        Raises:
            DatabaseError: If the pool or the database fails
        """
        try:
            async with self.session_maker() as session:
                return await session.get(ShortLink, short_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up short id {short_id}: {e}", exc_info=True)
            raise DatabaseError(str(e), original_error=e) from e
