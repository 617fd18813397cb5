"""
Database module.

This module provides:
- ShortLink: the persisted (id, url) model
- ShortLinkGateway: the only component reading or writing the urls table
- Engine and session factory construction with connection pooling
- Migration runner applying the embedded Alembic scripts
"""

from shorturl.db.models import ShortLink
from shorturl.db.gateway import ShortLinkGateway
from shorturl.db.session import create_engine, create_session_maker
from shorturl.db.migrate import run_migrations, run_migrations_async

__all__ = [
    "ShortLink",
    "ShortLinkGateway",
    "create_engine",
    "create_session_maker",
    "run_migrations",
    "run_migrations_async",
]
