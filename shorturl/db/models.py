"""
Database Models for the ShortURL Service

ShortLink stores the mapping between a short id and its origin URL.

Design Decisions:
- The short id itself is the primary key (it is the only lookup path)
- The URL is stored verbatim as text, without normalization
- Rows are immutable: there is no update or delete path
"""

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text


class ShortLink(SQLModel, table=True):
    """
    Table storing short id to origin URL mappings.

    Fields:
    - id: Public short id, primary key
    - url: The original (long) URL
    """
    __tablename__ = "urls"

    id: str = Field(sa_column=Column(Text, primary_key=True))
    url: str = Field(sa_column=Column(Text, nullable=False))
