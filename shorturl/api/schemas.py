"""
API Response Schemas

Pydantic models for API responses, kept apart from the endpoints so tests
and other modules can import them.
"""

from pydantic import BaseModel, Field


class AddUrlResponse(BaseModel):
    """Response model for the create-short-url endpoint."""
    gen_url: str = Field(..., description="Service address followed by '/' and the short id")
    origin_url: str = Field(..., description="The original URL, echoed back verbatim")
