"""
Pydantic schemas for the social API.

Request schemas validate input shape; presence rules that produce
domain errors (such as a missing ``text``) are checked by the routes.
Response schemas define the JSON form of each entity inside the envelope.
No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CreatePostRequest(BaseModel):
    """Request schema for the post creation endpoint.

    Attributes:
        text: Body of the post. Required; declared optional so that
            a missing value is reported as a validation error by the route.
    """

    text: Optional[str] = Field(default=None, description="Body of the post")


class MetadataSchema(BaseModel):
    """JSON form of the service metadata."""

    name: str
    version: str


class UserSchema(BaseModel):
    """JSON form of a user."""

    id: str
    name: str
    created_at: datetime


class PostSchema(BaseModel):
    """JSON form of a post."""

    id: str
    author_id: str
    text: str
    created_at: datetime
