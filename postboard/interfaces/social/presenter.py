"""
Presenter: domain entities to JSON-serializable values.

One implementation per entity type; unknown types are rejected.
"""

from functools import singledispatch
from typing import Any

from postboard.domain.social.entities import Metadata, Post, User
from postboard.interfaces.social.schemas import MetadataSchema, PostSchema, UserSchema


@singledispatch
def model_to_json(model: Any) -> Any:
    """Return the JSON-serializable form of a domain entity."""
    raise TypeError(f"No presenter registered for {type(model).__name__}")


@model_to_json.register
def _(model: Metadata) -> dict[str, Any]:
    return MetadataSchema(name=model.name, version=model.version).model_dump(
        mode="json"
    )


@model_to_json.register
def _(model: User) -> dict[str, Any]:
    return UserSchema(
        id=model.ref.value,
        name=model.name,
        created_at=model.created_at,
    ).model_dump(mode="json")


@model_to_json.register
def _(model: Post) -> dict[str, Any]:
    return PostSchema(
        id=model.ref.value,
        author_id=model.author.value,
        text=model.text,
        created_at=model.created_at,
    ).model_dump(mode="json")
