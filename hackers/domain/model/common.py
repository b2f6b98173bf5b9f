"""Shared base for domain records."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain record.

    Posts and comments are never edited in place. Visibility and vote
    changes produce a new record with ``model_copy(update=...)`` which
    replaces the old one in its owner.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
