"""Domain value objects for Chatly."""

from enum import Enum

from pydantic import field_validator

from chatly.domain.value.common import ValueObject

ANONYMOUS_NAME = "Anonymous"
ANONYMOUS_ID = "anon"


class VoteState(str, Enum):
    """Lifecycle state of a vote record.

    Votes are never deleted: removing an upvote archives the record, and a
    later upvote creates a fresh record instead of reactivating it.
    """

    ACTIVE = "active"
    ARCHIVED = "archived"


class VerifiedIdentity(ValueObject):
    """Identity extracted from a verified ID token."""

    uid: str
    email: str | None = None
    name: str | None = None

    @field_validator("uid")
    @classmethod
    def validate_uid(cls, v: str) -> str:
        """Validate uid is not blank."""
        if not v.strip():
            raise ValueError("uid must not be empty")
        return v


class Author(ValueObject):
    """Display name and id attached to posts and comments."""

    name: str
    id: str

    @classmethod
    def resolve(
        cls,
        identity: VerifiedIdentity | None,
        fallback_name: str | None = None,
        fallback_id: str | None = None,
    ) -> "Author":
        """Pick the author, preferring the verified identity over client input.

        Args:
            identity: Verified identity of the caller, if any
            fallback_name: Name supplied in the request body
            fallback_id: Id supplied in the request body

        Returns:
            Author, defaulting to Anonymous/anon
        """
        name = (identity.name if identity else None) or (fallback_name or "").strip()
        author_id = (identity.uid if identity else None) or (fallback_id or "").strip()
        return cls(name=name or ANONYMOUS_NAME, id=author_id or ANONYMOUS_ID)
