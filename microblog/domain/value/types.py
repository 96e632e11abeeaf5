"""Domain value objects for microblog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from microblog.domain.value.common import RootValueObject, ValueObject


class Handle(RootValueObject[str]):
    """A user's unique public display name.

    Distinct from any external-provider identifier. Compared exactly
    (case-sensitive).
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Handle must not be blank")
        if len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v


class TagName(RootValueObject[str]):
    """Tag attached to a post.

    Tags are plain strings matched exactly (case-sensitive).
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Tag must not be blank")
        if len(v) > 50:
            raise ValueError("Tag must be 1-50 characters")
        return v


class ExternalProof(RootValueObject[str]):
    """One-way derivation of a provider-issued subject identifier.

    Hex encoded HMAC-SHA256; the raw subject id is never stored.
    """

    @field_validator("root")
    @classmethod
    def validate_proof_format(cls, v: str) -> str:
        """Validate proof is a 64 character lowercase hex digest."""
        if not re.fullmatch(r"[0-9a-f]{64}", v):
            raise ValueError("Proof must be a 64 character hex digest")
        return v


class AuthProvider(str, Enum):
    """Supported external identity providers."""

    GOOGLE = "google"


class OAuthProviderInfo(ValueObject):
    """User info returned from an OAuth provider."""

    provider: AuthProvider
    subject_id: str  # Permanent ID issued by the provider ("sub" claim)
    email: str | None = None
    display_name: str | None = None
