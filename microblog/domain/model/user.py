"""User aggregate root.

Users authenticate either with a local handle or through an external
identity provider. Both paths converge on this single record: a
provider-linked account simply carries an ``external_proof``.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from microblog.domain.model.common import DomainModel
from microblog.domain.value import ExternalProof, Handle, UserId


class NewUser(DomainModel):
    """User fields known before the store assigns an id."""

    # None while the account is unclaimed (provider registration in progress)
    handle: Optional[Handle] = None
    external_proof: Optional[ExternalProof] = None
    email: Optional[str] = None
    avatar_ref: Optional[str] = None
    member_since: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class User(NewUser):
    """Stored user."""

    id: UserId

    @property
    def is_claimed(self) -> bool:
        """Whether the user has a usable handle."""
        return self.handle is not None

    @property
    def is_provider_linked(self) -> bool:
        """Whether the account was created through an identity provider."""
        return self.external_proof is not None
