"""Identity proof domain service."""

import hashlib
import hmac

from microblog.config import AuthSettings
from microblog.domain.value import ExternalProof

from .base import Service


class ProofService(Service):
    """Derives the stored proof for a provider subject identifier.

    The proof is a keyed HMAC-SHA256, so the same subject always maps to the
    same proof and it can be looked up through an index, while the raw
    subject id is never persisted.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize proof service.

        Args:
            auth_settings: Authentication settings (provides identity_secret)
        """
        self._key = auth_settings.identity_secret.encode("utf-8")

    def derive(self, subject_id: str) -> ExternalProof:
        """Derive the proof for a subject id.

        Args:
            subject_id: Provider-issued subject identifier

        Returns:
            Hex encoded proof
        """
        digest = hmac.new(self._key, subject_id.encode("utf-8"), hashlib.sha256)
        return ExternalProof(digest.hexdigest())
