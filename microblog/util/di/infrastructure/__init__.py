"""Infrastructure providers."""

# Import bases
from .avatar import AvatarProvider
from .google import GoogleProvider
from .oauth import OAuthAggregatorProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .google import ProdGoogleProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "AvatarProvider",
    "GoogleProvider",
    "OAuthAggregatorProvider",
    "PersistenceProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
]
