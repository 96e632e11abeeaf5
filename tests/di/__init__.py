"""Mock providers for testing."""

from .container import build_test_container
from .google import MockGoogleProvider
from .persistence import MockPersistenceProvider

__all__ = [
    "MockGoogleProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
