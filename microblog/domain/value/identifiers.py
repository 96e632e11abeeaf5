"""Strongly typed identifiers for microblog entities.

Identifiers are store-assigned monotonic integers.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
