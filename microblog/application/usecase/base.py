"""Base request models for use cases."""

from pydantic import BaseModel, ConfigDict


class SessionRequest(BaseModel):
    """Request carrying the caller's session state.

    The session is passed by reference; use cases mutate it and the
    interface layer persists the result.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)
