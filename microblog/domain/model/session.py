"""Per-client session state.

The session bag itself lives outside the core (a signed cookie in the HTTP
interface). The core only reads and writes these two fields and may destroy
the session.
"""

from microblog.domain.value import UserId


class Session:
    """Mutable session state for one client.

    Passed by reference through use case requests; use cases mutate it in
    place.
    """

    def __init__(self, user_id: UserId | None = None, logged_in: bool = False) -> None:
        self.user_id = user_id
        self.logged_in = logged_in
        self.destroyed = False

    def __repr__(self) -> str:
        return (
            f"Session(user_id={self.user_id!r}, logged_in={self.logged_in!r}, "
            f"destroyed={self.destroyed!r})"
        )

    def destroy(self) -> None:
        """Clear all state and mark the session for removal."""
        self.user_id = None
        self.logged_in = False
        self.destroyed = True
