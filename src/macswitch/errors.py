class MacSwitchError(Exception):
    """Base class for errors raised by macswitch."""


class NoMatchesError(MacSwitchError):
    """The ranker returned no Mac for the given machine (usually an empty catalog)."""

    def __init__(self, message="No matching Mac found"):
        super().__init__(message)


class CatalogUnavailableError(MacSwitchError):
    """Raised by callers that cannot proceed without catalog data."""

    def __init__(self, path=None):
        self.path = path
        where = f" at {path}" if path else ""
        super().__init__(f"Mac catalog is empty or missing{where}")


class ProfileNotFoundError(MacSwitchError):
    """No stored machine profile for the requested user."""

    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"No stored profile for user {user_id!r}")
