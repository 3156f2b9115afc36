"""Domain errors — every failure a command can surface to a chat user.

Each error carries a ``user_message`` that is safe to send back to the
channel. Dependency failures keep their technical detail in ``str(error)``
for the logs only.
"""

GENERIC_FAILURE = "Something went wrong on our side. Please try again later."


class TetramapError(Exception):
    """Base class for all application errors."""

    user_message: str = GENERIC_FAILURE

    def __init__(self, detail: str = "", user_message: str | None = None):
        super().__init__(detail or self.__class__.__name__)
        if user_message is not None:
            self.user_message = user_message


class InvalidArgument(TetramapError):
    """Empty or malformed command input."""

    user_message = "That command needs an argument."


class LocationNotFound(TetramapError):
    """The geocoding provider returned no candidates."""

    def __init__(self, query: str):
        super().__init__(
            f"No geocoding results for {query!r}",
            user_message=f"Could not find a location matching '{query}'.",
        )
        self.query = query


class ProviderUnavailable(TetramapError):
    """Transport or authentication failure talking to the geocoder."""


class StorageError(TetramapError):
    """Base class for storage backend failures."""


class StorageUnavailable(StorageError):
    """Transport or authentication failure talking to the storage backend."""


class StorageRejected(StorageError):
    """The storage backend refused a write (schema violation etc.)."""


class CorruptRecord(StorageError):
    """A stored location could not be decoded into a known variant."""


class ConfigurationError(TetramapError):
    """Required configuration is missing. Fatal at startup."""
