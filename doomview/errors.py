"""Error type shared across the package."""


class GeneralError(Exception):
    """An error described by a single human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message