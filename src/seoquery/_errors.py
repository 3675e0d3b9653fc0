"""seoquery error types."""


class SeoQueryError(Exception):
    """Base error for all seoquery failures."""


class InvalidInputError(SeoQueryError, ValueError):
    """A required input field is missing or blank."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"required field is missing or empty: {field}")
