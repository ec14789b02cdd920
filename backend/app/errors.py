"""Exceptions raised by the copy generation service."""

GENERIC_GENERATION_ERROR = "Failed to generate content. Please check your connection or API key."
GENERIC_ALERT = "Something went wrong. Please try again."


class CopyCraftError(Exception):
    """Base class for application errors."""


class GenerationError(CopyCraftError):
    """The model call failed. Always carries the generic user-facing message."""

    def __init__(self, message: str = GENERIC_GENERATION_ERROR):
        super().__init__(message)


class GenerationInProgressError(CopyCraftError):
    """A session already has a generation in flight."""


class BrandNotFoundError(CopyCraftError):
    """No brand is registered under the given id."""

    def __init__(self, brand_id: str):
        super().__init__(f"Brand not found: {brand_id}")
        self.brand_id = brand_id
