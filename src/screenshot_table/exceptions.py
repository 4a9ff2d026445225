"""Custom exceptions for screenshot table conversion."""

NO_IMAGES_MESSAGE = (
    "No valid images found in the input. Make sure your HTML contains "
    'img tags with both alt="..." and src="..." attributes.'
)
EMPTY_INPUT_MESSAGE = (
    "Input is empty. Please provide some HTML content with image tags first."
)


class ConversionError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class NoImagesFoundError(ConversionError):
    """Raised when no ``<img>`` tag carries both an alt and a src value.

    This is distinct from a successful conversion that renders an empty
    table, so callers can show a specific message.
    """

    def __init__(self, message: str = NO_IMAGES_MESSAGE):
        super().__init__(message)


class EmptyInputError(NoImagesFoundError):
    """Raised when the input text is empty or only whitespace."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)
