"""
passcraft errors.

User-correctable errors (EmptySelection, LengthTooShort) carry a message meant
to be shown as-is. InvalidArgument signals a programming error.
"""


class PasscraftError(Exception):
    """Base error for all passcraft failures."""
    pass


class InvalidArgument(PasscraftError, ValueError):
    """Argument outside the range an operation accepts."""
    pass


class EmptySelection(PasscraftError):
    """No character class selected for password generation."""

    def __init__(self, message: str = "Select at least one character set"):
        super().__init__(message)


class LengthTooShort(PasscraftError):
    """Requested length cannot hold one character of every selected class."""

    def __init__(self, required: int):
        self.required = required
        super().__init__(
            f"Length must be at least {required} for selected character sets"
        )


class SourceNotReady(PasscraftError):
    """Word list missing, empty, or not loaded yet."""
    pass


class AlreadyLoaded(PasscraftError):
    """Word list already loaded; a WordSource is loaded once."""
    pass
