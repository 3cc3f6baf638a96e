class InvalidInput(ValueError):
    """A bitmap, width or ramp that cannot be converted."""


class DecodeFailure(ValueError):
    """The source could not be decoded as an image."""
