"""Exception types raised by the engines and the layers around them."""


class ValidationError(ValueError):
    """Malformed parameters or buffers, detected before any output is built."""


class ImageNotFoundError(KeyError):
    """No image is stored under the requested name."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Image '{self.name}' not found"


class ImageFormatError(ValueError):
    """An image file could not be read or written."""
