"""Exceptions raised while building icon files."""


class IcoError(Exception):
    """Base class for icopack errors.

    The message is prefixed with the operation that failed, and with the file
    path when one is known, e.g. ``icopack.from_file: 'logo.bmp': ...``.
    """

    def __init__(self, operation, message, path=None):
        self.operation = operation
        self.path = path
        self.reason = message
        if path is not None:
            message = f"'{path}': {message}"
        super().__init__(f"{operation}: {message}")

    def _details(self):
        return {}

    def with_path(self, operation, path):
        """Return an error of the same type that names operation and path."""
        return type(self)(operation, self.reason, path=path, **self._details())


class DecodeError(IcoError, ValueError):
    """Input bytes are not an image in a supported format."""


class SizeRangeError(IcoError, ValueError):
    """An image dimension or the image count does not fit the icon format."""

    def __init__(self, operation, message, width=None, height=None, path=None):
        self.width = width
        self.height = height
        super().__init__(operation, message, path=path)

    def _details(self):
        return {"width": self.width, "height": self.height}


class EncodeError(IcoError):
    """PNG encoding failed for an otherwise valid image."""
