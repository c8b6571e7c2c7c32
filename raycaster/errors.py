"""Exceptions raised by the ray tracer."""


class RaycasterError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(RaycasterError, ValueError):
    """A scene or camera parameter makes rendering impossible."""


class SceneFormatError(RaycasterError, ValueError):
    """A scene description could not be parsed.

    Args:
        message: What went wrong.
        line: 1-based line number in a text scene, if known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
