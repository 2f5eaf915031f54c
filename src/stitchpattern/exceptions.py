"""Exception hierarchy for Stitchpattern."""


class StitchPatternError(Exception):
    """Base exception for all Stitchpattern errors."""

    pass


class ImageError(StitchPatternError):
    """Errors related to loading source images."""

    pass


class ImageDecodeError(ImageError):
    """The source image could not be decoded into a bitmap."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to decode image '{source}': {reason}")


class PatternError(StitchPatternError):
    """Errors related to building the stitch grid."""

    pass


class InvalidDimensionError(PatternError):
    """The stitch grid would have zero columns or rows."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Invalid stitch grid {width}x{height}: both dimensions must be at least 1"
        )


class RenderError(StitchPatternError):
    """A drawing surface could not be produced or drawn on."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Rendering to {target} failed: {reason}")


class ExportError(StitchPatternError):
    """Error writing a rendered pattern to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


class StorageUnavailableError(StitchPatternError):
    """A persistence collaborator could not store a snapshot."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Storage unavailable: {reason}")
