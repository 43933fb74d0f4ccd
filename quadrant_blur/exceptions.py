"""
Error taxonomy for the quadrant seam-blur pipeline.

Fatal errors propagate unmodified to the caller; a skipped edge blur is only
a warning record and has no exception type.
"""

from typing import Any, Dict, Optional


class QuadrantBlurError(Exception):
    """Base exception for all pipeline errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Args:
            message: Human-readable message, returned unchanged by str()
            details: Additional context for logs
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(QuadrantBlurError):
    """Raised when a configuration value is missing or invalid"""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value!r} ({reason})",
            {"key": key, "value": value},
        )


class DecodeError(QuadrantBlurError):
    """Raised when the source buffer cannot be decoded or has no readable dimensions"""
    pass


class TooSmallError(QuadrantBlurError):
    """Raised when either source dimension is below the configured minimum"""

    def __init__(self, width: int, height: int, min_size: int):
        super().__init__(
            f"Image too small. Minimum size: {min_size}x{min_size}px",
            {"width": width, "height": height, "min_size": min_size},
        )


class InvalidRegion(QuadrantBlurError):
    """Raised when a rectangle does not fit inside the image it addresses"""

    def __init__(self, rect: Any, width: int, height: int):
        super().__init__(
            f"Region {rect} does not fit inside a {width}x{height} image",
            {"rect": rect, "width": width, "height": height},
        )


class PersistenceError(QuadrantBlurError):
    """Raised when an image cannot be written to disk"""

    def __init__(self, path: Any, error: Exception):
        super().__init__(
            f"Failed to save image to {path}: {error}",
            {"path": str(path), "error_type": type(error).__name__},
        )
