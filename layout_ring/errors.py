"""
Error handling for layout ring operations.

Structured error codes with human-readable messages and recovery suggestions.
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for layout ring operations.

    Ranges:
    - 1000-1099: Naming errors
    - 1100-1199: Ring errors
    - 1200-1299: Host errors
    - 1300-1399: Configuration errors
    """

    INTERNAL_ERROR = -32603

    # Naming errors (1000-1099)
    NAME_COLLISION = 1000
    NAME_NOT_FOUND = 1001

    # Ring errors (1100-1199)
    OFFSET_OUT_OF_RANGE = 1100
    RING_EMPTY = 1101

    # Host errors (1200-1299)
    INVALID_CAPTURE = 1200

    # Configuration errors (1300-1399)
    CONFIG_LOAD_FAILED = 1300


class LayoutRingError(Exception):
    """Base exception for layout ring errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize layout ring error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON output.

        Returns:
            Error dictionary with code, message, suggestion, and context
        """
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result


class NameCollision(LayoutRingError):
    """A layout with this name already exists in the context."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            code=ErrorCode.NAME_COLLISION,
            message=f"A layout named '{name}' already exists",
            suggestion="Choose a different name or jump to the existing layout",
            context={"name": name}
        )


class NotFound(LayoutRingError, LookupError):
    """No layout with this name exists in the context."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            code=ErrorCode.NAME_NOT_FOUND,
            message=f"No layout named '{name}'",
            suggestion="List layouts to see the available names",
            context={"name": name}
        )


class OutOfRange(LayoutRingError, IndexError):
    """Ring offset outside the occupied slots."""

    def __init__(self, offset: int, length: int):
        self.offset = offset
        self.length = length
        super().__init__(
            code=ErrorCode.OFFSET_OUT_OF_RANGE,
            message=f"Ring offset {offset} out of range for {length} saved layout(s)",
            context={"offset": offset, "length": length}
        )


class RingEmpty(LayoutRingError):
    """Nothing saved to rotate into."""

    def __init__(self, operation: str, current_name: Optional[str] = None):
        self.operation = operation
        self.current_name = current_name
        context: Dict[str, Any] = {"operation": operation}
        if current_name is not None:
            context["current"] = current_name
        super().__init__(
            code=ErrorCode.RING_EMPTY,
            message=(
                f"Cannot {operation}: '{current_name}' is the only remaining layout"
                if current_name is not None
                else f"Cannot {operation}: this is the only remaining layout"
            ),
            suggestion="Create another layout first",
            context=context
        )


class InvalidCapture(LayoutRingError):
    """Host rejected a capture token (stale or from another context)."""

    def __init__(self, reason: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            code=ErrorCode.INVALID_CAPTURE,
            message=f"Cannot restore layout: {reason}",
            context=context
        )


class ConfigLoadError(LayoutRingError):
    """Configuration loading error."""

    def __init__(self, file_path: str, reason: str):
        """
        Initialize configuration load error.

        Args:
            file_path: Path to configuration file
            reason: Reason for load failure
        """
        super().__init__(
            code=ErrorCode.CONFIG_LOAD_FAILED,
            message=f"Failed to load configuration from {file_path}: {reason}",
            suggestion="Check file syntax and option values",
            context={"file_path": file_path, "reason": reason}
        )


def error_response(error: Exception) -> Dict[str, Any]:
    """
    Create error response dictionary from exception.

    Args:
        error: Exception to convert

    Returns:
        Error response dictionary
    """
    if isinstance(error, LayoutRingError):
        error_dict = error.to_dict()
    else:
        error_dict = {
            "code": ErrorCode.INTERNAL_ERROR.value,
            "message": str(error),
            "suggestion": "Run with --debug for details"
        }

    return {
        "status": "error",
        "error": error_dict
    }
