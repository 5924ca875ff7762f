"""
Unified exception hierarchy for dc-http.
Single source of errors raised by configuration resolution.
"""

from typing import Dict, Any, Optional, List


class DcHttpError(Exception):
    """
    Base error for dc-http.

    Features:
    1. Structured serialization
    2. Rich context
    3. Resolution suggestions
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        self.message: str = message
        self.code: str = code or self.__class__.__name__
        self.context: Dict[str, Any] = context or {}
        self.cause: Optional[Exception] = cause
        self.suggestions: List[str] = []
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a plain dictionary.

        Returns:
            {
                "code": "ConfigFileError",
                "message": "../config.yaml:3 - mapping values are not allowed here",
                "context": {...}
            }
        """
        result: Dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }

        if self.cause:
            result["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}

        if self.suggestions:
            result["suggestions"] = self.suggestions

        return result

    def add_suggestion(self, suggestion: str) -> None:
        """
        Add a resolution hint to the error.

        Args:
            suggestion: Text describing how to fix the problem
        """
        if not suggestion or not isinstance(suggestion, str):
            return

        if suggestion not in self.suggestions:
            self.suggestions.append(suggestion)


class ConfigurationError(DcHttpError):
    """The resolved configuration cannot be used."""

    pass


class ConfigFileError(ConfigurationError):
    """
    The configuration file could not be opened or parsed.

    Carries the file/line/message triple reported by the parser.
    ``line`` is None when the failure is not tied to a position
    (missing file, permission denied, wrong top-level type).
    """

    def __init__(
        self,
        path: str,
        detail: str,
        line: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        self.path = path
        self.line = line
        self.detail = detail
        location = f"{path}:{line}" if line is not None else path
        super().__init__(
            f"{location} - {detail}",
            context={"path": path, "line": line},
            cause=cause,
        )


class ConfigReleasedError(DcHttpError):
    """A Config was released twice, or modified after release."""

    pass


__all__ = [
    "DcHttpError",
    "ConfigurationError",
    "ConfigFileError",
    "ConfigReleasedError",
]
