"""Exception hierarchy for blog-spec.

Content problems (missing or wrong front-matter fields) are never raised;
they are reported as failed validation results. The exceptions below cover
environment problems and invalid rule declarations:

- DocumentReadError: a post could not be read from disk
- ConfigFileError: the site configuration file is not a YAML mapping
- RuleDefinitionError: a FieldRule or rule set is malformed
"""

from __future__ import annotations

from typing import Any


class BlogSpecError(Exception):
    """Base class for all blog-spec errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
        user_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.user_message = user_message or message

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for structured logs and reports."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
        }


class DocumentReadError(BlogSpecError):
    """Raised when a document cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Could not read document {path}: {reason}",
            error_code="DOCUMENT_READ_ERROR",
            details={"path": path, "reason": reason},
            user_message=f"Document {path} is unreadable",
        )
        self.path = path
        self.reason = reason


class ConfigFileError(BlogSpecError):
    """Raised when the site configuration file is not a usable mapping."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Invalid configuration file {path}: {reason}",
            error_code="CONFIG_FILE_ERROR",
            details={"path": path, "reason": reason},
            user_message=f"Configuration file {path} could not be parsed",
        )
        self.path = path
        self.reason = reason


class RuleDefinitionError(BlogSpecError):
    """Raised when a rule or rule set is declared incorrectly."""

    def __init__(self, message: str, rule_name: str | None = None):
        super().__init__(
            message=message,
            error_code="RULE_DEFINITION_ERROR",
            details={"rule_name": rule_name} if rule_name else {},
        )
        self.rule_name = rule_name
