"""Data models for blog-spec.

This module contains:
- Document: raw post text plus its identifier
- FieldValue: a front matter lookup that keeps "missing" apart from None/False
- ValidationResult: outcome of one rule against one document
- DocumentReport / SuiteReport: aggregated results handed to the harness
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

__all__ = [
    "Document",
    "FieldValue",
    "ValidationResult",
    "DocumentReport",
    "SuiteReport",
]


class Document(BaseModel):
    """A single input text file, e.g. one blog post."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    raw_text: str


class FieldValue(BaseModel):
    """Tagged optional produced by a front matter lookup.

    ``present`` is False only when the key is absent; a key set to ``null`` or
    ``false`` is present with that value.
    """

    model_config = ConfigDict(frozen=True)

    present: bool
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> FieldValue:
        return cls(present=True, value=value)

    @classmethod
    def missing(cls) -> FieldValue:
        return cls(present=False)

    @classmethod
    def lookup(cls, mapping: dict[str, Any], field: str) -> FieldValue:
        """Look ``field`` up in ``mapping``."""
        if field in mapping:
            return cls.of(mapping[field])
        return cls.missing()

    @property
    def is_missing(self) -> bool:
        return not self.present


class ValidationResult(BaseModel):
    """Outcome of one FieldRule applied to one document."""

    model_config = ConfigDict(frozen=True)

    document: str
    rule: str
    passed: bool
    message: str | None = None  # Set only on failure


class DocumentReport(BaseModel):
    """All rule results for one document, or the error that prevented them."""

    document: str
    results: list[ValidationResult] = Field(default_factory=list)
    error: dict[str, Any] | None = None

    @property
    def failures(self) -> list[ValidationResult]:
        return [result for result in self.results if not result.passed]

    @property
    def passed(self) -> bool:
        return self.error is None and not self.failures


class SuiteReport(BaseModel):
    """Report for a full site run: every post plus the site configuration."""

    posts: list[DocumentReport] = Field(default_factory=list)
    config: DocumentReport | None = None

    @property
    def reports(self) -> list[DocumentReport]:
        if self.config is None:
            return list(self.posts)
        return [*self.posts, self.config]

    @property
    def failures(self) -> list[ValidationResult]:
        return [failure for report in self.reports for failure in report.failures]

    @property
    def errors(self) -> list[dict[str, Any]]:
        return [report.error for report in self.reports if report.error is not None]

    @property
    def passed(self) -> bool:
        return all(report.passed for report in self.reports)
