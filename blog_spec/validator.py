"""Front matter validation.

FrontMatterValidator extracts the front matter of a document once and
evaluates each FieldRule against it. Missing fields and value mismatches are
ordinary failed results; nothing here raises for content problems.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from collections.abc import Sequence
from typing import Any
from typing import overload

from .models import Document
from .models import FieldValue
from .models import ValidationResult
from .rules import FieldRule
from .rules import Predicate
from .utils.frontmatter import extract_front_matter

logger = logging.getLogger(__name__)


class ValidationRun(Sequence[ValidationResult]):
    """Lazy, restartable results of a rule set over one extracted mapping.

    Each iteration re-evaluates the rules; no result is cached between runs.
    """

    def __init__(
        self,
        validator: FrontMatterValidator,
        identifier: str,
        front_matter: dict[str, Any],
        rules: Sequence[FieldRule],
    ):
        self._validator = validator
        self._identifier = identifier
        self._front_matter = front_matter
        self._rules = tuple(rules)

    @property
    def identifier(self) -> str:
        return self._identifier

    def __iter__(self) -> Iterator[ValidationResult]:
        for rule in self._rules:
            yield self._check(rule)

    def __len__(self) -> int:
        return len(self._rules)

    @overload
    def __getitem__(self, index: int) -> ValidationResult: ...

    @overload
    def __getitem__(self, index: slice) -> list[ValidationResult]: ...

    def __getitem__(self, index: int | slice) -> ValidationResult | list[ValidationResult]:
        if isinstance(index, slice):
            return [self._check(rule) for rule in self._rules[index]]
        return self._check(self._rules[index])

    def _check(self, rule: FieldRule) -> ValidationResult:
        return self._validator.check_rule(self._front_matter, rule, self._identifier)

    def __repr__(self) -> str:
        return f"ValidationRun(identifier={self._identifier!r}, rules={[rule.name for rule in self._rules]!r})"


class FrontMatterValidator:
    """Validate documents' front matter against field rules."""

    def extract(self, document: Document) -> dict[str, Any]:
        """Return the document's front matter, or an empty dict when unusable."""
        front_matter = extract_front_matter(document.raw_text)
        if not front_matter:
            logger.debug("Document %s has no usable front matter", document.identifier)
        # Shallow copy so callers never share a mapping between runs
        return dict(front_matter)

    def check_field(
        self,
        front_matter: dict[str, Any],
        field: str,
        predicate: Predicate,
        message_template: str,
        document: str,
        rule_name: str | None = None,
    ) -> ValidationResult:
        """Apply ``predicate`` to ``field`` and build the result.

        Args:
            front_matter: Extracted mapping, possibly empty
            field: Key to look up; absence is passed to the predicate as missing
            predicate: Callable over a FieldValue
            message_template: Failure message with a ``{document}`` placeholder
            document: Identifier used in the failure message
            rule_name: Name recorded on the result, defaults to ``field``

        Returns:
            ValidationResult with ``message`` set only on failure
        """
        value = FieldValue.lookup(front_matter, field)
        passed = bool(predicate(value))
        message = None if passed else message_template.format(document=document)
        return ValidationResult(
            document=document,
            rule=rule_name or field,
            passed=passed,
            message=message,
        )

    def check_rule(self, front_matter: dict[str, Any], rule: FieldRule, document: str) -> ValidationResult:
        return self.check_field(
            front_matter,
            rule.field,
            rule.predicate,
            rule.message_template,
            document,
            rule_name=rule.name,
        )

    def validate_document(self, document: Document, rules: Sequence[FieldRule]) -> ValidationRun:
        """Extract once and return one result per rule, in rule order."""
        return ValidationRun(self, document.identifier, self.extract(document), rules)

    def validate_mapping(self, identifier: str, mapping: dict[str, Any], rules: Sequence[FieldRule]) -> ValidationRun:
        """Evaluate ``rules`` over an already-parsed mapping."""
        return ValidationRun(self, identifier, dict(mapping), rules)
