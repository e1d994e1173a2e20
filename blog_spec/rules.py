"""Field rules and the standard rule sets.

A rule is data: a name, the front matter field it reads, a predicate over a
FieldValue, and a failure message template with a ``{document}`` placeholder.
New checks are added by declaring rules, not by touching extraction code.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .exceptions import RuleDefinitionError
from .models import FieldValue

Predicate = Callable[[FieldValue], bool]

DOCUMENT_PLACEHOLDER = "{document}"


@dataclass(frozen=True)
class FieldRule:
    """A named check of one front matter field."""

    name: str
    field: str
    predicate: Predicate
    message_template: str

    def __post_init__(self):
        if not self.name:
            raise RuleDefinitionError("Rule name must not be empty")
        if not self.field:
            raise RuleDefinitionError("Rule field must not be empty", rule_name=self.name)
        if not callable(self.predicate):
            raise RuleDefinitionError(f"Predicate of rule '{self.name}' is not callable", rule_name=self.name)
        if DOCUMENT_PLACEHOLDER not in self.message_template:
            raise RuleDefinitionError(
                f"Message template of rule '{self.name}' has no {DOCUMENT_PLACEHOLDER} placeholder",
                rule_name=self.name,
            )

    def format_message(self, document: str) -> str:
        return self.message_template.format(document=document)


# --- Predicates ---


def equals(expected: Any) -> Predicate:
    """Present and strictly equal to ``expected``.

    The value type must match as well, so ``"true"`` or ``1`` never equal
    ``True``.
    """

    def predicate(value: FieldValue) -> bool:
        if value.is_missing:
            return False
        return type(value.value) is type(expected) and value.value == expected

    predicate.__name__ = f"equals({expected!r})"
    return predicate


def is_present(value: FieldValue) -> bool:
    """Present and not null."""
    return value.present and value.value is not None


# --- Rule sets ---


def validate_rule_set(rules: Sequence[FieldRule]) -> tuple[FieldRule, ...]:
    """Return ``rules`` as a tuple after checking rule names are unique."""
    seen: set[str] = set()
    for rule in rules:
        if rule.name in seen:
            raise RuleDefinitionError(f"Duplicate rule name '{rule.name}'", rule_name=rule.name)
        seen.add(rule.name)
    return tuple(rules)


def standard_post_rules(author: str) -> tuple[FieldRule, ...]:
    """Rules every published post must satisfy."""
    return validate_rule_set(
        [
            FieldRule("comments", "comments", equals(True), "Post {document} does not have comments enabled"),
            FieldRule("share", "share", equals(True), "Post {document} does not have sharing enabled"),
            FieldRule("layout", "layout", equals("post"), "Post {document} does not have a post layout"),
            FieldRule(
                "author",
                "author",
                equals(author),
                "Post {document} does not have an author equal to " + _escape(author),
            ),
            FieldRule("date", "date", is_present, "Post {document} does not have a publication date"),
            FieldRule("title", "title", is_present, "Post {document} does not have a title"),
        ]
    )


def standard_config_rules(permalink: str, url: str) -> tuple[FieldRule, ...]:
    """Rules for the site-wide configuration file."""
    return validate_rule_set(
        [
            FieldRule(
                "permalink",
                "permalink",
                equals(permalink),
                "Configuration {document} does not have the permalink format " + _escape(permalink),
            ),
            FieldRule(
                "url",
                "url",
                equals(url),
                "Configuration {document} does not have the url set to " + _escape(url),
            ),
        ]
    )


def _escape(literal: str) -> str:
    """Escape braces so a literal survives str.format."""
    return literal.replace("{", "{{").replace("}", "}}")
