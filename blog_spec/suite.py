"""Site-level validation suite.

SiteSpecSuite runs the post rules over every discovered post and the config
rules over the site configuration file, returning a SuiteReport. A read
failure on one post is recorded on that post's report and the run continues.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Sequence
from pathlib import Path

from .config import Settings
from .config import get_settings
from .discovery import discover_posts
from .discovery import load_document
from .discovery import load_site_config
from .exceptions import BlogSpecError
from .exceptions import ConfigFileError
from .exceptions import DocumentReadError
from .logger_config import ErrorCategory
from .logger_config import log_structured_error
from .models import DocumentReport
from .models import SuiteReport
from .rules import FieldRule
from .rules import standard_config_rules
from .rules import standard_post_rules
from .rules import validate_rule_set
from .validator import FrontMatterValidator

logger = logging.getLogger(__name__)


class SiteSpecSuite:
    """Validate a site's posts and configuration file."""

    def __init__(
        self,
        settings: Settings | None = None,
        post_rules: Sequence[FieldRule] | None = None,
        config_rules: Sequence[FieldRule] | None = None,
        validator: FrontMatterValidator | None = None,
    ):
        self.settings = settings or get_settings()
        self.validator = validator or FrontMatterValidator()
        if post_rules is None:
            self.post_rules = standard_post_rules(self.settings.expected_author)
        else:
            self.post_rules = validate_rule_set(post_rules)
        if config_rules is None:
            self.config_rules = standard_config_rules(
                self.settings.expected_permalink,
                self.settings.expected_url,
            )
        else:
            self.config_rules = validate_rule_set(config_rules)

    def post_paths(self) -> list[Path]:
        return discover_posts(self.settings.posts_path, self.settings.posts_pattern)

    def validate_post(self, path: Path) -> DocumentReport:
        """Validate one post; a read failure becomes the report's error."""
        try:
            document = load_document(path)
        except DocumentReadError as e:
            self._log_failure(e, "validate_post")
            return DocumentReport(document=str(path), error=e.to_dict())

        results = list(self.validator.validate_document(document, self.post_rules))
        failed = sum(1 for result in results if not result.passed)
        if failed:
            logger.info("Post %s failed %d of %d rules", document.identifier, failed, len(results))
        else:
            logger.debug("Post %s passed all rules", document.identifier)
        return DocumentReport(document=document.identifier, results=results)

    def validate_posts(self, paths: Iterable[Path] | None = None) -> list[DocumentReport]:
        if paths is None:
            paths = self.post_paths()
        return [self.validate_post(Path(path)) for path in paths]

    def validate_config(self, path: Path | None = None) -> DocumentReport:
        path = Path(path) if path is not None else self.settings.config_path
        try:
            config = load_site_config(path)
        except (DocumentReadError, ConfigFileError) as e:
            self._log_failure(e, "validate_config")
            return DocumentReport(document=str(path), error=e.to_dict())

        results = list(self.validator.validate_mapping(str(path), config, self.config_rules))
        return DocumentReport(document=str(path), results=results)

    def run(self) -> SuiteReport:
        """Validate every post and the configuration file."""
        paths = self.post_paths()
        logger.info("Validating %d posts under %s", len(paths), self.settings.posts_path)
        report = SuiteReport(posts=self.validate_posts(paths), config=self.validate_config())
        logger.info(
            "Validation finished: %d failures, %d errors",
            len(report.failures),
            len(report.errors),
        )
        return report

    def _log_failure(self, error: BlogSpecError, operation: str) -> None:
        log_structured_error(
            category=ErrorCategory.ERROR,
            message=error.message,
            exception=error,
            operation=operation,
            context={"document": error.details.get("path")},
        )
