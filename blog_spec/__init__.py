"""blog-spec: front matter and configuration checks for static blogs."""

from .discovery import discover_posts
from .discovery import load_document
from .discovery import load_site_config
from .exceptions import BlogSpecError
from .exceptions import ConfigFileError
from .exceptions import DocumentReadError
from .exceptions import RuleDefinitionError
from .models import Document
from .models import DocumentReport
from .models import FieldValue
from .models import SuiteReport
from .models import ValidationResult
from .rules import FieldRule
from .rules import equals
from .rules import is_present
from .rules import standard_config_rules
from .rules import standard_post_rules
from .suite import SiteSpecSuite
from .validator import FrontMatterValidator
from .validator import ValidationRun

__all__ = [
    "BlogSpecError",
    "ConfigFileError",
    "Document",
    "DocumentReadError",
    "DocumentReport",
    "FieldRule",
    "FieldValue",
    "FrontMatterValidator",
    "RuleDefinitionError",
    "SiteSpecSuite",
    "SuiteReport",
    "ValidationResult",
    "ValidationRun",
    "discover_posts",
    "equals",
    "is_present",
    "load_document",
    "load_site_config",
    "standard_config_rules",
    "standard_post_rules",
]
