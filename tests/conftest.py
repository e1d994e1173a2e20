"""The pytest configuration for blog-spec testing."""

import os

import pytest

from blog_spec.config import Settings
from blog_spec.config import reset_settings
from blog_spec.rules import standard_post_rules
from blog_spec.validator import FrontMatterValidator

from .shared.site_builder import CANONICAL_CONFIG
from .shared.site_builder import write_site


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep BLOG_SPEC_* variables from the caller's shell out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("BLOG_SPEC_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def validator():
    return FrontMatterValidator()


@pytest.fixture
def post_rules():
    return standard_post_rules("jlordiales")


@pytest.fixture
def site_factory(tmp_path):
    """Factory building a site under tmp_path and returning matching Settings."""

    def _create_site(posts: dict[str, str], config: dict | None = CANONICAL_CONFIG, **settings_overrides) -> Settings:
        write_site(tmp_path, posts, config)
        return Settings(_env_file=None, site_root=str(tmp_path), **settings_overrides)

    return _create_site


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "integration: marks tests that build a site on disk")
