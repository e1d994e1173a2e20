"""Integration tests running SiteSpecSuite over sites built on disk."""

import pytest

from blog_spec.rules import FieldRule
from blog_spec.rules import equals
from blog_spec.suite import SiteSpecSuite

from ..shared.site_builder import CANONICAL_CONFIG
from ..shared.site_builder import make_post

pytestmark = pytest.mark.integration


def test_valid_site_passes(site_factory):
    settings = site_factory(
        {
            "2015-01-01-hello.md": make_post(),
            "2016/2016-03-04-nested.md": make_post(title="Nested"),
        }
    )

    report = SiteSpecSuite(settings).run()

    assert len(report.posts) == 2
    assert report.passed
    assert report.failures == []
    assert all(len(post.results) == 6 for post in report.posts)
    assert [result.rule for result in report.config.results] == ["permalink", "url"]


def test_failures_are_isolated_per_post(site_factory):
    settings = site_factory(
        {
            "2015-01-01-good.md": make_post(),
            "2015-01-02-untitled.md": make_post(title=...),
            "2015-01-03-no-comments.md": make_post(comments=False),
        }
    )

    report = SiteSpecSuite(settings).run()

    failures = {(failure.document.rsplit("/", 1)[-1], failure.rule) for failure in report.failures}
    assert failures == {
        ("2015-01-02-untitled.md", "title"),
        ("2015-01-03-no-comments.md", "comments"),
    }
    assert not report.passed


def test_post_without_front_matter_fails_every_rule(site_factory):
    settings = site_factory({"2015-01-01-bare.md": "# No front matter\n"})

    (post,) = SiteSpecSuite(settings).validate_posts()

    assert post.error is None
    assert len(post.failures) == 6


def test_unreadable_post_does_not_stop_others(site_factory, mocker):
    settings = site_factory(
        {
            "2015-01-01-a.md": make_post(),
            "2015-01-02-b.md": make_post(),
        }
    )
    mock_log_error = mocker.patch("blog_spec.suite.log_structured_error")
    broken = settings.posts_path / "2015-01-01-a.md"
    broken.write_bytes(b"\xff\xfe\x00not utf-8")

    reports = SiteSpecSuite(settings).validate_posts()

    assert reports[0].error["error_code"] == "DOCUMENT_READ_ERROR"
    assert reports[0].results == []
    assert reports[1].passed
    mock_log_error.assert_called_once()
    assert mock_log_error.call_args[1]["operation"] == "validate_post"


def test_config_mismatch_fails_only_that_rule(site_factory):
    settings = site_factory({}, config={**CANONICAL_CONFIG, "url": "http://example.com"})

    report = SiteSpecSuite(settings).validate_config()

    assert [failure.rule for failure in report.failures] == ["url"]
    assert report.failures[0].message.endswith("does not have the url set to http://jlordiales.me")


def test_expected_values_come_from_settings(site_factory):
    settings = site_factory(
        {"2015-01-01-a.md": make_post(author="someone")},
        config={"permalink": "/:title", "url": "http://example.com"},
        expected_author="someone",
        expected_permalink="/:title",
        expected_url="http://example.com",
    )

    assert SiteSpecSuite(settings).run().passed


def test_missing_config_file_is_reported(site_factory, mocker):
    mocker.patch("blog_spec.suite.log_structured_error")
    settings = site_factory({"2015-01-01-a.md": make_post()}, config=None)

    report = SiteSpecSuite(settings).run()

    assert report.config.error["error_code"] == "DOCUMENT_READ_ERROR"
    assert report.errors == [report.config.error]
    assert not report.passed


def test_custom_rules(site_factory):
    settings = site_factory({"2015-01-01-a.md": make_post(tags=["java"])})
    rules = [FieldRule("tags", "tags", equals(["java"]), "Post {document} is not tagged java")]

    (post,) = SiteSpecSuite(settings, post_rules=rules).validate_posts()

    assert [result.rule for result in post.results] == ["tags"]
    assert post.passed


def test_no_posts(site_factory):
    settings = site_factory({})

    report = SiteSpecSuite(settings).run()

    assert report.posts == []
    assert report.passed


def test_impossible_date_fails_only_that_post(site_factory):
    settings = site_factory(
        {
            "2015-02-30-bad-date.md": "---\nlayout: post\ntitle: Bad\ndate: 2015-02-30\n---\nbody\n",
            "2015-03-01-good.md": make_post(),
        }
    )

    report = SiteSpecSuite(settings).run()

    bad, good = report.posts
    assert bad.error is None
    assert len(bad.failures) == 6
    assert good.passed
    assert report.config.passed


def test_config_with_impossible_date_is_reported(site_factory, mocker):
    mock_log_error = mocker.patch("blog_spec.suite.log_structured_error")
    settings = site_factory({})
    settings.config_path.write_text(
        'permalink: "/:year/:month/:day/:title"\nurl: "http://jlordiales.me"\nlast_built: 2015-13-01\n',
        encoding="utf-8",
    )

    report = SiteSpecSuite(settings).validate_config()

    assert report.error["error_code"] == "CONFIG_FILE_ERROR"
    assert report.results == []
    assert mock_log_error.call_args[1]["operation"] == "validate_config"


def test_post_with_byte_order_mark_passes(site_factory):
    settings = site_factory({})
    path = settings.posts_path / "2015-01-01-bom.md"
    path.parent.mkdir(parents=True)
    path.write_bytes(make_post().encode("utf-8-sig"))

    (post,) = SiteSpecSuite(settings).validate_posts()

    assert post.passed
