from __future__ import annotations

import logging
from pathlib import Path

import pytest

from slugpath.build.planner import plan_build, resolve_all
from slugpath.content.loader import load_build_config
from slugpath.core.exceptions import InvalidSlugError
from slugpath.core.models import BuildConfig, ContentDescriptor, OutputMapping

ROOT = Path("/srv/site/dist")


def _descriptor(slug: str, template: str = "page.html", **context: object) -> ContentDescriptor:
    return ContentDescriptor(slug=slug, template_source=Path(template), context=context)


def test_plan_build_maps_each_descriptor_in_order(site: Path) -> None:
    config = load_build_config(site / "data.yaml", Path("dist"))
    mappings = plan_build(config)

    dist = site / "dist"
    assert [m.destination_path for m in mappings] == [
        dist / "index.html",
        dist / "about" / "index.html",
        dist / "about" / "team" / "index.html",
        dist / "blog" / "index.html",
    ]
    assert [m.template_source.name for m in mappings] == [
        "home.html",
        "page.html",
        "page.html",
        "page.html",
    ]
    assert mappings[2].context == {"title": "<Team>"}


def test_plan_build_raises_first_invalid_slug() -> None:
    config = BuildConfig(
        descriptors=[_descriptor("ok"), _descriptor(""), _descriptor("---")],
        build_root=ROOT,
    )
    with pytest.raises(InvalidSlugError) as excinfo:
        plan_build(config)
    assert excinfo.value.slug == ""


def test_resolve_all_keeps_errors_in_position() -> None:
    results = resolve_all([_descriptor("a"), _descriptor("---"), _descriptor("b.md")], ROOT)

    assert isinstance(results[0], OutputMapping)
    assert isinstance(results[1], InvalidSlugError)
    assert results[1].slug == "---"
    assert isinstance(results[2], OutputMapping)
    assert results[2].destination_path == ROOT / "b" / "index.html"


def test_plan_build_uses_configured_index_name() -> None:
    config = BuildConfig(
        descriptors=[_descriptor("docs/")], build_root=ROOT, index_name="index.htm"
    )
    assert plan_build(config)[0].destination_path == ROOT / "docs" / "index.htm"


def test_shared_destinations_are_warned_about(caplog: pytest.LogCaptureFixture) -> None:
    config = BuildConfig(
        descriptors=[_descriptor("about", "a.html"), _descriptor("about.html", "b.html")],
        build_root=ROOT,
    )
    with caplog.at_level(logging.WARNING, logger="slugpath"):
        mappings = plan_build(config)

    assert len(mappings) == 2
    assert "both render to" in caplog.text


def test_empty_build_plans_nothing() -> None:
    assert plan_build(BuildConfig(build_root=ROOT)) == []
