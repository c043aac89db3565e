from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from slugpath.core.models import BuildConfig, ContentDescriptor, OutputMapping
from slugpath.core.settings import BuildSettings


def test_descriptors_are_immutable() -> None:
    descriptor = ContentDescriptor(slug="a", template_source=Path("t.html"))
    with pytest.raises(ValidationError):
        descriptor.slug = "b"


def test_output_mapping_copies_template_and_context() -> None:
    descriptor = ContentDescriptor(
        slug="a", template_source=Path("t.html"), context={"k": "v"}
    )
    mapping = OutputMapping.from_descriptor(descriptor, Path("/out/a/index.html"))
    assert mapping.template_source == Path("t.html")
    assert mapping.context == {"k": "v"}
    assert mapping.destination_path == Path("/out/a/index.html")


def test_build_root_is_made_absolute() -> None:
    config = BuildConfig(build_root=Path("dist"))
    assert config.build_root.is_absolute()
    assert config.descriptors == []


@pytest.mark.parametrize("name", ["index", ".html", "a/index.html", ""])
def test_index_name_must_be_a_dotted_filename(name: str) -> None:
    with pytest.raises(ValidationError):
        BuildConfig(build_root=Path("/out"), index_name=name)


def test_settings_defaults() -> None:
    settings = BuildSettings()
    assert settings.content_file == Path("data.yaml")
    assert settings.build_dir == Path("dist")
    assert settings.index_name == "index.html"


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLUGPATH_BUILD_DIR", "/var/www")
    monkeypatch.setenv("slugpath_index_name", "default.htm")
    settings = BuildSettings()
    assert settings.build_dir == Path("/var/www")
    assert settings.index_name == "default.htm"
