from __future__ import annotations

from pathlib import Path

import pytest

CONTENT = """\
- slug: /
  template: templates/home.html
  context:
    title: Home
- slug: about
  template: templates/page.html
  context:
    title: About us
- slug: about/team.html
  template: templates/page.html
  context:
    title: <Team>
- slug: blog/
  template: templates/page.html
"""


@pytest.fixture()
def site(tmp_path: Path) -> Path:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "home.html").write_text("<h1>{{ title }}</h1>\n", encoding="utf-8")
    (templates / "page.html").write_text(
        "{% if title %}\n<h1>{{ title }}</h1>\n{% endif %}\n<p>{{ missing }}</p>\n",
        encoding="utf-8",
    )
    (tmp_path / "data.yaml").write_text(CONTENT, encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SLUGPATH_CONTENT_FILE", "SLUGPATH_BUILD_DIR", "SLUGPATH_INDEX_NAME"):
        monkeypatch.delenv(name, raising=False)
