"""Shared test fixtures for vsthemer."""

import os
import tempfile
from pathlib import Path

import pytest

# Keep test runs out of the user's log directory; must happen before vsthemer.logger is imported
os.environ.setdefault("VSTHEMER_LOG_DIR", str(Path(tempfile.gettempdir()) / "vsthemer-test-logs"))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings file at a temporary directory.

    Returns:
        Path to the temporary config directory.
    """
    config_dir = tmp_path / "config"
    monkeypatch.setenv("VSTHEMER_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def dark_plus_xml() -> str:
    """Minimal theme with a single background color."""
    return """<Theme Name="Dark+" GUID="{guid1}">
  <Category Name="Editor" GUID="{guid2}">
    <Color Name="Background">
      <Background Type="CT_RAW" Source="FF1E1E1E" />
    </Color>
  </Category>
</Theme>"""


@pytest.fixture
def sample_theme_xml() -> str:
    """A theme file as Visual Studio writes it, with several categories."""
    return """<?xml version="1.0" encoding="utf-8"?>
<Themes>
  <Theme Name="Solarized Dark" GUID="{11111111-2222-3333-4444-555555555555}" BaseGUID="{1ded0138-47ce-435e-84ef-9ec1f439b749}">
    <Category Name="Text Editor Text Marker Items" GUID="{ff349800-ea43-46c1-8c98-878e78f46501}">
      <Color Name="Plain Text">
        <Foreground Type="CT_RAW" Source="FF839496" />
        <Background Type="CT_RAW" Source="FF002B36" />
      </Color>
      <Color Name="Comment">
        <Foreground Type="CT_RAW" Source="FF586E75" />
      </Color>
      <Color Name="Keyword">
        <Foreground Type="CT_RAW" Source="#859900" />
      </Color>
    </Category>
    <Category Name="Environment" GUID="{624ed9c3-bdfd-41fa-96c3-7c824ea32e3d}">
      <Color Name="CommandBarGradient">
        <Background Type="CT_RAW" Source="073642" />
      </Color>
      <Color Name="ToolWindowBackground">
        <Background Type="CT_RAW" Source="FF002B36" />
      </Color>
    </Category>
  </Theme>
</Themes>"""


@pytest.fixture
def sample_theme_file(tmp_path: Path, sample_theme_xml: str) -> Path:
    """Write the sample theme to disk.

    Returns:
        Path to the written .vstheme file.
    """
    path = tmp_path / "themes" / "Solarized Dark.vstheme"
    path.parent.mkdir(parents=True)
    path.write_text(sample_theme_xml, encoding="utf-8")
    return path
