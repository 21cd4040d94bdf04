"""Shared fixtures: a throwaway site directory and a Site serving it."""

from pathlib import Path

import pytest

from waypost.app import Site
from waypost.config import SiteConfig

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\xff\xfe"


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create the page templates and a few assets."""
    root = tmp_path / "site"
    root.mkdir()

    (root / "index.html").write_text("<h1>Home</h1>")
    (root / "index2.html").write_text("<h1>Calculator</h1>")
    (root / "index3.html").write_text("<h1>Page not found</h1>")
    (root / "style.css").write_text("body { color: red; }")
    (root / "script.js").write_text("console.log('hello');")
    (root / "logo.png").write_bytes(PNG_BYTES)

    assets = root / "assets"
    assets.mkdir()
    (assets / "main.css").write_text("h1 { font-size: 2em; }")

    return root


@pytest.fixture
def config(site_dir: Path) -> SiteConfig:
    return SiteConfig(root_dir=site_dir)


@pytest.fixture
def site(config: SiteConfig) -> Site:
    return Site(config)


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES
