"""Tests for waypost.config — SiteConfig frozen dataclass."""

from pathlib import Path

import pytest

from waypost.config import DEFAULT_ROUTES, SiteConfig
from waypost.errors import ConfigurationError


class TestSiteConfig:
    def test_defaults(self) -> None:
        cfg = SiteConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 3000
        assert cfg.debug is False
        assert cfg.root_dir == "."
        assert cfg.routes == DEFAULT_ROUTES
        assert cfg.not_found_template == "index3.html"
        assert cfg.static_extensions == (".css", ".js", ".png")
        assert cfg.default_content_type == "text/plain"

    def test_override(self) -> None:
        cfg = SiteConfig(host="0.0.0.0", port=8888, debug=True)

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 8888
        assert cfg.debug is True

    def test_frozen(self) -> None:
        cfg = SiteConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_root_dir_as_path(self) -> None:
        cfg = SiteConfig(root_dir=Path("public"))
        assert cfg.root_dir == Path("public")


class TestTables:
    def test_route_table(self) -> None:
        table = SiteConfig().route_table
        assert table["/"] == "index.html"
        assert table["/calculator"] == "index2.html"

    def test_route_table_is_read_only(self) -> None:
        table = SiteConfig().route_table
        with pytest.raises(TypeError):
            table["/new"] = "new.html"  # type: ignore[index]

    def test_content_type_table(self) -> None:
        table = SiteConfig().content_type_table
        assert table[".css"] == "text/css; charset=utf-8"
        assert table[".png"] == "image/png"
        assert table[".ico"] == "image/x-icon"


class TestValidate:
    def test_defaults_are_valid(self) -> None:
        SiteConfig().validate()

    def test_template_suffix_cannot_be_static(self) -> None:
        cfg = SiteConfig(static_extensions=(".css", ".html"))
        with pytest.raises(ConfigurationError, match="cannot also be a static"):
            cfg.validate()

    def test_extension_needs_leading_dot(self) -> None:
        cfg = SiteConfig(static_extensions=("css",))
        with pytest.raises(ConfigurationError, match="must start with"):
            cfg.validate()

    def test_route_needs_leading_slash(self) -> None:
        cfg = SiteConfig(routes=(("about", "about.html"),))
        with pytest.raises(ConfigurationError, match="must start with '/'"):
            cfg.validate()

    def test_route_must_point_at_template(self) -> None:
        cfg = SiteConfig(routes=(("/about", "about.txt"),))
        with pytest.raises(ConfigurationError, match="not a .html template"):
            cfg.validate()

    def test_not_found_page_must_be_template(self) -> None:
        cfg = SiteConfig(not_found_template="404.txt")
        with pytest.raises(ConfigurationError, match="Not-found page"):
            cfg.validate()

    def test_port_range(self) -> None:
        with pytest.raises(ConfigurationError, match="out of range"):
            SiteConfig(port=70000).validate()


class TestFromEnv:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAYPOST_HOST", "0.0.0.0")
        monkeypatch.setenv("WAYPOST_PORT", "8888")
        monkeypatch.setenv("WAYPOST_DEBUG", "true")
        monkeypatch.setenv("WAYPOST_ROOT_DIR", "/srv/site")
        monkeypatch.setenv("WAYPOST_LOG_LEVEL", "DEBUG")

        cfg = SiteConfig.from_env()

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 8888
        assert cfg.debug is True
        assert cfg.root_dir == "/srv/site"
        assert cfg.log_level == "debug"

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAYPOST_PORT", "8888")
        cfg = SiteConfig.from_env(port=9000)
        assert cfg.port == 9000

    def test_empty_environment_gives_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("HOST", "PORT", "DEBUG", "ROOT_DIR", "LOG_LEVEL"):
            monkeypatch.delenv(f"WAYPOST_{name}", raising=False)
        assert SiteConfig.from_env() == SiteConfig()

    def test_debug_falsy_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAYPOST_DEBUG", "no")
        assert SiteConfig.from_env().debug is False

    def test_bad_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAYPOST_PORT", "eighty")
        with pytest.raises(ConfigurationError, match="must be an integer"):
            SiteConfig.from_env()

    def test_unknown_override(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown config field"):
            SiteConfig.from_env(colour="blue")

    def test_custom_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SITE_PORT", "4000")
        assert SiteConfig.from_env(prefix="SITE_").port == 4000
