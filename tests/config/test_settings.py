"""Tests for OrderflowSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from orderflow.config.settings import OrderflowSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ORDERFLOW_CONFIG", raising=False)
    monkeypatch.delenv("ORDERFLOW_QUIET", raising=False)
    monkeypatch.delenv("ORDERFLOW_DISPLAY__CURRENCY", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = OrderflowSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.display.currency == "UAH"
        assert settings.plugins.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = OrderflowSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "orderflow.toml").write_text('[display]\ncurrency = "EUR"\n')
        settings = OrderflowSettings.from_cli(start=tmp_path)
        assert settings.display.currency == "EUR"
        assert settings.display.separator == "\n---\n"
        assert settings.config_path == tmp_path / "orderflow.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[plugins]\nenabled = false\n")
        settings = OrderflowSettings.from_cli(config_path=str(custom))
        assert settings.plugins.enabled is False
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "orderflow.toml").write_text("[display\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            OrderflowSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = OrderflowSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "orderflow.toml").write_text('[display]\ncurrency = "EUR"\n')
        monkeypatch.setenv("ORDERFLOW_DISPLAY__CURRENCY", "USD")
        settings = OrderflowSettings.from_cli(start=tmp_path)
        assert settings.display.currency == "USD"

    def test_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ORDERFLOW_QUIET", "false")
        settings = OrderflowSettings.from_cli(start=tmp_path, quiet=True)
        assert settings.quiet is True
