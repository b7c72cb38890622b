"""
Unit tests for StubwrightConfig and the global configuration.
"""

import pytest

from stubwright.config import StubwrightConfig, get_config, set_config


@pytest.mark.unit
def test_defaults():
    config = StubwrightConfig()
    assert config.default_name == "obj"
    assert config.function_name == "func"
    assert config.show_interactions is True
    assert config.max_interactions == 50


@pytest.mark.unit
def test_from_env(monkeypatch):
    monkeypatch.setenv("STUBWRIGHT_DEFAULT_NAME", "double")
    monkeypatch.setenv("STUBWRIGHT_FUNCTION_NAME", "fn")
    monkeypatch.setenv("STUBWRIGHT_SHOW_INTERACTIONS", "off")
    monkeypatch.setenv("STUBWRIGHT_MAX_INTERACTIONS", "5")
    config = StubwrightConfig.from_env()
    assert config == StubwrightConfig(
        default_name="double",
        function_name="fn",
        show_interactions=False,
        max_interactions=5,
    )


@pytest.mark.unit
@pytest.mark.parametrize("value, expected", [("1", True), ("True", True), ("yes", True), ("0", False), ("no", False)])
def test_from_env_booleans(monkeypatch, value, expected):
    monkeypatch.setenv("STUBWRIGHT_SHOW_INTERACTIONS", value)
    assert StubwrightConfig.from_env().show_interactions is expected


@pytest.mark.unit
def test_from_env_without_variables(monkeypatch):
    for name in (
        "STUBWRIGHT_DEFAULT_NAME",
        "STUBWRIGHT_FUNCTION_NAME",
        "STUBWRIGHT_SHOW_INTERACTIONS",
        "STUBWRIGHT_MAX_INTERACTIONS",
    ):
        monkeypatch.delenv(name, raising=False)
    assert StubwrightConfig.from_env() == StubwrightConfig()


@pytest.mark.unit
def test_set_config_replaces_global():
    custom = StubwrightConfig(function_name="callback")
    set_config(custom)
    assert get_config() is custom


@pytest.mark.unit
def test_set_config_none_reloads_from_env(monkeypatch):
    monkeypatch.setenv("STUBWRIGHT_FUNCTION_NAME", "from_env")
    set_config(None)
    assert get_config().function_name == "from_env"
