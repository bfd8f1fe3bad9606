import pytest

from a11y_wcag_audit.config import ConfigError, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("A11Y_AUDIT_URL", "A11Y_AUDIT_TIMEOUT_MS", "A11Y_AUDIT_BROWSER", "AXE_CORE_PATH"):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    s = load_settings()
    assert s.url == "http://localhost:3000"
    assert s.timeout_ms == 30000
    assert s.browser == "chromium"
    assert s.min_target_size == 44
    assert s.axe_path is None


def test_precedence_env_file_cli(monkeypatch, tmp_path):
    monkeypatch.setenv("A11Y_AUDIT_TIMEOUT_MS", "5000")
    monkeypatch.setenv("A11Y_AUDIT_BROWSER", "webkit")
    cfg = tmp_path / "audit.yaml"
    cfg.write_text("browser: firefox\nmin_target_size: 24\n", encoding="utf-8")
    s = load_settings(str(cfg), url="http://x.test", browser=None)
    assert s.timeout_ms == 5000  # env
    assert s.browser == "firefox"  # file beats env
    assert s.min_target_size == 24
    assert s.url == "http://x.test"  # CLI


def test_invalid_values_raise(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(browser="lynx")
    with pytest.raises(ConfigError):
        load_settings(timeout_ms=0)
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("colour: red\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Unknown config keys"):
        load_settings(str(cfg))


def test_malformed_yaml_raises_config_error(tmp_path):
    cfg = tmp_path / "broken.yaml"
    cfg.write_text("url: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(str(cfg))
