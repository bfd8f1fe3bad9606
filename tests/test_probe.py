import pytest

from a11y_wcag_audit import probe
from a11y_wcag_audit.probe import Available, Unavailable, detect, locate_axe_source


def _install_axe(root):
    target = root / "node_modules" / "axe-core" / "axe.min.js"
    target.parent.mkdir(parents=True)
    target.write_text("/* axe */", encoding="utf-8")
    return target


def test_unavailable_without_playwright(monkeypatch, tmp_path):
    _install_axe(tmp_path)
    monkeypatch.setattr(probe, "playwright_installed", lambda: False)
    cap = detect(root=tmp_path)
    assert isinstance(cap, Unavailable)
    assert "playwright" in cap.reason


def test_unavailable_without_axe_source(monkeypatch, tmp_path):
    monkeypatch.setattr(probe, "playwright_installed", lambda: True)
    cap = detect(root=tmp_path)
    assert isinstance(cap, Unavailable)
    assert "axe-core" in cap.reason


def test_locate_axe_source(tmp_path):
    installed = _install_axe(tmp_path)
    assert locate_axe_source(root=tmp_path) == installed
    explicit = tmp_path / "vendor.js"
    explicit.write_text("x", encoding="utf-8")
    assert locate_axe_source(str(explicit), root=tmp_path) == explicit
    # an explicit path that is missing does not fall back to node_modules
    assert locate_axe_source(str(tmp_path / "nope.js"), root=tmp_path) is None


def test_available_reads_source(tmp_path):
    pytest.importorskip("playwright")
    _install_axe(tmp_path)
    cap = detect(root=tmp_path)
    assert isinstance(cap, Available)
    assert cap.axe_source == "/* axe */"
