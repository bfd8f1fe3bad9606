"""In-memory stand-ins for the Playwright sync API, so no browser is needed."""
from contextlib import contextmanager

import pytest

from a11y_wcag_audit import browser as browser_mod, checks
from a11y_wcag_audit.probe import Available


class FakePage:
    def __init__(self, axe_data=None, styles=None, boxes=None, media=None, skip_link=False, goto_error=None):
        self.axe_data = axe_data or {"violations": [], "passes": [], "incomplete": []}
        self.styles = styles or []
        self.boxes = boxes or []
        self.media = media or []
        self.skip_link = skip_link
        self.goto_error = goto_error
        self.goto_calls = []
        self.scripts = []
        self.evaluated_args = {}

    def goto(self, url, wait_until=None, timeout=None):
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        if self.goto_error is not None:
            raise self.goto_error

    def add_script_tag(self, content=None, url=None, path=None):
        self.scripts.append(content)

    def evaluate(self, expression, arg=None):
        self.evaluated_args[expression] = arg
        if expression == browser_mod.AXE_RUN_JS:
            return self.axe_data
        if expression == checks.STYLE_TEXT_JS:
            return self.styles
        if expression == checks.TARGET_BOXES_JS:
            return self.boxes
        if expression == checks.MEDIA_TEXT_JS:
            return self.media
        if expression == checks.SKIP_LINK_JS:
            return self.skip_link
        raise AssertionError(f"unexpected script: {expression[:40]}")


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.closed = False

    def new_page(self):
        return self.page

    def close(self):
        self.closed = True


class FakeBrowserType:
    def __init__(self, browser):
        self.browser = browser
        self.launch_kwargs = None

    def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        return self.browser


class FakePlaywright:
    def __init__(self, page):
        self.browser = FakeBrowser(page)
        self.chromium = FakeBrowserType(self.browser)
        self.firefox = FakeBrowserType(self.browser)
        self.webkit = FakeBrowserType(self.browser)


def make_capability(page):
    pw = FakePlaywright(page)

    @contextmanager
    def driver():
        yield pw

    return Available(driver=driver, axe_source="window.axe = {};"), pw


@pytest.fixture
def fake_capability():
    """Factory: ``fake_capability(page)`` -> (Available, FakePlaywright)."""
    return make_capability


def violation(rule_id, impact, n_nodes, help_text=None, tags=None):
    return {
        "id": rule_id,
        "impact": impact,
        "help": help_text or f"{rule_id} help",
        "tags": tags if tags is not None else ["wcag2a", "wcag111", "cat.text-alternatives"],
        "nodes": [{"html": f"<img src=\"{rule_id}-{i}.png\">", "target": [f"#n{i}"]} for i in range(n_nodes)],
    }
