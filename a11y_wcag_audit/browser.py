"""Load one page in a headless browser and run axe-core against it.

The API is intentionally small: ``run_audit`` takes an ``Available``
capability from :mod:`probe` and returns an ``AuditOutcome``. Errors from
Playwright propagate to the caller; the browser is closed either way.
"""
from __future__ import annotations

from typing import Any, Dict, Sequence

from .checks import run_checks
from .config import AuditSettings
from .probe import Available
from .rules import RUN_TAGS
from .schema import AuditOutcome, AxeResult

# Keep only the fields the report uses; full node payloads for passes get big.
AXE_RUN_JS = """async (tags) => {
    const project = (rules) => rules.map(r => ({
        id: r.id,
        impact: r.impact,
        help: r.help,
        description: r.description,
        helpUrl: r.helpUrl,
        tags: r.tags,
        nodes: r.nodes.map(n => ({ html: n.html, target: n.target }))
    }));
    const results = await axe.run(document, {
        runOnly: { type: 'tag', values: tags }
    });
    return {
        url: results.url,
        violations: project(results.violations),
        passes: project(results.passes),
        incomplete: project(results.incomplete)
    };
}"""


def inject_axe(page, axe_source: str) -> None:
    page.add_script_tag(content=axe_source)


def run_axe(page, tags: Sequence[str] = RUN_TAGS) -> AxeResult:
    data: Dict[str, Any] = page.evaluate(AXE_RUN_JS, list(tags))
    return AxeResult.model_validate(data)


def run_audit(capability: Available, url: str, settings: AuditSettings) -> AuditOutcome:
    with capability.driver() as pw:
        browser = getattr(pw, settings.browser).launch(headless=True)
        try:
            page = browser.new_page()
            page.goto(url, wait_until="networkidle", timeout=settings.timeout_ms)
            inject_axe(page, capability.axe_source)
            result = run_axe(page)
            checks = run_checks(page, settings.min_target_size)
            return AuditOutcome(url=url, result=result, checks=checks)
        finally:
            browser.close()


__all__ = ["run_audit", "run_axe", "inject_axe"]
