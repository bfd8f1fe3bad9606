"""a11y_wcag_audit

Audit a single page for WCAG 2.0 A/AA issues with Playwright + axe-core.

Primary entrypoints:
 - cli.py (Typer CLI)
 - probe.py (Playwright / axe-core availability check)
 - browser.py (page load, axe-core injection and run)
 - checks.py (supplementary in-page heuristics)
 - report.py (console report rendering)
"""

__all__ = [
    "browser",
    "checks",
    "probe",
    "report",
]
