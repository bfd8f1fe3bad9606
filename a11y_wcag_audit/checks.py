"""Supplementary heuristics that axe-core does not cover.

Each check pairs a small in-page script, which only collects raw data, with
a pure function that makes the decision. The decision functions are what the
tests exercise; the scripts are kept as dumb as possible.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List

from .schema import SupplementaryChecks, TouchTarget

OUTLINE_REMOVAL = ("outline: none", "outline:none")

CLICKABLE_SELECTOR = 'button, a, [role="button"], input[type="submit"]'

SKIP_LINK_SELECTORS = [
    'a[href="#main"]',
    'a[href="#main-content"]',
    'a[href="#content"]',
    ".skip-link",
]

STYLE_TEXT_JS = """() => Array.from(document.querySelectorAll('style')).map(s => s.textContent || '')"""

TARGET_BOXES_JS = """(selector) => Array.from(document.querySelectorAll(selector)).map(el => {
    const r = el.getBoundingClientRect();
    return {
        tag: el.tagName.toLowerCase(),
        width: r.width,
        height: r.height,
        text: (el.textContent || '').trim().substring(0, 20)
    };
})"""

# Cross-origin sheets throw on cssRules access; those are skipped.
MEDIA_TEXT_JS = """() => {
    const media = [];
    for (const sheet of Array.from(document.styleSheets)) {
        let rules;
        try {
            rules = sheet.cssRules;
        } catch (e) {
            continue;
        }
        for (const rule of Array.from(rules || [])) {
            if (rule instanceof CSSMediaRule) {
                media.push(rule.media.mediaText);
            }
        }
    }
    return media;
}"""

SKIP_LINK_JS = """(selectors) => selectors.some(s => document.querySelector(s) !== null)"""


def focus_outline_removed(style_texts: Iterable[str]) -> bool:
    """True if any style block strips focus outlines with no :focus-visible fallback."""
    for text in style_texts:
        if not any(o in text for o in OUTLINE_REMOVAL):
            continue
        if ":focus" in text and ":focus-visible" not in text:
            return True
    return False


def undersized_targets(boxes: Iterable[Dict[str, Any]], minimum: int = 44) -> List[TouchTarget]:
    small = []
    for b in boxes:
        target = TouchTarget(**b)
        if target.width < minimum or target.height < minimum:
            small.append(target)
    return small


def supports_reduced_motion(media_texts: Iterable[str]) -> bool:
    return any("prefers-reduced-motion" in m for m in media_texts)


def run_checks(page, min_target_size: int = 44) -> SupplementaryChecks:
    """Evaluate all four checks against a loaded Playwright page."""
    styles = page.evaluate(STYLE_TEXT_JS)
    boxes = page.evaluate(TARGET_BOXES_JS, CLICKABLE_SELECTOR)
    media = page.evaluate(MEDIA_TEXT_JS)
    skip_link = page.evaluate(SKIP_LINK_JS, SKIP_LINK_SELECTORS)
    return SupplementaryChecks(
        focus_outline_removed=focus_outline_removed(styles),
        small_touch_targets=undersized_targets(boxes, min_target_size),
        reduced_motion_supported=supports_reduced_motion(media),
        skip_link_present=bool(skip_link),
    )


__all__ = [
    "focus_outline_removed",
    "undersized_targets",
    "supports_reduced_motion",
    "run_checks",
]
