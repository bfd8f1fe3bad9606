"""axe-core rule IDs grouped by WCAG 2.0 conformance level.

``WCAG_RULES`` is reference material: the runner filters by tag
(``RUN_TAGS``) and leaves rule selection to axe-core itself.
"""
from typing import Dict, List, Optional

WCAG_RULES: Dict[str, List[str]] = {
    "level-a": [
        "area-alt",
        "aria-allowed-attr",
        "aria-hidden-body",
        "aria-hidden-focus",
        "aria-input-field-name",
        "aria-required-attr",
        "aria-required-children",
        "aria-required-parent",
        "aria-roles",
        "aria-toggle-field-name",
        "aria-valid-attr",
        "aria-valid-attr-value",
        "audio-caption",
        "blink",
        "button-name",
        "bypass",
        "document-title",
        "duplicate-id-aria",
        "frame-title",
        "html-has-lang",
        "html-lang-valid",
        "html-xml-lang-mismatch",
        "image-alt",
        "input-button-name",
        "input-image-alt",
        "label",
        "link-name",
        "list",
        "listitem",
        "marquee",
        "meta-refresh",
        "object-alt",
        "role-img-alt",
        "scrollable-region-focusable",
        "select-name",
        "server-side-image-map",
        "svg-img-alt",
        "td-headers-attr",
        "th-has-data-cells",
        "valid-lang",
        "video-caption",
    ],
    "level-aa": [
        "color-contrast",
        "meta-viewport",
        "autocomplete-valid",
        "avoid-inline-spacing",
        "css-orientation-lock",
    ],
}

# Tag categories passed to axe.run(runOnly).
RUN_TAGS = ("wcag2a", "wcag2aa", "best-practice")

SEVERITY_ORDER = ("critical", "serious", "moderate", "minor")


def level_for_rule(rule_id: str) -> Optional[str]:
    for level, ids in WCAG_RULES.items():
        if rule_id in ids:
            return level
    return None


__all__ = ["WCAG_RULES", "RUN_TAGS", "SEVERITY_ORDER", "level_for_rule"]
