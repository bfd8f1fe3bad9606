"""Console reporting for a single audit run."""
import math

from jinja2 import Template

from .metrics import severity_histogram, total_violation_nodes, wcag_tags
from .rules import level_for_rule
from .schema import AuditOutcome

MAX_NODES_SHOWN = 3
MAX_SNIPPET_CHARS = 80
MAX_TARGETS_SHOWN = 3

RULE = "-" * 60

TEMPLATE = """\
Accessibility audit: {{ url }}
{{ "=" * 60 }}

{% if violations %}
Violations
{{ rule }}
{% for v in violations %}
{{ loop.index }}. {{ v.help }}
   Rule: {{ v.id }}{% if v.level %} ({{ v.level }}){% endif %}

   Impact: {{ v.impact }}
   WCAG: {{ v.wcag|join(", ") if v.wcag else "n/a" }}
   Elements affected: {{ v.count }}
{% for snippet in v.snippets %}
     - {{ snippet }}
{% endfor %}
{% if v.more %}
     ...and {{ v.more }} more
{% endif %}

{% endfor %}
{% else %}
No violations found.

{% endif %}
Summary
{{ rule }}
Passed rules:  {{ n_passes }}
Failed rules:  {{ n_violations }} ({{ total }} element{{ "" if total == 1 else "s" }})
Needs review:  {{ n_incomplete }}
{% if histogram %}

Severity breakdown
{% for level, n in histogram.items() %}
  {{ level }}: {{ n }}
{% endfor %}
{% endif %}

Supplementary checks
{{ rule }}
{% if checks.focus_outline_removed %}
WARNING: Focus outlines removed (outline: none on :focus) without a :focus-visible replacement
{% else %}
OK: No focus outline removal detected in inline styles
{% endif %}
{% if targets %}
WARNING: {{ targets|length }} touch target(s) smaller than {{ min_size }}x{{ min_size }}px
{% for t in targets[:max_targets] %}
     - {{ t.tag }} ({{ t.width }}x{{ t.height }}px){% if t.text %} "{{ t.text }}"{% endif %}

{% endfor %}
{% else %}
OK: All clickable elements are at least {{ min_size }}x{{ min_size }}px
{% endif %}
{% if checks.reduced_motion_supported %}
OK: prefers-reduced-motion media query found
{% else %}
WARNING: No prefers-reduced-motion media query found
{% endif %}
{% if checks.skip_link_present %}
OK: Skip link found
{% else %}
WARNING: No skip link found (e.g. <a href="#main">Skip to main content</a>)
{% endif %}

{{ "=" * 60 }}
{% if total == 0 %}
PASS: No WCAG 2.0 A/AA violations detected.
Note: Automated tests catch ~30% of issues; manual testing is essential.
{% else %}
FAIL: {{ total }} accessibility violation(s) found.
{% endif %}
"""


def _violation_view(v):
    nodes = v.nodes
    return {
        "id": v.id,
        "help": v.help or v.description or v.id,
        "impact": v.impact or "unknown",
        "level": level_for_rule(v.id),
        "wcag": wcag_tags(v.tags),
        "count": len(nodes),
        "snippets": [(n.html or "")[:MAX_SNIPPET_CHARS] for n in nodes[:MAX_NODES_SHOWN]],
        "more": max(len(nodes) - MAX_NODES_SHOWN, 0),
    }


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _target_view(t):
    return {"tag": t.tag, "width": _round_half_up(t.width), "height": _round_half_up(t.height), "text": t.text}


def render_report(outcome: AuditOutcome, min_target_size: int = 44) -> str:
    result = outcome.result
    return Template(TEMPLATE, trim_blocks=True, lstrip_blocks=True).render(
        url=outcome.url,
        rule=RULE,
        violations=[_violation_view(v) for v in result.violations],
        n_passes=len(result.passes),
        n_violations=len(result.violations),
        n_incomplete=len(result.incomplete),
        total=total_violation_nodes(result.violations),
        histogram=severity_histogram(result.violations),
        checks=outcome.checks,
        targets=[_target_view(t) for t in outcome.checks.small_touch_targets],
        max_targets=MAX_TARGETS_SHOWN,
        min_size=min_target_size,
    )


def exit_code(outcome: AuditOutcome) -> int:
    return 0 if total_violation_nodes(outcome.result.violations) == 0 else 1


__all__ = ["render_report", "exit_code"]
