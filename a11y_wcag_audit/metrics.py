"""Aggregate counters derived from an axe-core result."""
from __future__ import annotations
from typing import Dict, Iterable, List

from .rules import SEVERITY_ORDER
from .schema import AxeRule


def total_violation_nodes(violations: Iterable[AxeRule]) -> int:
    """Count affected elements across all violated rules."""
    return sum(len(v.nodes) for v in violations)


def severity_histogram(violations: Iterable[AxeRule]) -> Dict[str, int]:
    """Sum affected elements per impact level.

    Returns an insertion-ordered dict (critical, serious, moderate, minor)
    holding only the non-zero levels. Violations without a known impact are
    not counted in any bucket.
    """
    counts = {level: 0 for level in SEVERITY_ORDER}
    for v in violations:
        if v.impact in counts:
            counts[v.impact] += len(v.nodes)
    return {level: n for level, n in counts.items() if n > 0}


def wcag_tags(tags: Iterable[str]) -> List[str]:
    return [t for t in tags if t.startswith("wcag")]


__all__ = ["total_violation_nodes", "severity_histogram", "wcag_tags"]
