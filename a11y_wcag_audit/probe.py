"""Availability check for the two external pieces an audit needs.

Playwright (Python package) drives the browser; axe-core ships as a
JavaScript file, normally installed with ``npm install`` at the repo root.
``detect`` never raises for a missing piece: it returns ``Unavailable`` with
a reason the CLI can print.
"""
from __future__ import annotations

import importlib.util
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

NODE_MODULES_AXE = Path("node_modules") / "axe-core" / "axe.min.js"


@dataclass(frozen=True)
class Available:
    driver: Callable  # playwright.sync_api.sync_playwright
    axe_source: str


@dataclass(frozen=True)
class Unavailable:
    reason: str


Capability = Union[Available, Unavailable]


def locate_axe_source(axe_path: Optional[str] = None, root: Optional[Path] = None) -> Optional[Path]:
    """Return the axe-core script path, or None if it cannot be found.

    An explicit path wins and is not second-guessed: if it is missing the
    result is None rather than a fallback.
    """
    if axe_path:
        p = Path(axe_path)
        return p if p.is_file() else None
    base = root if root is not None else Path(os.getcwd())
    candidate = base / NODE_MODULES_AXE
    return candidate if candidate.is_file() else None


def playwright_installed() -> bool:
    return importlib.util.find_spec("playwright") is not None


def detect(axe_path: Optional[str] = None, root: Optional[Path] = None) -> Capability:
    if not playwright_installed():
        return Unavailable("playwright is not installed")
    source_path = locate_axe_source(axe_path, root)
    if source_path is None:
        where = axe_path or str(NODE_MODULES_AXE)
        return Unavailable(f"axe-core source not found at {where}")
    from playwright.sync_api import sync_playwright

    return Available(driver=sync_playwright, axe_source=source_path.read_text(encoding="utf-8"))


__all__ = ["Available", "Unavailable", "Capability", "detect", "locate_axe_source"]
