from pydantic import BaseModel
from typing import List, Optional, Any


class AxeNode(BaseModel):
    html: Optional[str] = None
    # axe targets nest for iframes / shadow roots
    target: List[Any] = []


class AxeRule(BaseModel):
    """One rule entry from axe.run(); used for violations, passes and incomplete."""
    id: str
    impact: Optional[str] = None  # critical|serious|moderate|minor
    help: str = ""
    description: Optional[str] = None
    helpUrl: Optional[str] = None
    tags: List[str] = []
    nodes: List[AxeNode] = []


class AxeResult(BaseModel):
    url: Optional[str] = None
    violations: List[AxeRule] = []
    passes: List[AxeRule] = []
    incomplete: List[AxeRule] = []


class TouchTarget(BaseModel):
    tag: str
    width: float
    height: float
    text: str = ""


class SupplementaryChecks(BaseModel):
    focus_outline_removed: bool = False
    small_touch_targets: List[TouchTarget] = []
    reduced_motion_supported: bool = False
    skip_link_present: bool = False


class AuditOutcome(BaseModel):
    url: str
    result: AxeResult
    checks: SupplementaryChecks
