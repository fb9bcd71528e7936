from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class FlowContext:
    """Mutable state of one scenario run. Never shared across scenarios."""
    scenario_name: str
    base_url: str
    step_index: int = 0  # 1-based index of the step being executed
    screenshots: List[str] = field(default_factory=list)
