"""
chmpdf/core/results
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional


@dataclass(frozen=True)
class StepResult:
    """
    Data class for the outcome of one component call during composition.
    """

    component: str
    page: int
    ok: bool
    error: Optional[BaseException] = None
    value: Any = None


@dataclass
class RenderReport:
    """
    Class for collecting component outcomes across one document render.
    """

    steps: List[StepResult] = field(default_factory=list)
    pages: int = 0
    path: Optional[Path] = None

    def record(self, result: StepResult) -> StepResult:
        """
        Appends a component outcome.

        Args:
            result (StepResult): Outcome to store.

        Returns:
            StepResult: The stored outcome.
        """
        self.steps.append(result)
        return result

    @property
    def failures(self) -> List[StepResult]:
        return [s for s in self.steps if not s.ok]

    @property
    def ok(self) -> bool:
        return not self.failures

    def failed_components(self) -> List[str]:
        """
        Returns the names of failed components in the order they failed.

        Returns:
            List[str]: Component names.
        """
        return [s.component for s in self.failures]
