"""Sequential runner for the Revue CRUD scenario."""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from src.revue_client.errors import RevueAPIError

from .checks import CheckFailedError
from .context import ScenarioContext
from .steps import SCENARIO_STEPS, Step

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Outcome of one scenario step.

    Attributes:
        name: Step name (e.g. "list_all")
        passed: True if every check in the step held
        detail: Failure message, empty when the step passed
        elapsed: Wall-clock seconds spent in the step
    """
    name: str
    passed: bool
    detail: str = ""
    elapsed: float = 0.0


@dataclass
class ScenarioReport:
    """Results of a scenario run, in execution order."""
    results: List[StepResult] = field(default_factory=list)

    @property
    def passed(self) -> List[StepResult]:
        return [r for r in self.results if r.passed]

    @property
    def failed(self) -> List[StepResult]:
        return [r for r in self.results if not r.passed]

    @property
    def all_passed(self) -> bool:
        return bool(self.results) and not self.failed


def run_scenario(
    context: ScenarioContext,
    steps: Sequence[Tuple[str, Step]] = SCENARIO_STEPS,
    on_result: Optional[Callable[[StepResult], None]] = None,
) -> ScenarioReport:
    """Run every step in order against an authenticated context.

    A failing check or API error fails only its own step; later steps still
    run, although they may fail in turn when they depend on state an earlier
    step did not capture. Steps are never retried.

    Args:
        context: Authenticated scenario context (see open_context)
        steps: Ordered (name, step) pairs
        on_result: Optional callback invoked after each step

    Returns:
        ScenarioReport: One StepResult per step
    """
    report = ScenarioReport()

    for name, step in steps:
        started = time.monotonic()
        try:
            step(context)
        except (CheckFailedError, RevueAPIError) as e:
            result = StepResult(name, False, str(e), time.monotonic() - started)
            logger.warning(f"Step {name} failed: {e}")
        else:
            result = StepResult(name, True, "", time.monotonic() - started)
            logger.info(f"Step {name} passed")

        report.results.append(result)
        if on_result is not None:
            on_result(result)

    return report
