"""Ordered Revue CRUD scenario.

The scenario authenticates once, then runs the create, list, edit and delete
checks (and their failure variants) against a single ScenarioContext.
"""

from .checks import CheckFailedError
from .context import ScenarioContext, open_context
from .runner import ScenarioReport, StepResult, run_scenario
from .steps import SCENARIO_STEPS

__all__ = [
    'CheckFailedError',
    'ScenarioContext',
    'open_context',
    'ScenarioReport',
    'StepResult',
    'run_scenario',
    'SCENARIO_STEPS',
]
