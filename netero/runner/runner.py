import logging
from dataclasses import dataclass, field
from typing import List, Optional

from playwright.sync_api import Error as PlaywrightError

from netero.errors import NeteroError
from netero.executor.executor import ActionExecutor
from netero.models.scenario import Configuration

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    scenario: str
    success: bool
    completed: List[str] = field(default_factory=list)
    failed_step: Optional[str] = None
    reason: Optional[str] = None

    def describe(self) -> str:
        if self.success:
            return f'Scenario "{self.scenario}" passed ({len(self.completed)} steps)'
        return f'Scenario "{self.scenario}" failed at step "{self.failed_step}": {self.reason}'


class ScenarioRunner:
    """Walks a scenario's steps in order, stopping at the first failure."""

    def __init__(self, config: Configuration, executor: ActionExecutor):
        self.config = config
        self.executor = executor

    def run(self, scenario_name: str) -> RunResult:
        """
        Executes every step of ``scenario_name``.
        An unknown scenario raises before anything runs. Step references are
        resolved as they are reached, so earlier steps may already have run
        when a missing one is found. Filesystem errors propagate.
        """
        scenario = self.config.scenario(scenario_name)
        result = RunResult(scenario=scenario_name, success=True)

        for idx, step in enumerate(scenario.steps):
            try:
                action = self.config.step(step, scenario_name)
                logger.info("[%d/%d] %s (%s)", idx + 1, len(scenario.steps), step, action.action)
                self.executor.execute(action)
            except (NeteroError, PlaywrightError) as e:
                logger.error("Step %s failed: %s", step, e)
                result.success = False
                result.failed_step = step
                result.reason = str(e)
                return result
            result.completed.append(step)

        return result
