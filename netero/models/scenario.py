import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from netero.errors import ConfigurationError, UnknownScenarioError, UnknownStepError
from netero.models.action import Action, describe_validation_error, parse_action


class Scenario(BaseModel):
    model_config = ConfigDict(frozen=True)

    steps: List[str] = Field(default_factory=list, description="Step names in execution order; repeats allowed")
    prev: Optional[str] = Field(None, description="Scenario expected to have run before this one")


class Configuration(BaseModel):
    """Named steps plus the scenarios that reference them.

    Steps are validated when the configuration is loaded. References from a
    scenario to a step are only checked when the scenario reaches them.
    """

    model_config = ConfigDict(frozen=True)

    steps: Dict[str, Action] = Field(default_factory=dict)
    scenarios: Dict[str, Scenario] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any) -> "Configuration":
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a mapping with 'steps' and 'scenarios'.")

        raw_steps = data.get("steps") or {}
        raw_scenarios = data.get("scenarios") or {}
        if not isinstance(raw_steps, dict) or not isinstance(raw_scenarios, dict):
            raise ConfigurationError("'steps' and 'scenarios' must both be mappings.")

        steps = {name: parse_action(name, raw) for name, raw in raw_steps.items()}

        scenarios = {}
        for name, raw in raw_scenarios.items():
            try:
                scenarios[name] = Scenario.model_validate(raw)
            except ValidationError as exc:
                raise ConfigurationError(
                    f'Invalid scenario "{name}": {describe_validation_error(exc)}'
                ) from exc

        return cls(steps=steps, scenarios=scenarios)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Configuration":
        file_ext = os.path.splitext(str(path))[1].lower()
        with open(path, "r", encoding="utf-8") as f:
            try:
                if file_ext in [".yaml", ".yml"]:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise ConfigurationError(f"Could not parse {path}: {e}") from e
        return cls.from_mapping(data)

    def scenario(self, name: str) -> Scenario:
        try:
            return self.scenarios[name]
        except KeyError:
            raise UnknownScenarioError(name) from None

    def step(self, name: str, scenario: str) -> Action:
        try:
            return self.steps[name]
        except KeyError:
            raise UnknownStepError(name, scenario) from None

    def dangling_references(self) -> List[Tuple[str, str]]:
        """(scenario, step) pairs whose step is not defined."""
        missing = []
        for scenario_name, scenario in self.scenarios.items():
            for step in scenario.steps:
                if step not in self.steps:
                    missing.append((scenario_name, step))
        return missing
