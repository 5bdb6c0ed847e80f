import json

import pytest

from netero.errors import ConfigurationError, UnknownScenarioError, UnknownStepError
from netero.models.action import GotoAction
from netero.models.scenario import Configuration

RAW = {
    "steps": {
        "open": {"action": "goto-url", "value": "https://a.test/"},
        "click-login": {"action": "goto", "xpath": "//a[@id='login']"},
    },
    "scenarios": {
        "login": {"prev": "fresh", "steps": ["open", "click-login", "open"]},
        "broken": {"steps": ["open", "missing"]},
    },
}


def test_from_mapping_keeps_step_order_and_repeats():
    config = Configuration.from_mapping(RAW)
    assert config.scenario("login").steps == ["open", "click-login", "open"]
    assert config.scenario("login").prev == "fresh"
    assert isinstance(config.step("click-login", "login"), GotoAction)


def test_unknown_scenario_names_it():
    config = Configuration.from_mapping(RAW)
    with pytest.raises(UnknownScenarioError, match='"logout"'):
        config.scenario("logout")


def test_unknown_step_names_step_and_scenario():
    config = Configuration.from_mapping(RAW)
    with pytest.raises(UnknownStepError) as exc:
        config.step("missing", "broken")
    assert '"missing"' in str(exc.value)
    assert '"broken"' in str(exc.value)


def test_dangling_references():
    config = Configuration.from_mapping(RAW)
    assert config.dangling_references() == [("broken", "missing")]


def test_invalid_step_fails_at_load():
    raw = {"steps": {"oops": {"action": "goto"}}, "scenarios": {}}
    with pytest.raises(ConfigurationError, match='"oops"'):
        Configuration.from_mapping(raw)


def test_invalid_scenario_fails_at_load():
    raw = {"steps": {}, "scenarios": {"s": {"steps": "not-a-list"}}}
    with pytest.raises(ConfigurationError, match='"s"'):
        Configuration.from_mapping(raw)


def test_non_mapping_document():
    with pytest.raises(ConfigurationError):
        Configuration.from_mapping(["steps"])


def test_from_json_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(RAW))
    config = Configuration.from_file(path)
    assert set(config.steps) == {"open", "click-login"}


def test_from_yaml_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "steps:\n"
        "  home:\n"
        "    action: assert-url\n"
        "    expected: '^https://a\\.test/$'\n"
        "scenarios:\n"
        "  check:\n"
        "    steps: [home]\n"
    )
    config = Configuration.from_file(path)
    assert config.scenario("check").steps == ["home"]
    assert config.steps["home"].expected == r"^https://a\.test/$"


def test_unparseable_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError):
        Configuration.from_file(path)
