import argparse
import logging
import sys

from playwright.sync_api import Error as PlaywrightError

from netero import config
from netero.browser.reload import ReloadChannel
from netero.errors import NeteroError
from netero.models.scenario import Configuration
from netero.runner.session import open_browser, run_scenario

logger = logging.getLogger("netero")


def process_run(args) -> int:
    """Handler for run command"""
    theme = config.check_theme(args.theme)
    state_dir = config.require_state_dir()
    scenario_config = Configuration.from_file(args.config)

    result = run_scenario(
        scenario_config,
        args.scenario,
        state_dir,
        theme=theme,
        headless=not args.headed,
        timeout=config.action_timeout_ms(),
    )
    if result.success:
        logger.info(result.describe())
        return 0
    logger.error(result.describe())
    return 1


def process_open(args) -> int:
    """Handler for open command"""
    theme = config.check_theme(args.theme)
    state_dir = config.require_state_dir()
    open_browser(state_dir, ReloadChannel(config.NETERO_FIFO), theme=theme)
    return 0


def process_check(args) -> int:
    """Handler for check command"""
    scenario_config = Configuration.from_file(args.config)
    print(f"{len(scenario_config.steps)} steps, {len(scenario_config.scenarios)} scenarios")
    for name, scenario in scenario_config.scenarios.items():
        after = f" (after {scenario.prev})" if scenario.prev else ""
        print(f"  {name}{after}: {', '.join(scenario.steps)}")

    missing = scenario_config.dangling_references()
    for scenario_name, step in missing:
        print(f'Error: scenario "{scenario_name}" references undefined step "{step}"')
    return 1 if missing else 0


def process_reload(args) -> int:
    """Handler for reload command"""
    sent = ReloadChannel(config.NETERO_FIFO).broadcast()
    return 0 if sent else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="netero", description="Replay scripted browser scenarios")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_run = subparsers.add_parser("run", help="Replay a scenario against the active tab")
    parser_run.add_argument("--config", required=True, help="Scenario configuration (json or yaml)")
    parser_run.add_argument("--scenario", required=True, help="Name of the scenario to run")
    parser_run.add_argument("--theme", help="Color scheme: light or dark")
    parser_run.add_argument("--headed", action="store_true", help="Show the browser window")

    parser_open = subparsers.add_parser("open", help="Open the active tab in a visible browser")
    parser_open.add_argument("--theme", help="Color scheme: light or dark")

    parser_check = subparsers.add_parser("check", help="Validate a scenario configuration")
    parser_check.add_argument("--config", required=True, help="Scenario configuration (json or yaml)")

    subparsers.add_parser("reload", help="Ask an open browser to reload all pages")
    return parser


def main(argv=None) -> int:
    logging.basicConfig(
        level=config.NETERO_LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {
        "run": process_run,
        "open": process_open,
        "check": process_check,
        "reload": process_reload,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 2

    try:
        return handler(args)
    except NeteroError as e:
        logger.error(str(e))
        return 1
    except PlaywrightError as e:
        logger.error("Browser error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
