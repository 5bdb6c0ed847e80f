import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from netero.errors import ConfigurationError

load_dotenv()

NETERO_STATE = os.getenv("NETERO_STATE")
NETERO_FIFO = os.getenv("NETERO_FIFO", "/tmp/netero/browser.fifo")
NETERO_LOG_LEVEL = os.getenv("NETERO_LOG_LEVEL", "INFO")

NETERO_ACTION_TIMEOUT_MS = os.getenv("NETERO_ACTION_TIMEOUT_MS")

THEMES = ("light", "dark")


def require_state_dir(state: Optional[str] = None) -> Path:
    state = state if state is not None else NETERO_STATE
    if not state:
        raise ConfigurationError(
            "NETERO_STATE environment variable is not set. "
            "Export NETERO_STATE=/path/to/state or add it to a .env file."
        )
    return Path(state)


def check_theme(theme: Optional[str]) -> Optional[str]:
    if theme is None or theme in THEMES:
        return theme
    raise ConfigurationError(f'Invalid theme: {theme}. Must be "light", "dark", or unset.')


def action_timeout_ms(value: Optional[str] = None) -> Optional[float]:
    """None (unset) leaves Playwright's own default of 30s in place."""
    value = value if value is not None else NETERO_ACTION_TIMEOUT_MS
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(
            f"NETERO_ACTION_TIMEOUT_MS must be a number of milliseconds, got {value!r}."
        ) from None
