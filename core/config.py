# =============================================================================
# core/config.py  -  Startup configuration
# =============================================================================
#
# All settings come from the command line or the environment.  Entry points
# call load_dotenv() first, so a .env file in the working directory works
# too.
#
#   TRUQU_DATA_PATH   path to the goals JSON document (if no CLI argument)
#   TRUQU_LOG_LEVEL   logging level name, default INFO
#   TRUQU_MODEL       LiteLlm model string for the coaching agent
# =============================================================================

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Sequence

from core.errors import ConfigError

DATA_PATH_ENV = "TRUQU_DATA_PATH"
LOG_LEVEL_ENV = "TRUQU_LOG_LEVEL"
MODEL_ENV = "TRUQU_MODEL"

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def resolve_data_path(
    argv: Sequence[str] = (),
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Pick the goals document path: first argument wins, then the env var.

    Args:
        argv: Command-line arguments without the program name.
        environ: Environment to read (defaults to os.environ).

    Raises:
        ConfigError: if neither source provides a path.
    """
    environ = os.environ if environ is None else environ
    if argv and argv[0]:
        return Path(argv[0]).expanduser()
    value = environ.get(DATA_PATH_ENV, "").strip()
    if value:
        return Path(value).expanduser()
    raise ConfigError(
        f"No goals data path given. Pass it as the first argument or set {DATA_PATH_ENV}."
    )


def log_level(environ: Optional[Mapping[str, str]] = None) -> int:
    environ = os.environ if environ is None else environ
    name = environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def model_name(environ: Optional[Mapping[str, str]] = None) -> str:
    environ = os.environ if environ is None else environ
    return environ.get(MODEL_ENV, "").strip() or DEFAULT_MODEL
