"""Runtime settings for the slate layer, read from the environment."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .projection_config import SIMULATION_CONFIG

ENV_PREFIX = "SLATE_RANKER_"


@dataclass
class Settings:
    """Settings passed to the slate analyzer and CLI at construction time."""
    simulations: int = SIMULATION_CONFIG.DEFAULT_SIMULATIONS
    seed: Optional[int] = None
    lookback: int = 10
    min_games: int = 5
    log_level: str = "INFO"


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from a .env file and SLATE_RANKER_* variables.

    Args:
        env_file: Optional path to a .env file (defaults to searching from cwd)

    Returns:
        Settings instance
    """
    load_dotenv(env_file)
    defaults = Settings()
    return Settings(
        simulations=_env_int("SIMULATIONS", defaults.simulations),
        seed=_env_int("SEED", defaults.seed),
        lookback=_env_int("LOOKBACK", defaults.lookback),
        min_games=_env_int("MIN_GAMES", defaults.min_games),
        log_level=os.getenv(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
    )
