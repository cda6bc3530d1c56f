import copy
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG, ENV_OVERRIDES
from salesboard.config.dashboard_config import DashboardConfig


# -------------------------------------------------
# TYPED CONFIG
# -------------------------------------------------
def build_dashboard_config(cfg: dict) -> DashboardConfig:
    return DashboardConfig.from_dict(cfg)


# -------------------------------------------------
# ENV OVERRIDES
# -------------------------------------------------
def _apply_env_overrides(config: dict) -> None:
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if not value:
            continue
        config.setdefault(section, {})[key] = value


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: str | None = None, load_env_file: bool = True) -> dict:
    """
    Load and merge user config with dashboard defaults.

    Rules:
    - Defaults ALWAYS win if user omits fields
    - Every section is OPTIONAL in the user file
    - Env vars override file values (.env is loaded, never overriding the process env)
    """

    # -------------------------------------------------
    # 1️⃣ Load user config (if provided)
    # -------------------------------------------------
    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

    # -------------------------------------------------
    # 2️⃣ Merge with defaults
    # -------------------------------------------------
    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in user_config.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value

    # -------------------------------------------------
    # 3️⃣ Environment
    # -------------------------------------------------
    if load_env_file:
        load_dotenv()

    _apply_env_overrides(config)

    config.setdefault("metadata", {})

    return config
