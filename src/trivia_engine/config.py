# Area: Shared
"""
trivia_engine.config — Engine configuration
============================================

Configuration is a plain dict. Values come from, in increasing priority:
DEFAULT_CONFIG, an optional JSON file, a ``.env`` file and environment
variables.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger("trivia_engine.config")

DEFAULT_CONFIG: Dict[str, Any] = {
    # Seconds a question accepts submissions
    "answer_window_seconds": 10,
    # Pause between the results of one question and the next question
    "pacing_seconds": 15,
    "question_count": 2,
    "category": None,
    # Edit the question message with the number of participants so far
    "live_participant_count": False,
    "opentdb_url": "https://opentdb.com",
    "request_timeout_seconds": 15,
    "db_path": "trivia_scores.db",
    "log_file": "trivia_engine.log",
}

# Environment variable -> (config key, converter)
ENV_MAPPINGS = {
    "TRIVIA_ANSWER_WINDOW_SECONDS": ("answer_window_seconds", float),
    "TRIVIA_PACING_SECONDS": ("pacing_seconds", float),
    "TRIVIA_QUESTION_COUNT": ("question_count", int),
    "TRIVIA_CATEGORY": ("category", int),
    "TRIVIA_LIVE_COUNT": ("live_participant_count",
                          lambda v: v.lower() in ("true", "1", "yes")),
    "TRIVIA_DB_PATH": ("db_path", str),
    "TRIVIA_LOG_FILE": ("log_file", str),
    "OPENTDB_URL": ("opentdb_url", str),
}

POSITIVE_NUMBER_KEYS = ["answer_window_seconds", "request_timeout_seconds", "question_count"]


def load_config(config_path: Optional[str] = None, env_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load config from defaults, file and environment.

    Args:
        config_path: Optional JSON config file
        env_file: Optional .env path; defaults to searching from the cwd

    Returns:
        Validated configuration dict
    """
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config.update(json.load(f))
        else:
            logger.warning("Config file not found: %s", config_path)

    load_dotenv(env_file)

    for env_key, (config_key, convert) in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = convert(os.environ[env_key])

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate required configuration values.

    Raises:
        ValueError: If keys are missing or out of range
    """
    missing = [k for k in DEFAULT_CONFIG if k not in config]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    for key in POSITIVE_NUMBER_KEYS:
        if not isinstance(config[key], (int, float)) or config[key] <= 0:
            raise ValueError(f"Config '{key}' must be a positive number, got {config[key]!r}")

    if not isinstance(config["pacing_seconds"], (int, float)) or config["pacing_seconds"] < 0:
        raise ValueError(f"Config 'pacing_seconds' must be >= 0, got {config['pacing_seconds']!r}")
