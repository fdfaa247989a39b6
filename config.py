from __future__ import annotations

import logging
import os

LOGGER_NAME = "quizkit"

_FALSY = {"0", "false", "no", "off"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in _FALSY


# --- Lookup policy ----------------------------------------------------------------
# If True: by-id transforms raise QuestionNotFoundError for an unknown target id.
# If False: they log a warning and hand back an unchanged copy of the collection.
STRICT_IDS = _env_flag("QUIZKIT_STRICT_IDS", "1")

LOG_LEVEL = os.getenv("QUIZKIT_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | None = None) -> logging.Logger:
    logging.basicConfig(level=(level or LOG_LEVEL).upper())
    return logging.getLogger(LOGGER_NAME)
