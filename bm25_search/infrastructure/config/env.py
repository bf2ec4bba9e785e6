from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_loaded_from: Optional[str] = None


def init_env(env_file: Optional[str] = None) -> bool:
    """
    Load BM25_* variables from a dotenv file into the process environment.

    The file defaults to $BM25_ENV_FILE, then ".env". Variables that are
    already set are left alone. Each file is only read once.

    Returns:
        bool: True when the file existed and set at least one variable
    """
    global _loaded_from
    path = env_file or os.getenv("BM25_ENV_FILE", ".env")
    if _loaded_from == path:
        return False

    loaded = load_dotenv(path, override=False)
    _loaded_from = path
    if loaded:
        logger.debug(f"Loaded environment from {path}")
    return loaded
