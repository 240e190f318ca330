"""
Environment-backed setting resolution.
"""
import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "REST_CLIENT"


def env_key(prefix: str, name: str) -> str:
    return f"{prefix}_{name}".upper()


def resolve(arg: Any, env_keys: Union[str, List[str]], default: Any) -> Any:
    """
    Resolve a setting from multiple sources in priority order:
    1. Direct argument (if not None)
    2. Environment variables (first one set wins)
    3. Default value
    """
    if arg is not None:
        return arg

    if isinstance(env_keys, str):
        env_keys = [env_keys]

    for key in env_keys:
        if key:
            val = os.getenv(key)
            if val is not None:
                return val

    return default


def resolve_float(arg: Any, env_keys: Union[str, List[str]], default: Optional[float]) -> Optional[float]:
    """Resolve float value with string conversion support."""
    val = resolve(arg, env_keys, default)
    if val is None or isinstance(val, float):
        return val
    try:
        return float(val)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric value {val!r} for {env_keys}; using {default}")
        return default


def load_env_file(path: Optional[Union[str, Path]] = None) -> bool:
    """Load a .env file into the process environment without overriding set values."""
    if path is None:
        return load_dotenv()
    env_path = Path(path)
    if not env_path.exists():
        logger.debug(f"No env file at {env_path}")
        return False
    return load_dotenv(env_path)
