"""Runtime settings read from the environment."""
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring non-positive {name}={raw!r}, using {default}")
        return default
    return value


TICK_INTERVAL = _float_env("NOWPLAYING_TICK_INTERVAL", 1.0)
SEEK_STEP = _float_env("NOWPLAYING_SEEK_STEP", 5.0)

LOG_DIR = Path(os.environ.get("NOWPLAYING_LOG_DIR", str(Path.home() / ".local" / "share" / "nowplaying")))
LOG_FILE = LOG_DIR / "nowplaying.log"
LOG_LEVEL = os.environ.get("NOWPLAYING_LOG_LEVEL", "INFO").upper()
