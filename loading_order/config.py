from __future__ import annotations

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent


def env_flag(name: str, default: str = "1") -> bool:
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off")


OUTPUT_DIR = Path(os.getenv("LOADING_ORDER_OUTPUT_DIR", "").strip() or BASE / "output")
LOG_LEVEL = os.getenv("LOADING_ORDER_LOG_LEVEL", "INFO").strip().upper() or "INFO"
WRITE_OUTPUT = env_flag("LOADING_ORDER_WRITE_OUTPUT")
