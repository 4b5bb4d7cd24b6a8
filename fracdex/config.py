import os

_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}

MAX_BATCH = int(os.getenv("FRACDEX_MAX_BATCH", "1000"))
LOG_LEVEL = os.getenv("FRACDEX_LOG_LEVEL", "INFO").upper()
LOG_LEVEL = _LEVEL_ALIASES.get(LOG_LEVEL, LOG_LEVEL)
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
