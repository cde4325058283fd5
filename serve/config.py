# config.py
import os
import logging

def _log_level(value: str) -> str:
    lvl = (value or "").strip().upper()
    # 모르는 이름이면 INFO
    if not isinstance(logging.getLevelName(lvl), int):
        return "INFO"
    return lvl

MAX_BATCH = int(os.getenv("REGION_MAX_BATCH", "1000"))   # /classify/batch 최대 이름 수
LOG_LEVEL = _log_level(os.getenv("REGION_LOG_LEVEL", "INFO"))
