"""
유틸리티 패키지

타임존 처리 등 공통 유틸리티
"""

from walletcore.utils.timezone import (
    ensure_utc,
    floor_to_day,
    floor_to_hour,
    now_utc,
)

__all__ = [
    "ensure_utc",
    "floor_to_day",
    "floor_to_hour",
    "now_utc",
]
