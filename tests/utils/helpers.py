"""
테스트 공통 헬퍼
"""

from datetime import datetime, timezone


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    """UTC datetime 생성 헬퍼"""
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)
