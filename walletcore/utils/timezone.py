"""
타임존 유틸리티

내부 계산은 모두 UTC 기준. naive datetime은 UTC로 간주한다.
"""

from datetime import datetime, timezone


def ensure_utc(dt: datetime) -> datetime:
    """datetime을 UTC 타임존으로 정규화

    Args:
        dt: datetime 객체 (naive면 UTC로 간주)

    Returns:
        UTC 타임존의 datetime

    Example:
        >>> ensure_utc(datetime(2020, 9, 15, 12, 0)).tzinfo
        datetime.timezone.utc
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)"""
    return datetime.now(timezone.utc)


def floor_to_hour(dt: datetime) -> datetime:
    """정시로 내림 (UTC 기준)

    Example:
        >>> floor_to_hour(datetime(2020, 9, 15, 12, 34, 56, tzinfo=timezone.utc))
        datetime(2020, 9, 15, 12, 0, tzinfo=timezone.utc)
    """
    return ensure_utc(dt).replace(minute=0, second=0, microsecond=0)


def floor_to_day(dt: datetime) -> datetime:
    """자정으로 내림 (UTC 기준)"""
    return floor_to_hour(dt).replace(hour=0)
