"""
잔고 시계열 샘플링

정렬된 거래(order_transactions 결과)에서 고정 간격의 잔고 시계열을 만든다.

- 샘플 시각: start, start+interval, ... (end 미만), 마지막은 항상 end
- 값: 샘플 시각 이전(포함) 가장 최근 확정 거래의 잔고, 없으면 0 (forward-fill)
- 미확정 거래는 달력상 위치가 없으므로 시계열에서 제외
"""

import logging
from datetime import datetime, timedelta
from typing import Sequence

import pandas as pd

from walletcore.accounts.amount import ZERO
from walletcore.accounts.types import OrderedTransaction, TimeseriesEntry
from walletcore.utils.timezone import ensure_utc

logger = logging.getLogger(__name__)


class TimeseriesError(ValueError):
    """시계열 요청 파라미터 오류"""

    pass


class InvalidRangeError(TimeseriesError):
    """end가 start보다 이른 경우"""

    pass


class InvalidIntervalError(TimeseriesError):
    """interval이 0 이하인 경우"""

    pass


def _sample_times(start: datetime, end: datetime, interval: timedelta) -> list[datetime]:
    """샘플 시각 목록 (양 끝점 포함, 마지막 간격은 불규칙할 수 있음)"""
    times: list[datetime] = []
    current = start
    while True:
        times.append(current)
        # 다음 칸이 end를 넘으면 더하기 전에 멈춘다 (datetime.max 근처 overflow 방지)
        if end - current <= interval:
            break
        current += interval
    if times[-1] != end:
        times.append(end)
    return times


def sample_timeseries(
    ordered: Sequence[OrderedTransaction],
    start: datetime,
    end: datetime,
    interval: timedelta,
) -> list[TimeseriesEntry]:
    """잔고 시계열 생성

    Args:
        ordered: order_transactions() 결과 (최신순, 재정렬하지 않음)
        start: 시작 시각 (naive면 UTC)
        end: 종료 시각 (naive면 UTC, 포함)
        interval: 샘플 간격

    Returns:
        TimeseriesEntry 리스트 (시각 오름차순, start와 end 각각 정확히 한 번)

    Raises:
        InvalidIntervalError: interval <= 0
        InvalidRangeError: end < start

    Example:
        >>> series = sample_timeseries(ordered, start, end, timedelta(hours=24))
        >>> [entry.value for entry in series]
    """
    if interval <= timedelta(0):
        raise InvalidIntervalError(f"interval must be positive: {interval}")

    start = ensure_utc(start)
    end = ensure_utc(end)
    if end < start:
        raise InvalidRangeError(f"invalid date range: start={start.isoformat()}, end={end.isoformat()}")

    # 확정 거래만, 과거 → 최신 순서로 (정렬된 입력을 뒤에서부터 읽음)
    confirmed = [tx for tx in reversed(ordered) if tx.timestamp is not None]

    entries: list[TimeseriesEntry] = []
    cursor = 0
    value = ZERO
    for sample_time in _sample_times(start, end, interval):
        while cursor < len(confirmed) and confirmed[cursor].timestamp <= sample_time:
            value = confirmed[cursor].balance
            cursor += 1
        entries.append(TimeseriesEntry(time=sample_time, value=value))

    logger.debug(
        f"Sampled {len(entries)} points from {len(confirmed)} confirmed transactions "
        f"({start.isoformat()} ~ {end.isoformat()}, interval={interval})"
    )
    return entries


def timeseries_to_frame(entries: Sequence[TimeseriesEntry]) -> pd.DataFrame:
    """시계열을 DataFrame으로 변환 (리포팅용)

    value 컬럼은 Decimal을 그대로 담는 object dtype (float 변환 없음).

    Returns:
        pd.DataFrame: index=time (UTC DatetimeIndex), columns=["value"]
    """
    index = pd.DatetimeIndex(
        pd.to_datetime([entry.time for entry in entries], utc=True),
        name="time",
    )
    return pd.DataFrame(
        {"value": pd.Series([entry.value for entry in entries], index=index, dtype=object)},
        index=index,
    )
