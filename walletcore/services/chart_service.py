"""
Chart Service

계좌 요약 화면용 잔고 차트 데이터 생성.
거래 기록을 한 번 정렬한 뒤 일간(전체 기간) / 시간별(최근 기간) 시계열을 만든다.
"""

import logging
from datetime import datetime
from typing import Any, Iterable

from walletcore.accounts.ordering import (
    NoConfirmedTransactionsError,
    confirmed_balance,
    earliest_time,
    order_transactions,
)
from walletcore.accounts.timeseries import sample_timeseries
from walletcore.accounts.types import TransactionRecord
from walletcore.config.loader import ChartSettings
from walletcore.utils.timezone import floor_to_day, floor_to_hour, now_utc

logger = logging.getLogger(__name__)


class ChartService:
    """잔고 차트 서비스

    Args:
        settings: 차트 샘플링 설정 (None이면 기본값)

    사용 예시:
    ```python
    service = ChartService(get_settings().chart)
    chart = service.build_chart(records)
    chart["chart_data_daily"]  # [{"time": "...", "value": "..."}, ...]
    ```
    """

    def __init__(self, settings: ChartSettings | None = None):
        self.settings = settings or ChartSettings()

    def build_chart(
        self,
        records: Iterable[TransactionRecord],
        now: datetime | None = None,
    ) -> dict[str, Any]:
        """차트 데이터 생성

        Args:
            records: 계좌의 거래 기록 (정렬 불필요)
            now: 기준 시각 (None이면 현재 UTC)

        Returns:
            chart_data_missing, chart_data_daily, chart_data_hourly,
            chart_total (미확정 포함 잔고), chart_confirmed (확정 잔고)
        """
        ordered = order_transactions(records)
        end = floor_to_hour(now or now_utc())

        chart: dict[str, Any] = {
            "chart_data_missing": False,
            "chart_data_daily": [],
            "chart_data_hourly": [],
            "chart_total": str(ordered[0].balance) if ordered else None,
            "chart_confirmed": str(confirmed_balance(ordered)) if ordered else None,
        }

        try:
            first_day = floor_to_day(earliest_time(ordered))
        except NoConfirmedTransactionsError:
            chart["chart_data_missing"] = True
            logger.info(f"Chart data missing: {len(ordered)} transactions, none confirmed")
            return chart

        # 첫 거래가 기준 시각 이후면 (시계 오차 등) 시작점을 맞춘다
        daily_start = min(first_day, end)
        hourly_start = max(end - self.settings.hourly_window, daily_start)

        daily = sample_timeseries(ordered, daily_start, end, self.settings.daily_interval)
        hourly = sample_timeseries(ordered, hourly_start, end, self.settings.hourly_interval)

        chart["chart_data_daily"] = [entry.to_dict() for entry in daily]
        chart["chart_data_hourly"] = [entry.to_dict() for entry in hourly]

        logger.info(
            f"Chart built: {len(ordered)} transactions, "
            f"daily={len(daily)}, hourly={len(hourly)}, total={chart['chart_total']}"
        )
        return chart
