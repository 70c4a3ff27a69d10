"""
walletcore/services/chart_service.py 테스트

일간 / 시간별 차트 데이터, 데이터 없음 처리 테스트
"""

from datetime import timedelta
from decimal import Decimal

from tests.utils.helpers import utc
from walletcore.accounts.types import TransactionRecord, TxType
from walletcore.config.loader import ChartSettings
from walletcore.services.chart_service import ChartService


NOW = utc(2020, 9, 22, 10, 30)


class TestBuildChart:
    """ChartService.build_chart 테스트"""

    def test_totals(self, sample_records: list[TransactionRecord]) -> None:
        """미확정 포함 잔고 / 확정 잔고"""
        chart = ChartService().build_chart(sample_records, now=NOW)

        assert chart["chart_data_missing"] is False
        assert chart["chart_total"] == "569"
        assert chart["chart_confirmed"] == "589"

    def test_daily_series(self, sample_records: list[TransactionRecord]) -> None:
        """첫 거래일 자정부터 기준 시각(정시 내림)까지 일간 시계열"""
        chart = ChartService().build_chart(sample_records, now=NOW)
        daily = chart["chart_data_daily"]

        assert daily[0] == {"time": "2020-09-10T00:00:00+00:00", "value": "0"}
        assert daily[1] == {"time": "2020-09-11T00:00:00+00:00", "value": "200"}
        assert daily[-2] == {"time": "2020-09-22T00:00:00+00:00", "value": "589"}
        assert daily[-1] == {"time": "2020-09-22T10:00:00+00:00", "value": "589"}
        assert len(daily) == 14

    def test_hourly_series(self, sample_records: list[TransactionRecord]) -> None:
        """최근 7일 시간별 시계열"""
        chart = ChartService().build_chart(sample_records, now=NOW)
        hourly = chart["chart_data_hourly"]

        assert len(hourly) == 7 * 24 + 1
        assert hourly[0] == {"time": "2020-09-15T10:00:00+00:00", "value": "190"}
        assert hourly[2] == {"time": "2020-09-15T12:00:00+00:00", "value": "290"}
        assert hourly[-1] == {"time": "2020-09-22T10:00:00+00:00", "value": "589"}

    def test_hourly_clamped_to_first_day(self, sample_records: list[TransactionRecord]) -> None:
        """시간별 구간이 전체 기간보다 길면 첫 거래일부터"""
        settings = ChartSettings(
            daily_interval=timedelta(hours=24),
            hourly_interval=timedelta(hours=6),
            hourly_window=timedelta(days=365),
        )

        chart = ChartService(settings).build_chart(sample_records, now=NOW)

        assert chart["chart_data_hourly"][0]["time"] == "2020-09-10T00:00:00+00:00"
        assert chart["chart_data_hourly"][0]["value"] == "0"

    def test_custom_interval(self, sample_records: list[TransactionRecord]) -> None:
        """설정된 일간 간격 사용"""
        settings = ChartSettings(daily_interval=timedelta(hours=48))

        chart = ChartService(settings).build_chart(sample_records, now=NOW)
        times = [entry["time"] for entry in chart["chart_data_daily"]]

        assert times[:2] == ["2020-09-10T00:00:00+00:00", "2020-09-12T00:00:00+00:00"]
        assert times[-1] == "2020-09-22T10:00:00+00:00"

    def test_no_transactions(self) -> None:
        """거래 없음 → 데이터 없음"""
        chart = ChartService().build_chart([], now=NOW)

        assert chart == {
            "chart_data_missing": True,
            "chart_data_daily": [],
            "chart_data_hourly": [],
            "chart_total": None,
            "chart_confirmed": None,
        }

    def test_only_pending(self) -> None:
        """미확정 거래만 있으면 시계열 없이 잔고만"""
        records = [TransactionRecord(kind=TxType.RECEIVE, amount=Decimal("5"))]

        chart = ChartService().build_chart(records, now=NOW)

        assert chart["chart_data_missing"] is True
        assert chart["chart_data_daily"] == []
        assert chart["chart_total"] == "5"
        assert chart["chart_confirmed"] == "0"

    def test_now_before_first_transaction(self, sample_records: list[TransactionRecord]) -> None:
        """기준 시각이 첫 거래보다 이르면 샘플 하나 (0)"""
        chart = ChartService().build_chart(sample_records, now=utc(2020, 9, 1, 5))

        assert chart["chart_data_daily"] == [{"time": "2020-09-01T05:00:00+00:00", "value": "0"}]
        assert chart["chart_data_hourly"] == [{"time": "2020-09-01T05:00:00+00:00", "value": "0"}]
