"""
계좌 거래 분석

거래 정렬, 거래별 잔고, 잔고 시계열.

사용 예시:
```python
from walletcore.accounts import order_transactions, sample_timeseries

ordered = order_transactions(records)
ordered[0].balance  # 미확정 거래 포함 현재 잔고

series = sample_timeseries(
    ordered,
    start=datetime(2020, 9, 9, 13, tzinfo=timezone.utc),
    end=datetime(2020, 9, 21, 13, tzinfo=timezone.utc),
    interval=timedelta(hours=24),
)
```
"""

from walletcore.accounts.amount import ZERO, sum_amounts, to_amount
from walletcore.accounts.ordering import (
    NoConfirmedTransactionsError,
    confirmed_balance,
    earliest_time,
    order_transactions,
    total_balance,
)
from walletcore.accounts.timeseries import (
    InvalidIntervalError,
    InvalidRangeError,
    TimeseriesError,
    sample_timeseries,
    timeseries_to_frame,
)
from walletcore.accounts.types import (
    OrderedTransaction,
    TimeseriesEntry,
    TransactionRecord,
    TxType,
)

__all__ = [
    # 핵심 함수
    "order_transactions",
    "sample_timeseries",
    "total_balance",
    "confirmed_balance",
    "earliest_time",
    "timeseries_to_frame",
    # 타입
    "TxType",
    "TransactionRecord",
    "OrderedTransaction",
    "TimeseriesEntry",
    # 예외
    "TimeseriesError",
    "InvalidRangeError",
    "InvalidIntervalError",
    "NoConfirmedTransactionsError",
    # 금액
    "ZERO",
    "to_amount",
    "sum_amounts",
]
