"""
walletcore

계좌 거래 내역의 정렬, 거래별 잔고, 잔고 시계열 계산 패키지.

사용 예시:
```python
from walletcore.accounts import order_transactions, sample_timeseries

ordered = order_transactions(records)
series = sample_timeseries(ordered, start, end, timedelta(hours=24))
```
"""

__version__ = "0.1.0"
