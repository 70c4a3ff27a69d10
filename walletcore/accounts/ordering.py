"""
거래 정렬 및 잔고 계산

거래 목록을 최신순으로 정렬하고, 각 거래 직후의 잔고를 계산한다.

정렬 규칙 (최신 → 과거):
1. 미확정 거래 (timestamp 없음)가 모든 확정 거래보다 앞
2. timestamp 내림차순
3. height 내림차순
4. 그래도 같으면 입력 순서 유지 (stable)

잔고 계산은 현재 총액에서 시작해 최신 거래부터 효과를 하나씩 제거하는
역방향 누적 방식이다. 기초 잔고(opening balance)가 필요 없다.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Sequence

from walletcore.accounts.amount import ZERO, sum_amounts
from walletcore.accounts.types import OrderedTransaction, TransactionRecord

logger = logging.getLogger(__name__)


class NoConfirmedTransactionsError(Exception):
    """확정 거래가 하나도 없는 경우"""

    pass


def _order_key(record: TransactionRecord) -> tuple:
    """정렬 키 (내림차순 비교용)

    미확정 거래는 (1, height) 태그로 확정 거래 (0, timestamp, height)보다 항상 크다.
    """
    if record.timestamp is None:
        return (1, record.height)
    return (0, record.timestamp, record.height)


def total_balance(records: Iterable[TransactionRecord]) -> Decimal:
    """거래 집합이 나타내는 현재 총 잔고 (미확정 포함)"""
    return sum_amounts(record.effect for record in records)


def order_transactions(
    records: Iterable[TransactionRecord],
) -> list[OrderedTransaction]:
    """거래 정렬 + 거래별 잔고 계산

    Args:
        records: 정렬되지 않은 거래 기록

    Returns:
        최신순 OrderedTransaction 리스트.
        첫 항목의 balance는 전체 효과의 합이고,
        이후 항목은 balance = 직전 항목 balance - 직전 항목 effect.

    입력 의미 검증은 하지 않는다 (음수 금액도 그대로 계산).
    """
    # reverse=True여도 sorted는 동일 키의 입력 순서를 유지한다
    ordered_records = sorted(records, key=_order_key, reverse=True)

    balance = total_balance(ordered_records)
    result: list[OrderedTransaction] = []
    for record in ordered_records:
        result.append(OrderedTransaction(record=record, balance=balance))
        balance -= record.effect

    logger.debug(
        f"Ordered {len(result)} transactions "
        f"(pending={sum(1 for r in ordered_records if not r.is_confirmed)}, "
        f"total={result[0].balance if result else ZERO})"
    )
    return result


def confirmed_balance(ordered: Sequence[OrderedTransaction]) -> Decimal:
    """가장 최근 확정 거래 직후의 잔고 (미확정 거래 제외)

    Args:
        ordered: order_transactions() 결과

    Returns:
        확정 잔고 (확정 거래가 없으면 ZERO)
    """
    for tx in ordered:
        if tx.is_confirmed:
            return tx.balance
    return ZERO


def earliest_time(ordered: Sequence[OrderedTransaction]) -> datetime:
    """가장 오래된 확정 거래의 시각

    Args:
        ordered: order_transactions() 결과

    Returns:
        가장 오래된 확정 거래의 timestamp (UTC)

    Raises:
        NoConfirmedTransactionsError: 확정 거래가 없는 경우
    """
    # 확정 거래는 리스트 뒤쪽에 최신순으로 모여 있다
    for tx in reversed(ordered):
        if tx.timestamp is not None:
            return tx.timestamp
    raise NoConfirmedTransactionsError("확정된 거래가 없습니다")
