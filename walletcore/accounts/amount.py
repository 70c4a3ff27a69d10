"""
금액 헬퍼

모든 금액은 Decimal로 다룬다 (float 사용 금지).
"""

from decimal import Decimal, InvalidOperation
from typing import Iterable

ZERO = Decimal("0")


def to_amount(value: Decimal | int | str | float) -> Decimal:
    """값을 정확한 Decimal 금액으로 변환

    float는 str()을 거쳐 변환하므로 0.1 → Decimal("0.1")이 된다.

    Args:
        value: Decimal, int, str 또는 float

    Returns:
        Decimal 금액

    Raises:
        ValueError: 숫자가 아니거나 유한하지 않은 값 (NaN, Infinity)
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, str, float)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {value!r}") from e
    else:
        raise ValueError(f"Invalid amount type: {type(value).__name__}")

    if not amount.is_finite():
        raise ValueError(f"Amount must be finite: {value!r}")
    return amount


def sum_amounts(values: Iterable[Decimal]) -> Decimal:
    """금액 합계 (ZERO에서 시작)"""
    return sum(values, ZERO)
