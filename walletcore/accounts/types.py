"""
계좌 거래 타입 정의

TransactionRecord (입력), OrderedTransaction (정렬 + 잔고), TimeseriesEntry (시계열 샘플)
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from walletcore.accounts.amount import ZERO, to_amount
from walletcore.utils.timezone import ensure_utc


class TxType(str, Enum):
    """거래 유형

    str을 상속하여 JSON 직렬화 가능.
    """

    RECEIVE = "receive"  # 입금
    SEND = "send"  # 출금
    SEND_SELF = "send_self"  # 자기 자신에게 송금 (수수료만 차감)


@dataclass(frozen=True)
class TransactionRecord:
    """거래 기록 (불변)

    timestamp가 없으면 미확정(pending) 거래.
    height는 확정 블록 높이이며 0은 관례상 미확정을 뜻한다.

    SEND_SELF의 amount는 표시용일 뿐 잔고에 영향이 없다 (수수료만 차감).
    SEND_SELF에 fee가 없으면 0으로 간주한다 (검증 오류 아님).
    """

    kind: TxType
    amount: Decimal
    fee: Decimal | None = None
    timestamp: datetime | None = None
    height: int = 0
    txid: str | None = None

    def __post_init__(self) -> None:
        # frozen dataclass이므로 object.__setattr__로 정규화
        object.__setattr__(self, "kind", TxType(self.kind))
        object.__setattr__(self, "amount", to_amount(self.amount))
        if self.fee is not None:
            object.__setattr__(self, "fee", to_amount(self.fee))
        if self.timestamp is not None:
            object.__setattr__(self, "timestamp", ensure_utc(self.timestamp))

    @property
    def is_confirmed(self) -> bool:
        """확정 여부 (timestamp 존재)"""
        return self.timestamp is not None

    @property
    def effect(self) -> Decimal:
        """보유 잔고에 대한 순효과"""
        if self.kind == TxType.RECEIVE:
            return self.amount
        if self.kind == TxType.SEND:
            return -self.amount
        # SEND_SELF: 자금은 그대로, 네트워크 수수료만 나간다
        return -(self.fee if self.fee is not None else ZERO)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (직렬화용)"""
        return {
            "kind": self.kind.value,
            "amount": str(self.amount),
            "fee": str(self.fee) if self.fee is not None else None,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "height": self.height,
            "txid": self.txid,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "TransactionRecord":
        """딕셔너리에서 생성 (역직렬화용)"""
        ts = data.get("timestamp")
        if isinstance(ts, str):
            # 빈 문자열은 미확정 (to_dict의 None과 동일)
            ts = datetime.fromisoformat(ts) if ts.strip() else None

        return TransactionRecord(
            kind=TxType(data["kind"]),
            amount=to_amount(data["amount"]),
            fee=to_amount(data["fee"]) if data.get("fee") is not None else None,
            timestamp=ts,
            height=int(data.get("height", 0)),
            txid=data.get("txid"),
        )


@dataclass(frozen=True)
class OrderedTransaction:
    """정렬된 거래 + 해당 거래 직후의 잔고 (불변)

    balance는 이 거래까지 반영되고 이후(더 최근) 거래는 반영되지 않은 잔고.
    """

    record: TransactionRecord
    balance: Decimal

    @property
    def kind(self) -> TxType:
        return self.record.kind

    @property
    def amount(self) -> Decimal:
        return self.record.amount

    @property
    def fee(self) -> Decimal | None:
        return self.record.fee

    @property
    def timestamp(self) -> datetime | None:
        return self.record.timestamp

    @property
    def height(self) -> int:
        return self.record.height

    @property
    def txid(self) -> str | None:
        return self.record.txid

    @property
    def is_confirmed(self) -> bool:
        return self.record.is_confirmed

    @property
    def effect(self) -> Decimal:
        return self.record.effect

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (직렬화용)"""
        data = self.record.to_dict()
        data["balance"] = str(self.balance)
        return data


@dataclass(frozen=True)
class TimeseriesEntry:
    """잔고 시계열 샘플 (불변)

    value는 time 시점에 유효했던 잔고 (확정 거래만 반영).
    """

    time: datetime
    value: Decimal

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (차트 데이터용)"""
        return {
            "time": self.time.isoformat(),
            "value": str(self.value),
        }
