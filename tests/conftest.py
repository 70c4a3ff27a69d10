"""
pytest 공통 fixture 정의

설정 파일, 기준 거래 시나리오 fixture
"""

import tempfile
from decimal import Decimal
from pathlib import Path

import pytest

from tests.utils.helpers import utc
from walletcore.accounts.types import TransactionRecord, TxType
from walletcore.config import loader


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings_cache() -> None:
    """테스트 간 Settings 캐시 격리"""
    loader.reset()
    yield
    loader.reset()


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    settings_content = """# 테스트용 settings.yaml
chart:
  daily_interval_hours: 12
  hourly_interval_hours: 2
  hourly_window_hours: 48

logging:
  console_level: warning
  file_level: DEBUG
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def sample_records() -> list[TransactionRecord]:
    """기준 시나리오: 확정 입금 3건, 미확정 출금 1건, 확정 출금 1건, 자기송금 1건"""
    return [
        TransactionRecord(
            kind=TxType.RECEIVE,
            amount=Decimal("100"),
            timestamp=utc(2020, 9, 15, 12),
            height=15,
        ),
        TransactionRecord(
            kind=TxType.RECEIVE,
            amount=Decimal("200"),
            timestamp=utc(2020, 9, 10, 12),
            height=10,
        ),
        TransactionRecord(
            kind=TxType.RECEIVE,
            amount=Decimal("300"),
            timestamp=utc(2020, 9, 20, 12),
            height=20,
        ),
        TransactionRecord(
            kind=TxType.SEND,
            amount=Decimal("20"),
            timestamp=None,
            height=0,
        ),
        TransactionRecord(
            kind=TxType.SEND,
            amount=Decimal("10"),
            timestamp=utc(2020, 9, 11, 12),
            height=11,
        ),
        TransactionRecord(
            kind=TxType.SEND_SELF,
            amount=Decimal("50"),
            fee=Decimal("1"),
            timestamp=utc(2020, 9, 21, 12),
            height=21,
        ),
    ]
