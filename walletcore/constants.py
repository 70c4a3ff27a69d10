"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (walletcore/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Paths:
    """프로젝트 경로 상수"""

    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"


class Defaults:
    """기본값 상수"""

    # 차트 샘플링 (시간 단위)
    DAILY_INTERVAL_HOURS: int = 24
    HOURLY_INTERVAL_HOURS: int = 1
    HOURLY_WINDOW_HOURS: int = 24 * 7

    LOG_LEVEL: str = "INFO"
