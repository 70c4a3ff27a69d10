"""
설정 로더

settings.yaml 로드 및 차트/로깅 설정 생성
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any

import yaml

from walletcore.constants import Defaults, Paths


@dataclass(frozen=True)
class ChartSettings:
    """잔고 차트 샘플링 설정

    불변 데이터 구조로 설정 변경 방지
    """

    daily_interval: timedelta = timedelta(hours=Defaults.DAILY_INTERVAL_HOURS)
    hourly_interval: timedelta = timedelta(hours=Defaults.HOURLY_INTERVAL_HOURS)
    hourly_window: timedelta = timedelta(hours=Defaults.HOURLY_WINDOW_HOURS)


@dataclass(frozen=True)
class LoggingSettings:
    """로깅 레벨 설정"""

    console_level: int = logging.INFO
    file_level: int = logging.INFO


@dataclass(frozen=True)
class Settings:
    """애플리케이션 설정 (settings.yaml에서 로드)"""

    chart: ChartSettings = field(default_factory=ChartSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


class SettingsLoadError(Exception):
    """Settings 로드 실패 예외"""

    pass


def _parse_hours(section: dict[str, Any], key: str, default: int) -> timedelta:
    """시간 단위 값을 timedelta로 변환 (양수만 허용)"""
    raw = section.get(key, default)
    if isinstance(raw, bool):
        raise SettingsLoadError(f"'{key}' 값이 숫자가 아닙니다: {raw!r}")

    try:
        hours = float(raw)
    except (TypeError, ValueError) as e:
        raise SettingsLoadError(f"'{key}' 값이 숫자가 아닙니다: {raw!r}") from e

    if not math.isfinite(hours):
        raise SettingsLoadError(f"'{key}' 값은 유한해야 합니다: {raw!r}")
    if hours <= 0:
        raise SettingsLoadError(f"'{key}' 값은 0보다 커야 합니다: {raw!r}")

    try:
        return timedelta(hours=hours)
    except (OverflowError, ValueError) as e:
        raise SettingsLoadError(f"'{key}' 값이 너무 큽니다: {raw!r}") from e


def _parse_level(section: dict[str, Any], key: str) -> int:
    """로그 레벨 이름을 숫자 레벨로 변환"""
    name = str(section.get(key, Defaults.LOG_LEVEL)).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise SettingsLoadError(f"유효하지 않은 로그 레벨입니다: '{name}'")
    return level


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise SettingsLoadError(f"settings.yaml의 '{name}' 섹션 형식이 잘못되었습니다")
    return section


def load_settings(path: Path | None = None) -> Settings:
    """settings.yaml 파일 로드

    섹션이 없으면 기본값을 사용한다.

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 인스턴스

    Raises:
        SettingsLoadError: 파일이 없거나 형식/값이 잘못된 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        raise SettingsLoadError(f"settings.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    chart_section = _section(data, "chart")
    chart = ChartSettings(
        daily_interval=_parse_hours(
            chart_section, "daily_interval_hours", Defaults.DAILY_INTERVAL_HOURS
        ),
        hourly_interval=_parse_hours(
            chart_section, "hourly_interval_hours", Defaults.HOURLY_INTERVAL_HOURS
        ),
        hourly_window=_parse_hours(
            chart_section, "hourly_window_hours", Defaults.HOURLY_WINDOW_HOURS
        ),
    )

    logging_section = _section(data, "logging")
    logging_settings = LoggingSettings(
        console_level=_parse_level(logging_section, "console_level"),
        file_level=_parse_level(logging_section, "file_level"),
    )

    return Settings(chart=chart, logging=logging_settings)


_settings: Settings | None = None


def get_settings(path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환 (최초 호출 시 로드 후 캐시)

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        캐시된 Settings
    """
    global _settings
    if _settings is None:
        _settings = load_settings(path)
    return _settings


def reset() -> None:
    """캐시된 Settings 초기화 (테스트용)"""
    global _settings
    _settings = None
