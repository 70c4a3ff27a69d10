"""
로깅 설정 유틸리티

settings.yaml의 logging 섹션(LoggingSettings)으로 레벨을 정한다.
walletcore 내부 모듈은 logging.getLogger(__name__)만 사용하고
핸들러 설정은 이 모듈을 호출하는 프로세스가 담당한다.

사용법:
    from walletcore.config import get_settings
    from walletcore.logging import setup_logging

    setup_logging("walletcore", get_settings().logging)
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from walletcore.config.loader import LoggingSettings
from walletcore.constants import Paths


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7  # 일 단위 백업 파일 수


def get_log_file_path(process_name: str, log_dir: Path | None = None) -> Path:
    """로그 파일 경로 반환

    Args:
        process_name: 프로세스 이름
        log_dir: 로그 디렉토리 (None이면 Paths.LOGS_DIR)

    Returns:
        로그 파일 Path
    """
    return (log_dir or Paths.LOGS_DIR) / f"{process_name}.log"


def _console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_file: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    """자정마다 롤링되는 파일 핸들러 (백업: walletcore.log.2026-02-21)"""
    handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    process_name: str,
    settings: LoggingSettings | None = None,
    log_dir: Path | None = None,
) -> logging.Logger:
    """root 로거에 콘솔 + 일일 롤링 파일 핸들러 설치

    재호출하면 기존 핸들러를 닫고 교체한다.

    Args:
        process_name: 프로세스 이름 (로그 파일명)
        settings: 콘솔/파일 로그 레벨 (None이면 LoggingSettings 기본값)
        log_dir: 로그 디렉토리 (None이면 Paths.LOGS_DIR)

    Returns:
        설정된 root Logger
    """
    settings = settings or LoggingSettings()
    log_file = get_log_file_path(process_name, log_dir)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # root는 두 핸들러 중 낮은 레벨까지 통과시킨다
    root_logger.setLevel(min(settings.console_level, settings.file_level))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    root_logger.addHandler(_console_handler(settings.console_level, formatter))
    root_logger.addHandler(_file_handler(log_file, settings.file_level, formatter))

    root_logger.info(
        f"Logging ready: {process_name} "
        f"(console={logging.getLevelName(settings.console_level)}, "
        f"file={log_file} {logging.getLevelName(settings.file_level)})"
    )
    return root_logger
