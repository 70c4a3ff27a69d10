"""
서비스 패키지

계좌 요약 등 호출자 측 조합 로직
"""

from walletcore.services.chart_service import ChartService

__all__ = ["ChartService"]
