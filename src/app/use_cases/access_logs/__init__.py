"""
Access Log Use Cases
"""

from .list_access_logs_use_case import AccessLogsResponse, ListAccessLogsUseCase

__all__ = [
    "ListAccessLogsUseCase",
    "AccessLogsResponse",
]
