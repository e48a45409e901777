from .statute import (
    INTERNATIONAL_STATUTES,
    Severity,
    StatuteInfo,
    get_all_statutes,
    get_statute_info,
)

__all__ = [
    "INTERNATIONAL_STATUTES",
    "Severity",
    "StatuteInfo",
    "get_all_statutes",
    "get_statute_info",
]
