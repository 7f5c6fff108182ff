from .logging_utils import TRACE, get_log_level, get_logger

__all__ = [
    "TRACE",
    "get_log_level",
    "get_logger",
]
