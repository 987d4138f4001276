from .init import LabeledFormatter, get_logger, reset_logging, setup_logging

__all__ = [
    "LabeledFormatter",
    "get_logger",
    "reset_logging",
    "setup_logging",
]
