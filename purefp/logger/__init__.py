from .logger import HANDLER_NAME, get_logger, logger, setup_logger

__all__ = ["HANDLER_NAME", "logger", "setup_logger", "get_logger"]
