from .logger_config import setup_logger, log

__all__ = ['setup_logger', 'log']
