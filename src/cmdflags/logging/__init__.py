from cmdflags.logging.factory import DefaultLoggerFactory
from cmdflags.logging.helpers import get_logger, setup_base_logger

__all__ = ['DefaultLoggerFactory', 'get_logger', 'setup_base_logger']
