"""Utilities package"""
from .config import config, Config
from .logger import logger, setup_logger
from .dates import as_utc
from .numbers import round_half_up
from .performance import PerformanceMonitor

__all__ = ["config", "Config", "logger", "setup_logger", "as_utc", "round_half_up", "PerformanceMonitor"]
