import os
import logging
from .config import config_by_name
from .exceptions import BaseCustomException, UnknownCoordinateSystemError, ConfigurationError
from .models import Point, CoordSystem
from .utils.log_context import ContextFilter
from .utils.geo_transforms import (
    out_of_china,
    wgs84_to_gcj02,
    gcj02_to_wgs84,
    gcj02_to_bd09,
    bd09_to_gcj02,
    wgs84_to_bd09,
    bd09_to_wgs84,
    coordinate_transform,
)

# 库默认不输出日志，由调用方决定
logging.getLogger(__name__).addHandler(logging.NullHandler())

# configure_logging 挂上的输出 handler
_handler = None


def configure_logging(config_name=None):
    """
    按配置名为 mapconvert 日志器挂上格式化输出。
    config_name 为空时读取 MAPCONVERT_CONFIG 环境变量。
    """
    if config_name is None:
        config_name = os.environ.get('MAPCONVERT_CONFIG', 'default')

    try:
        config = config_by_name[config_name]
    except KeyError:
        raise ConfigurationError(f'未知的配置名: {config_name}') from None

    logger = logging.getLogger(__name__)
    logger.setLevel(config.LOG_LEVEL)

    # --- Logging setup ---
    global _handler
    formatter = logging.Formatter(config.LOG_FORMAT)
    if _handler is None or _handler not in logger.handlers:
        _handler = logging.StreamHandler()
        _handler.addFilter(ContextFilter())
        logger.addHandler(_handler)
    _handler.setFormatter(formatter)

    logger.info(f"mapconvert logging configured ({config_name})")
    return logger


__all__ = [
    'Point',
    'CoordSystem',
    'BaseCustomException',
    'UnknownCoordinateSystemError',
    'ConfigurationError',
    'configure_logging',
    'out_of_china',
    'wgs84_to_gcj02',
    'gcj02_to_wgs84',
    'gcj02_to_bd09',
    'bd09_to_gcj02',
    'wgs84_to_bd09',
    'bd09_to_wgs84',
    'coordinate_transform',
]
