import logging

import pytest

import mapconvert

from mapconvert import configure_logging, ConfigurationError
from mapconvert.config import config_by_name, DevelopmentConfig, ProductionConfig, TestingConfig
from mapconvert.utils.log_context import ContextFilter, conversion_context


@pytest.fixture
def package_logger():
    """测试后移除 configure_logging 挂上的 handler 并还原级别"""
    logger = logging.getLogger('mapconvert')
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


def test_config_by_name():
    assert config_by_name['default'] is DevelopmentConfig
    assert config_by_name['production'] is ProductionConfig
    assert config_by_name['testing'].TESTING is True
    assert DevelopmentConfig.DEBUG is True
    assert ProductionConfig.DEBUG is False


def test_configure_logging_testing(package_logger):
    logger = configure_logging('testing')
    assert logger is package_logger
    assert logger.level == logging.getLevelName(TestingConfig.LOG_LEVEL)
    assert mapconvert._handler in logger.handlers
    assert any(isinstance(f, ContextFilter) for f in mapconvert._handler.filters)


def test_configure_logging_is_idempotent(package_logger):
    configure_logging('testing')
    configure_logging('production')
    added = [h for h in package_logger.handlers
             if any(isinstance(f, ContextFilter) for f in h.filters)]
    assert added == [mapconvert._handler]


def test_configure_logging_reads_environment(package_logger, monkeypatch):
    monkeypatch.setenv('MAPCONVERT_CONFIG', 'testing')
    logger = configure_logging()
    assert logger.level == logging.DEBUG


def test_configure_logging_unknown_name(package_logger):
    with pytest.raises(ConfigurationError) as excinfo:
        configure_logging('staging')
    # 消息不带 KeyError 式的引号
    assert str(excinfo.value) == '未知的配置名: staging'


def test_context_filter_injects_label():
    record = logging.LogRecord('mapconvert', logging.INFO, __file__, 1, 'msg', None, None)
    with conversion_context('GCJ02->BD09 '):
        assert ContextFilter().filter(record) is True
    assert record.context == 'GCJ02->BD09 '

    ContextFilter().filter(record)
    assert record.context == ''
