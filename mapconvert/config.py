import os
from dotenv import load_dotenv

# 加载环境变量
load_dotenv()


class Config:
    """Base configuration class."""
    # 日志级别，可通过 MAPCONVERT_LOG_LEVEL 覆盖
    LOG_LEVEL = os.environ.get('MAPCONVERT_LOG_LEVEL', 'WARNING').upper()
    LOG_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s: %(context)s%(message)s'

    # To be configured in subclasses
    DEBUG = False
    TESTING = False


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('MAPCONVERT_LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    LOG_LEVEL = 'DEBUG'


config_by_name = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
