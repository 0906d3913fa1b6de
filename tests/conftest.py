import pytest
from mapconvert.utils.log_context import conversion_context_var

# 天安门附近，WGS84
BEIJING = (39.9087, 116.3975)
SHANGHAI = (31.2304, 121.4737)
SHENZHEN = (22.5431, 114.0579)
PARIS = (48.8566, 2.3522)


@pytest.fixture
def beijing():
    return BEIJING


@pytest.fixture(params=[BEIJING, SHANGHAI, SHENZHEN], ids=['beijing', 'shanghai', 'shenzhen'])
def china_point(request):
    """国内的几个参考点"""
    return request.param


@pytest.fixture
def clean_log_context():
    """确保每个测试开始和结束时日志上下文都是空的"""
    token = conversion_context_var.set('')
    yield
    conversion_context_var.reset(token)
