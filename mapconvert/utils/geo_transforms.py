import math
import logging

from ..models import Point, CoordSystem
from ..exceptions import UnknownCoordinateSystemError
from .log_context import conversion_context

logger = logging.getLogger(__name__)

# 保持与参考实现一致的 PI 字面量，不使用 math.pi
PI = 3.14159265358979324
X_PI = PI * 3000.0 / 180.0

# Krasovsky 1940
#
# a = 6378245.0, 1/f = 298.3
# b = a * (1 - f)
# ee = (a^2 - b^2) / a^2
A = 6378245.0
EE = 0.00669342162296594323

# 中国范围（粗略矩形）
CHINA_MIN_LNG = 72.004
CHINA_MAX_LNG = 137.8347
CHINA_MIN_LAT = 0.8293
CHINA_MAX_LAT = 55.8271


def _sin(v):
    # math.sin 对 inf 会抛 ValueError，这里与 IEEE 语义一致返回 nan
    if math.isinf(v):
        return math.nan
    return math.sin(v)


def _cos(v):
    if math.isinf(v):
        return math.nan
    return math.cos(v)


def out_of_china(lat, lng):
    """
    判断是否在国内，不在国内不做偏移
    """
    if lng < CHINA_MIN_LNG or lng > CHINA_MAX_LNG:
        return True
    if lat < CHINA_MIN_LAT or lat > CHINA_MAX_LAT:
        return True
    return False


def transform_lat(x, y):
    """
    GCJ02 纬度偏移量，x = lng - 105.0, y = lat - 35.0
    """
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + \
          0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += (20.0 * _sin(6.0 * x * PI) + 20.0 * \
            _sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * _sin(y * PI) + 40.0 * \
            _sin(y / 3.0 * PI)) * 2.0 / 3.0
    ret += (160.0 * _sin(y / 12.0 * PI) + 320 * \
            _sin(y * PI / 30.0)) * 2.0 / 3.0
    return ret


def transform_lng(x, y):
    """
    GCJ02 经度偏移量，x = lng - 105.0, y = lat - 35.0
    """
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + \
          0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += (20.0 * _sin(6.0 * x * PI) + 20.0 * \
            _sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * _sin(x * PI) + 40.0 * \
            _sin(x / 3.0 * PI)) * 2.0 / 3.0
    ret += (150.0 * _sin(x / 12.0 * PI) + 300.0 * \
            _sin(x / 30.0 * PI)) * 2.0 / 3.0
    return ret


def _gcj02_offset(lat, lng):
    """按 Krasovsky 椭球把偏移量换算成度，返回加偏后的点"""
    dlat = transform_lat(lng - 105.0, lat - 35.0)
    dlng = transform_lng(lng - 105.0, lat - 35.0)
    radlat = lat / 180.0 * PI
    magic = _sin(radlat)
    magic = 1 - EE * magic * magic
    sqrtmagic = math.sqrt(magic)
    dlat = (dlat * 180.0) / ((A * (1 - EE)) / (magic * sqrtmagic) * PI)
    dlng = (dlng * 180.0) / (A / sqrtmagic * _cos(radlat) * PI)
    return Point(lat + dlat, lng + dlng)


def wgs84_to_gcj02(lat, lng):
    """
    WGS84转GCJ02(火星坐标系)

    国外坐标原样返回。
    """
    if out_of_china(lat, lng):
        return Point(lat, lng)
    return _gcj02_offset(lat, lng)


def gcj02_to_wgs84(lat, lng):
    """
    GCJ02(火星坐标系)转GPS84

    近似反算：用输入点的偏移量反向平移一次，国内误差在 5e-5 度以内（上海附近约 1.5e-5）。
    """
    if out_of_china(lat, lng):
        return Point(lat, lng)
    mg = _gcj02_offset(lat, lng)
    return Point(lat * 2 - mg.lat, lng * 2 - mg.lng)


def gcj02_to_bd09(lat, lng):
    """
    火星坐标系(GCJ-02)转百度坐标系(BD-09)
    """
    x = lng
    y = lat
    z = math.sqrt(x * x + y * y) + 0.00002 * _sin(y * X_PI)
    theta = math.atan2(y, x) + 0.000003 * _cos(x * X_PI)
    bd_lng = z * _cos(theta) + 0.0065
    bd_lat = z * _sin(theta) + 0.006
    return Point(bd_lat, bd_lng)


def bd09_to_gcj02(lat, lng):
    """
    百度坐标系(BD-09)转火星坐标系(GCJ-02)
    """
    x = lng - 0.0065
    y = lat - 0.006
    z = math.sqrt(x * x + y * y) - 0.00002 * _sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * _cos(x * X_PI)
    gg_lng = z * _cos(theta)
    gg_lat = z * _sin(theta)
    return Point(gg_lat, gg_lng)


def wgs84_to_bd09(lat, lng):
    """
    WGS84转百度坐标系(BD-09)

    国外坐标跳过 GCJ02 一步，但仍会加上百度偏移。
    """
    gcj02 = wgs84_to_gcj02(lat, lng)
    return gcj02_to_bd09(gcj02.lat, gcj02.lng)


def bd09_to_wgs84(lat, lng):
    """
    百度坐标系(BD-09)转WGS84
    """
    gcj02 = bd09_to_gcj02(lat, lng)
    return gcj02_to_wgs84(gcj02.lat, gcj02.lng)


_CONVERTERS = {
    (CoordSystem.WGS84, CoordSystem.GCJ02): wgs84_to_gcj02,
    (CoordSystem.GCJ02, CoordSystem.WGS84): gcj02_to_wgs84,
    (CoordSystem.GCJ02, CoordSystem.BD09): gcj02_to_bd09,
    (CoordSystem.BD09, CoordSystem.GCJ02): bd09_to_gcj02,
    (CoordSystem.WGS84, CoordSystem.BD09): wgs84_to_bd09,
    (CoordSystem.BD09, CoordSystem.WGS84): bd09_to_wgs84,
}


def _resolve_system(value):
    if isinstance(value, CoordSystem):
        return value
    try:
        return CoordSystem.parse(value)
    except (KeyError, AttributeError, TypeError):
        raise UnknownCoordinateSystemError(f'不支持的坐标系统: {value!r}') from None


def coordinate_transform(lat, lng, from_sys, to_sys):
    """坐标系统转换
    支持的坐标系统：
    - WGS84: 世界大地测量系统
    - GCJ02: 国测局坐标系
    - BD09: 百度坐标系

    from_sys / to_sys 可以是 CoordSystem 或其名称（不区分大小写，如 'gcj-02'）。
    """
    source = _resolve_system(from_sys)
    target = _resolve_system(to_sys)

    if source == target:
        return Point(lat, lng)

    with conversion_context(f'{source.value}->{target.value} '):
        result = _CONVERTERS[(source, target)](lat, lng)
        logger.debug(f"({lat}, {lng}) -> ({result.lat}, {result.lng})")
    return result
