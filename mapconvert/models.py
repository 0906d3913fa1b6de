from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    """
    经纬度坐标点（纬度在前）。

    点本身不记录所属坐标系，由产生它的转换函数决定。
    """
    lat: float
    lng: float


class CoordSystem(str, Enum):
    """Coordinate systems understood by coordinate_transform."""
    WGS84 = 'WGS84'
    GCJ02 = 'GCJ02'
    BD09 = 'BD09'

    @classmethod
    def parse(cls, name):
        """'gcj-02', 'Gcj02', 'GCJ02' 都解析为 CoordSystem.GCJ02"""
        return cls[name.strip().upper().replace('-', '')]
