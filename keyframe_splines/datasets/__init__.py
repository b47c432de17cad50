"""
datasets - 参考关键帧数据

包含:
- reference: 折线、共线点、颜色渐变、阶跃保持等关键帧序列
"""

from .reference import (
    ReferenceSamples,
    collinear_keys,
    color_keys,
    hold_keys,
    ramp_keys,
    ramp_reference,
)

__all__ = [
    "ReferenceSamples",
    "collinear_keys",
    "color_keys",
    "hold_keys",
    "ramp_keys",
    "ramp_reference",
]
