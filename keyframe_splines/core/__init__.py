"""
core - 核心算法模块

包含:
- numeric: 控制值的数值能力约定
- interpolation: 插值方式
- key: 关键帧
- locator: 区间定位
- engine: 插值公式
"""

from .numeric import ONE, Interpolable, as_value, linear_combination, zero_like
from .interpolation import Bezier, CatmullRom, Cosine, Hermite, Interpolation, Linear, Step, required_keys
from .key import Keyframe
from .locator import Segment, find_segment, normalize, segment_window
from .engine import catmull_rom_tangent, cosine, cubic_bezier, cubic_hermite, evaluate, lerp, step

__all__ = [
    "ONE",
    "Interpolable",
    "as_value",
    "linear_combination",
    "zero_like",
    "Bezier",
    "CatmullRom",
    "Cosine",
    "Hermite",
    "Interpolation",
    "Linear",
    "Step",
    "required_keys",
    "Keyframe",
    "Segment",
    "find_segment",
    "normalize",
    "segment_window",
    "catmull_rom_tangent",
    "cosine",
    "cubic_bezier",
    "cubic_hermite",
    "evaluate",
    "lerp",
    "step",
]
