"""
keyframe_splines - 关键帧样条插值库

给定按参数排序的关键帧 (参数、控制值、插值方式)，在任意查询参数处计算插值结果。
支持阶跃、线性、余弦缓动、三次 Bézier、Catmull-Rom 与 Hermite 插值，
控制值可以是 float、numpy 向量或任何支持加减法与标量乘法的类型。
"""

from .core import (
    Bezier,
    CatmullRom,
    Cosine,
    Hermite,
    Interpolable,
    Interpolation,
    Keyframe,
    Linear,
    Step,
)
from .errors import (
    CapacityError,
    InsufficientKeyframesError,
    OutOfBoundsError,
    OutOfRangeError,
    SplineError,
)
from .spline import SampledWithKey, Spline

__version__ = "0.1.0"
__all__ = [
    "Spline",
    "SampledWithKey",
    "Keyframe",
    "Interpolation",
    "Interpolable",
    "Step",
    "Linear",
    "Cosine",
    "Bezier",
    "CatmullRom",
    "Hermite",
    "SplineError",
    "OutOfRangeError",
    "InsufficientKeyframesError",
    "CapacityError",
    "OutOfBoundsError",
]
