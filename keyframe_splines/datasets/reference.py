"""
reference - 参考关键帧数据

提供若干固定的关键帧序列及其期望采样值，用于测试与演示。

数据说明:
- ramp: 三个线性关键帧 (0,0) (1,10) (2,0)，峰值在 t=1
- collinear: 二维直线上非均匀分布的四个关键帧
- color: RGB 颜色渐变 (numpy 向量控制值)
- hold: 含零长度区间的阶跃序列
"""

from dataclasses import dataclass, field

import numpy as np

from ..core.interpolation import CatmullRom, Cosine, Interpolation, Linear, Step
from ..core.key import Keyframe


@dataclass
class ReferenceSamples:
    """期望采样值表 (参数 -> 值)"""

    samples: dict[float, float] = field(default_factory=dict)
    out_of_range: tuple = ()  # 非钳制采样应失败的参数


def ramp_keys() -> list[Keyframe]:
    """
    三关键帧线性折线。

    Returns:
        keys: [(0, 0), (1, 10), (2, 0)]，均为 Linear
    """
    return [
        Keyframe(0.0, 0.0, Linear()),
        Keyframe(1.0, 10.0, Linear()),
        Keyframe(2.0, 0.0, Linear()),
    ]


def ramp_reference() -> ReferenceSamples:
    """ramp_keys 的期望采样值。"""
    return ReferenceSamples(
        samples={0.0: 0.0, 0.5: 5.0, 1.0: 10.0, 1.5: 5.0, 2.0: 0.0},
        out_of_range=(-1.0, 2.5),
    )


def collinear_keys(kind: Interpolation | None = None) -> list[Keyframe]:
    """
    位于直线 y = 2x + 1 上的四个关键帧，参数与坐标均非均匀分布。

    Args:
        kind: 所有关键帧的插值方式，默认 CatmullRom
    """
    kind = kind if kind is not None else CatmullRom()
    ts = [0.0, 1.0, 3.0, 4.0]
    xs = [0.0, 1.0, 3.0, 4.0]
    return [Keyframe(t, np.array([x, 2 * x + 1]), kind) for t, x in zip(ts, xs)]


def color_keys() -> list[Keyframe]:
    """RGB 颜色渐变：红 -> 绿 (余弦缓动) -> 蓝。"""
    return [
        Keyframe(0.0, np.array([1.0, 0.0, 0.0]), Linear()),
        Keyframe(0.5, np.array([0.0, 1.0, 0.0]), Cosine()),
        Keyframe(1.0, np.array([0.0, 0.0, 1.0]), Linear()),
    ]


def hold_keys() -> list[Keyframe]:
    """阶跃序列，在 t=2 处有两个参数相同的关键帧 (零长度区间)。"""
    return [
        Keyframe(0.0, 1.0, Step()),
        Keyframe(2.0, 3.0, Step()),
        Keyframe(2.0, 5.0, Step()),
        Keyframe(4.0, 7.0, Step()),
    ]
