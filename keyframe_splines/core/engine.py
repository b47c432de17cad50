"""
engine - 插值公式

给定局部参数 u ∈ [0, 1]、插值方式和插值窗口，计算插值结果。

实现:
1. 阶跃 / 线性 / 余弦缓动
2. 三次 Bézier (Bernstein 基)
3. Catmull-Rom (非均匀参数间距的三次 Hermite 形式)
4. 三次 Hermite (显式切线)

所有公式均为纯函数，仅依赖 numeric 模块约定的运算。
"""

import logging

import numpy as np

from .interpolation import Bezier, CatmullRom, Cosine, Hermite, Interpolation, Linear, Step
from .key import Keyframe
from .locator import Segment
from .numeric import ONE, linear_combination, zero_like

logger = logging.getLogger(__name__)


def step(u: float, threshold: float, a, b):
    """阶跃：u < threshold 时取 a，否则取 b。"""
    return a if u < threshold else b


def lerp(u: float, a, b):
    """线性插值 (1-u)*a + u*b。"""
    return linear_combination((ONE - u, u), (a, b))


def cosine(u: float, a, b):
    """
    余弦缓动插值。

    u 先映射为 (1 - cos(uπ)) / 2，再做线性插值；两端导数为零。
    """
    eased = (ONE - np.cos(u * np.pi)) * 0.5
    return lerp(eased, a, b)


def cubic_bezier(u: float, a, c0, c1, b):
    """
    三次 Bézier 曲线 (Bernstein 基)。

    Args:
        u: 局部参数
        a: 起点
        c0: 第一控制点
        c1: 第二控制点
        b: 终点
    """
    one_u = ONE - u
    weights = (one_u * one_u * one_u, 3 * one_u * one_u * u, 3 * one_u * u * u, u * u * u)
    return linear_combination(weights, (a, c0, c1, b))


def cubic_hermite(u: float, p0, m0, p1, m1):
    """
    三次 Hermite 插值。

    切线 m0/m1 为关于局部参数 u 的导数 (即 dV/dt 乘以区间长度)。

        p(u) = h00·p0 + h10·m0 + h01·p1 + h11·m1
    """
    u2 = u * u
    u3 = u2 * u
    h00 = 2 * u3 - 3 * u2 + ONE
    h10 = u3 - 2 * u2 + u
    h01 = 3 * u2 - 2 * u3
    h11 = u3 - u2
    return linear_combination((h00, h10, h01, h11), (p0, m0, p1, m1))


def catmull_rom_tangent(before: Keyframe, after: Keyframe, span: float):
    """
    Catmull-Rom 切线估计，已按区间长度缩放到局部参数 u。

        m = (after.value - before.value) / (after.t - before.t) * span
    """
    dt = after.t - before.t
    if dt == 0:
        return zero_like(after.value)
    return (after.value - before.value) * (span / dt)


def _bezier_control_points(segment: Segment, span: float):
    """由关键帧切线 (缺省时用 Catmull-Rom 估计) 计算两个 Bézier 控制点。"""
    start, end = segment.start, segment.end

    if start.tangent_out is not None:
        m0 = start.tangent_out * span
    else:
        m0 = catmull_rom_tangent(segment.previous, end, span)

    if end.tangent_in is not None:
        m1 = end.tangent_in * span
    else:
        m1 = catmull_rom_tangent(start, segment.following, span)

    return start.value + m0 * (ONE / 3), end.value - m1 * (ONE / 3)


def _hermite_tangents(segment: Segment, span: float):
    """读取 Hermite 切线，缺失时按零切线处理。"""
    start, end = segment.start, segment.end

    if start.tangent_out is None:
        logger.debug("Keyframe at t=%s has no out tangent, using zero", start.t)
        m0 = zero_like(start.value)
    else:
        m0 = start.tangent_out * span

    if end.tangent_in is None:
        logger.debug("Keyframe at t=%s has no in tangent, using zero", end.t)
        m1 = zero_like(end.value)
    else:
        m1 = end.tangent_in * span

    return m0, m1


def evaluate(kind: Interpolation, u: float, segment: Segment):
    """
    计算区间内局部参数 u 处的插值。

    Args:
        kind: 起点关键帧的插值方式
        u: 局部参数 [0, 1]
        segment: 插值窗口

    Returns:
        插值结果；零长度区间直接返回起点值
    """
    start, end = segment.start, segment.end
    if segment.is_degenerate:
        return start.value

    span = end.t - start.t

    match kind:
        case Step(threshold=threshold):
            return step(u, threshold, start.value, end.value)
        case Linear():
            return lerp(u, start.value, end.value)
        case Cosine():
            return cosine(u, start.value, end.value)
        case Bezier():
            c0, c1 = _bezier_control_points(segment, span)
            return cubic_bezier(u, start.value, c0, c1, end.value)
        case CatmullRom():
            m0 = catmull_rom_tangent(segment.previous, end, span)
            m1 = catmull_rom_tangent(start, segment.following, span)
            return cubic_hermite(u, start.value, m0, end.value, m1)
        case Hermite():
            m0, m1 = _hermite_tangents(segment, span)
            return cubic_hermite(u, start.value, m0, end.value, m1)
        case _:
            raise TypeError(f"Unknown interpolation kind: {kind!r}")


if __name__ == "__main__":
    print("=== 插值公式测试 ===")

    for u in (0.0, 0.25, 0.5, 0.75, 1.0):
        print(f"u={u:.2f}: lerp={lerp(u, 0.0, 10.0):.4f}, cosine={cosine(u, 0.0, 10.0):.4f}")

    # 共线数据的 Hermite 插值应落在直线上
    p = cubic_hermite(0.5, np.array([0.0, 0.0]), np.array([1.0, 2.0]), np.array([1.0, 2.0]), np.array([1.0, 2.0]))
    print(f"共线 Hermite 中点: {p}")
