"""
locator - 区间定位

给定查询参数 t，在已排序的关键帧参数数组中二分查找所在区间，
并构造插值所需的关键帧窗口 (前邻、起点、终点、后邻)。
"""

from typing import NamedTuple, Sequence

import numpy as np

from ..errors import OutOfRangeError
from .key import Keyframe


class Segment(NamedTuple):
    """
    插值窗口。

    序列两端缺失的邻居用最近的端点关键帧代替 (端点复制规则)。
    """

    previous: Keyframe
    start: Keyframe
    end: Keyframe
    following: Keyframe

    @property
    def is_degenerate(self) -> bool:
        """零长度区间 (起终点参数相同)。"""
        return self.end.t == self.start.t


def find_segment(ts: np.ndarray, t: float) -> int:
    """
    查找满足 ts[i] <= t < ts[i+1] 的下标 i。

    t 恰好等于最后一个参数时返回 len(ts) - 1；参数重复时取 t 及之前的最后一个关键帧。

    Args:
        ts: (N,) 升序排列的关键帧参数
        t: 查询参数

    Returns:
        区间起点下标

    Raises:
        OutOfRangeError: t 不在 [ts[0], ts[-1]] 内
    """
    if len(ts) == 0 or not ts[0] <= t <= ts[-1]:
        domain = (float(ts[0]), float(ts[-1])) if len(ts) else (np.nan, np.nan)
        raise OutOfRangeError(t, domain)
    return int(np.searchsorted(ts, t, side="right")) - 1


def find_segments(ts: np.ndarray, t_values: np.ndarray) -> np.ndarray:
    """批量版本的 find_segment，不做范围检查。"""
    return np.searchsorted(ts, t_values, side="right") - 1


def normalize(t: float, t0: float, t1: float) -> float:
    """将 t 归一化到区间 [t0, t1] 的局部参数 u ∈ [0, 1]。零长度区间返回 0。"""
    span = t1 - t0
    if span == 0:
        return 0.0
    return (t - t0) / span


def segment_window(keys: Sequence[Keyframe], i: int) -> Segment:
    """构造以 keys[i] 为起点的插值窗口。"""
    last = len(keys) - 1
    start = keys[i]
    end = keys[min(i + 1, last)]
    previous = keys[i - 1] if i > 0 else start
    following = keys[i + 2] if i + 2 <= last else end
    return Segment(previous, start, end, following)
