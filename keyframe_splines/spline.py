"""
spline - 关键帧样条

Spline 持有按参数升序排列的关键帧，负责采样与增删改。
每个区间的插值方式取自区间起点关键帧，因此同一条样条可以在不同区间使用不同的插值方式。

采样流程:
1. 区间定位 (locator.find_segment)
2. 构造插值窗口并归一化局部参数
3. 按插值方式求值 (engine.evaluate)
"""

import logging
from typing import Any, Callable, Iterable, Iterator, NamedTuple

import numpy as np

from .core.engine import evaluate
from .core.interpolation import required_keys
from .core.key import Keyframe
from .core.locator import find_segment, find_segments, normalize, segment_window
from .errors import CapacityError, InsufficientKeyframesError, OutOfBoundsError, OutOfRangeError

logger = logging.getLogger(__name__)


class SampledWithKey(NamedTuple):
    """采样结果及所在区间起点关键帧的下标。"""

    value: Any
    index: int


class Spline:
    """
    关键帧样条。

    构造时按参数对关键帧做稳定排序；参数相同的关键帧允许共存，形成零长度区间。
    指定 capacity 时为固定容量模式，超出容量的插入会抛出 CapacityError。

    Attributes:
        capacity: 固定容量，None 表示不限
    """

    def __init__(self, keys: Iterable[Keyframe] = (), capacity: int | None = None):
        """
        初始化样条。

        Args:
            keys: 初始关键帧，无需预先排序
            capacity: 固定容量，None 表示不限
        """
        if capacity is not None and capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.capacity = capacity

        keys = list(keys)
        for key in keys:
            self._check_key(key)
        if capacity is not None and len(keys) > capacity:
            raise CapacityError(capacity)

        self._keys: list[Keyframe] = sorted(keys, key=lambda k: k.t)
        self._ts: np.ndarray = np.empty(0)
        self._update_parameters()

    @staticmethod
    def _check_key(key: Any):
        if not isinstance(key, Keyframe):
            raise TypeError(f"Expected a Keyframe, got {type(key).__name__}")

    def _update_parameters(self):
        """同步参数数组，供二分查找使用。"""
        self._ts = np.fromiter((k.t for k in self._keys), dtype=np.float64, count=len(self._keys))

    # ------------------------------------------------------------------
    # 访问
    # ------------------------------------------------------------------

    @property
    def keys(self) -> tuple[Keyframe, ...]:
        """按参数排序的关键帧 (只读视图)。"""
        return tuple(self._keys)

    @property
    def is_empty(self) -> bool:
        return not self._keys

    @property
    def domain(self) -> tuple[float, float]:
        """样条覆盖的参数范围 [t_first, t_last]。"""
        if not self._keys:
            raise InsufficientKeyframesError(1, 0)
        return self._keys[0].t, self._keys[-1].t

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Keyframe]:
        return iter(self._keys)

    def __getitem__(self, index: int) -> Keyframe:
        return self.get(index)

    def get(self, index: int) -> Keyframe:
        """按下标获取关键帧，越界 (含负下标) 时抛出 OutOfBoundsError。"""
        if not 0 <= index < len(self._keys):
            raise OutOfBoundsError(index, len(self._keys))
        return self._keys[index]

    # ------------------------------------------------------------------
    # 修改
    # ------------------------------------------------------------------

    def add(self, key: Keyframe) -> "Spline":
        """插入关键帧并保持排序，参数相同时插在已有关键帧之后。返回 self 以支持链式调用。"""
        self._check_key(key)
        if self.capacity is not None and len(self._keys) >= self.capacity:
            raise CapacityError(self.capacity)

        index = int(np.searchsorted(self._ts, key.t, side="right"))
        self._keys.insert(index, key)
        self._update_parameters()
        logger.debug("Inserted keyframe t=%s at index %d", key.t, index)
        return self

    def remove(self, index: int) -> Keyframe:
        """删除并返回指定下标的关键帧。"""
        key = self.get(index)
        del self._keys[index]
        self._update_parameters()
        logger.debug("Removed keyframe t=%s from index %d", key.t, index)
        return key

    def replace(self, index: int, fn: Callable[[Keyframe], Keyframe]) -> Keyframe:
        """
        用 fn(旧关键帧) 的结果替换指定关键帧，并重新排序。

        Returns:
            被替换的旧关键帧
        """
        old = self.get(index)
        new = fn(old)
        self._check_key(new)
        self._keys[index] = new
        self._keys.sort(key=lambda k: k.t)
        self._update_parameters()
        return old

    # ------------------------------------------------------------------
    # 采样
    # ------------------------------------------------------------------

    def _sample_at(self, t: float, i: int) -> SampledWithKey:
        """在已定位的区间 i 内求值。"""
        n = len(self._keys)
        segment = segment_window(self._keys, i)
        kind = segment.start.interpolation

        # 最后一个关键帧的插值方式不参与前向插值
        if i < n - 1:
            required = required_keys(kind)
            if n < required:
                raise InsufficientKeyframesError(required, n, kind.tag)

        u = normalize(t, segment.start.t, segment.end.t)
        return SampledWithKey(evaluate(kind, u, segment), i)

    def sample_with_key(self, t: float) -> SampledWithKey:
        """
        采样并返回所在区间起点关键帧的下标。

        Raises:
            InsufficientKeyframesError: 样条为空，或插值方式所需关键帧不足
            OutOfRangeError: t 超出参数范围
        """
        if not self._keys:
            raise InsufficientKeyframesError(1, 0)
        t = float(t)
        i = find_segment(self._ts, t)
        return self._sample_at(t, i)

    def sample(self, t: float):
        """
        在参数 t 处采样。

        Args:
            t: 查询参数，必须位于 [t_first, t_last] 内

        Returns:
            插值结果
        """
        return self.sample_with_key(t).value

    def sample_clamped_with_key(self, t: float) -> SampledWithKey:
        """钳制采样：超出范围时返回首/尾关键帧的值。"""
        if not self._keys:
            raise InsufficientKeyframesError(1, 0)
        t = float(t)
        if t < self._ts[0]:
            return SampledWithKey(self._keys[0].value, 0)
        if t > self._ts[-1]:
            last = len(self._keys) - 1
            return SampledWithKey(self._keys[last].value, last)
        return self.sample_with_key(t)

    def sample_clamped(self, t: float):
        """与 sample 相同，但超出范围的查询被钳制到首/尾关键帧的值。"""
        return self.sample_clamped_with_key(t).value

    def sample_batch(self, t_values: np.ndarray, clamped: bool = False) -> np.ndarray:
        """
        批量采样（向量化区间定位）。

        Args:
            t_values: (M,) 查询参数
            clamped: 是否钳制超出范围的查询

        Returns:
            标量样条为 (M,)，向量样条为 (M, D)
        """
        if not self._keys:
            raise InsufficientKeyframesError(1, 0)

        t_values = np.atleast_1d(np.asarray(t_values, dtype=np.float64))
        indices = find_segments(self._ts, t_values)
        last = len(self._keys) - 1

        results = []
        for t, i in zip(t_values, indices):
            below = i < 0
            above = i == last and t > self._ts[-1]
            if below or above or np.isnan(t):
                if not clamped or np.isnan(t):
                    raise OutOfRangeError(float(t), self.domain)
                results.append(self._keys[0].value if below else self._keys[last].value)
                continue
            results.append(self._sample_at(float(t), int(i)).value)

        return np.asarray(results)

    # ------------------------------------------------------------------
    # 结构化视图
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """转换为 JSON 可序列化的字典。"""
        return {
            "capacity": self.capacity,
            "keys": [key.to_dict() for key in self._keys],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Spline":
        """从字典重建样条。"""
        return cls(
            keys=[Keyframe.from_dict(k) for k in data.get("keys", [])],
            capacity=data.get("capacity"),
        )

    def __repr__(self) -> str:
        if not self._keys:
            return f"Spline(N=0, capacity={self.capacity})"
        t0, t1 = self.domain
        return f"Spline(N={len(self._keys)}, domain=[{t0}, {t1}], capacity={self.capacity})"


if __name__ == "__main__":
    from keyframe_splines.datasets import ramp_keys

    spline = Spline(ramp_keys())

    print("=== 样条采样测试 ===")
    print(spline)
    for t in (0.0, 0.5, 1.0, 1.5, 2.0):
        print(f"t={t:.1f}: {spline.sample(t):.4f}")
    print(f"钳制采样 t=-1: {spline.sample_clamped(-1.0)}")
