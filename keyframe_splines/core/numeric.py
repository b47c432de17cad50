"""
numeric - 控制值的数值能力约定

插值引擎只依赖以下运算:
1. 加法 / 减法
2. 与实数标量相乘
3. 加法单位元 (零值) 与单位标量
4. 线性组合

float、numpy 数组以及任何实现了这些运算符的第三方向量类型都可以直接作为控制值，
核心代码不直接导入这些类型。
"""

from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

import numpy as np

# 单位标量
ONE = 1.0


@runtime_checkable
class Interpolable(Protocol):
    """
    可插值类型的最小能力集合。

    标量乘法总是写作 ``value * w``（值在左侧），外部类型只需实现 ``__mul__``。
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, scalar: float) -> Any: ...


V = TypeVar("V", bound=Interpolable)


def zero_like(value: V) -> V:
    """返回与 value 同形状的加法单位元。"""
    return value * 0.0


def linear_combination(weights: Sequence[float], values: Sequence[V]) -> V:
    """
    计算线性组合 Σ values[i] * weights[i]。

    Args:
        weights: 标量权重
        values: 控制值，与 weights 等长

    Returns:
        组合结果，类型与控制值相同
    """
    if len(weights) != len(values):
        raise ValueError(f"Got {len(weights)} weights for {len(values)} values")
    if len(values) == 0:
        raise ValueError("linear_combination needs at least one term")

    result = values[0] * weights[0]
    for w, v in zip(weights[1:], values[1:]):
        result = result + v * w
    return result


def as_value(obj: Any) -> Any:
    """
    规范化控制值。

    列表/元组转为 float64 numpy 数组，Python 与 numpy 标量转为 float，
    其余对象（ndarray 与外部向量类型）原样返回。
    """
    if obj is None:
        return None
    if isinstance(obj, (list, tuple)):
        return np.asarray(obj, dtype=np.float64)
    if isinstance(obj, (bool, np.bool_)):
        raise TypeError("Boolean values cannot be interpolated")
    if isinstance(obj, (int, float, np.integer, np.floating)):
        return float(obj)
    if isinstance(obj, np.ndarray) and obj.ndim == 0:
        return float(obj)
    return obj
