"""
serialization - 样条的 JSON 编解码

核心类型只暴露结构化字典视图 (Keyframe.to_dict / Spline.to_dict)，
本模块在其上提供 JSON 文本与文件的读写。
"""

import json
from pathlib import Path
from typing import Any

import numpy as np


def encode_value(value: Any) -> Any:
    """
    将控制值转换为 JSON 兼容对象。

    Args:
        value: float、numpy 数组或 numpy 标量

    Returns:
        float 或嵌套列表
    """
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    return value


def decode_value(obj: Any) -> Any:
    """将 JSON 对象还原为控制值：列表转为 float64 数组，数字转为 float。"""
    if obj is None:
        return None
    if isinstance(obj, list):
        return np.asarray(obj, dtype=np.float64)
    return float(obj)


def dumps(spline, **kwargs) -> str:
    """将样条编码为 JSON 字符串。"""
    return json.dumps(spline.to_dict(), **kwargs)


def loads(text: str):
    """从 JSON 字符串解码样条。"""
    from ..spline import Spline

    return Spline.from_dict(json.loads(text))


def save(spline, path: str | Path) -> None:
    """保存样条到 JSON 文件。"""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(spline.to_dict(), f, indent=2)


def load(path: str | Path):
    """从 JSON 文件读取样条。"""
    from ..spline import Spline

    path = Path(path)
    with open(path, "r") as f:
        return Spline.from_dict(json.load(f))
