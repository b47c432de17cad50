"""
key - 关键帧

关键帧是 (参数 t, 控制值) 对，加上从该关键帧过渡到下一关键帧的插值方式，
以及 Bézier/Hermite 使用的可选切线。关键帧为不可变值类型。
"""

import math
from dataclasses import dataclass, field, replace
from typing import Any

from ..utils.serialization import decode_value, encode_value
from . import interpolation
from .interpolation import Interpolation, Linear
from .numeric import as_value


@dataclass(frozen=True, eq=False)
class Keyframe:
    """
    样条控制点。

    Attributes:
        t: 排序参数 (通常为时间)
        value: 控制值 (float、numpy 数组或外部向量类型)
        interpolation: 从本关键帧到下一关键帧的插值方式
        tangent_in: 入切线 dV/dt，Bezier/Hermite 使用
        tangent_out: 出切线 dV/dt，Bezier/Hermite 使用
    """

    t: float
    value: Any
    interpolation: Interpolation = field(default_factory=Linear)
    tangent_in: Any = None
    tangent_out: Any = None

    def __post_init__(self):
        t = float(self.t)
        if math.isnan(t):
            raise ValueError("Keyframe parameter must not be NaN")
        object.__setattr__(self, "t", t)
        object.__setattr__(self, "value", as_value(self.value))
        object.__setattr__(self, "tangent_in", as_value(self.tangent_in))
        object.__setattr__(self, "tangent_out", as_value(self.tangent_out))

    def with_value(self, value: Any) -> "Keyframe":
        """返回替换控制值后的副本。"""
        return replace(self, value=value)

    def with_interpolation(self, kind: Interpolation) -> "Keyframe":
        """返回替换插值方式后的副本。"""
        return replace(self, interpolation=kind)

    def to_dict(self) -> dict[str, Any]:
        """转换为 JSON 可序列化的字典。"""
        data = {
            "t": self.t,
            "value": encode_value(self.value),
            "interpolation": interpolation.to_dict(self.interpolation),
        }
        if self.tangent_in is not None:
            data["tangent_in"] = encode_value(self.tangent_in)
        if self.tangent_out is not None:
            data["tangent_out"] = encode_value(self.tangent_out)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Keyframe":
        """从字典重建关键帧。"""
        return cls(
            t=data["t"],
            value=decode_value(data["value"]),
            interpolation=interpolation.from_dict(data.get("interpolation", {"kind": "linear"})),
            tangent_in=decode_value(data.get("tangent_in")),
            tangent_out=decode_value(data.get("tangent_out")),
        )

    def __repr__(self) -> str:
        return f"Keyframe(t={self.t}, value={self.value!r}, interpolation={self.interpolation!r})"
