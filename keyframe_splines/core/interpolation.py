"""
interpolation - 插值方式 (封闭的标签联合)

每个关键帧携带一种插值方式，描述从该关键帧过渡到下一关键帧的规则。
最后一个关键帧的插值方式不参与前向插值。
"""

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class Step:
    """
    阶跃：在 u < threshold 时保持左值，否则取右值。

    threshold 默认为 1.0，即整段保持左值，右值只在下一段的起点出现。
    """

    threshold: float = 1.0
    tag: ClassVar[str] = "step"

    def __post_init__(self):
        threshold = float(self.threshold)
        if not 0.0 < threshold <= 1.0:
            raise ValueError(f"Step threshold must lie in (0, 1], got {threshold}")
        object.__setattr__(self, "threshold", threshold)


@dataclass(frozen=True)
class Linear:
    """线性插值。"""

    tag: ClassVar[str] = "linear"


@dataclass(frozen=True)
class Cosine:
    """余弦缓动插值，两端导数为零。"""

    tag: ClassVar[str] = "cosine"


@dataclass(frozen=True)
class Bezier:
    """三次 Bézier，控制点由关键帧切线给出，缺省时按 Catmull-Rom 方式估计。"""

    tag: ClassVar[str] = "bezier"


@dataclass(frozen=True)
class CatmullRom:
    """Catmull-Rom 样条，使用相邻的四个关键帧。"""

    tag: ClassVar[str] = "catmull_rom"


@dataclass(frozen=True)
class Hermite:
    """三次 Hermite 样条，使用关键帧上显式给出的入/出切线。"""

    tag: ClassVar[str] = "hermite"


Interpolation = Step | Linear | Cosine | Bezier | CatmullRom | Hermite

_BY_TAG: dict[str, type] = {cls.tag: cls for cls in (Step, Linear, Cosine, Bezier, CatmullRom, Hermite)}


def required_keys(kind: Interpolation) -> int:
    """该插值方式在整条样条上所需的最少关键帧数。"""
    match kind:
        case Step() | Linear() | Cosine() | Bezier() | Hermite():
            return 2
        case CatmullRom():
            return 4
        case _:
            raise TypeError(f"Unknown interpolation kind: {kind!r}")


def to_dict(kind: Interpolation) -> dict[str, Any]:
    """转换为可序列化的字典，例如 {"kind": "step", "threshold": 0.5}。"""
    match kind:
        case Step(threshold=threshold):
            return {"kind": Step.tag, "threshold": threshold}
        case Linear() | Cosine() | Bezier() | CatmullRom() | Hermite():
            return {"kind": kind.tag}
        case _:
            raise TypeError(f"Unknown interpolation kind: {kind!r}")


def from_dict(data: dict[str, Any]) -> Interpolation:
    """从字典重建插值方式。"""
    tag = data.get("kind")
    if tag not in _BY_TAG:
        raise ValueError(f"Unknown interpolation tag: {tag!r}")
    if tag == Step.tag:
        return Step(data.get("threshold", 1.0))
    return _BY_TAG[tag]()
