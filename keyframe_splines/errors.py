"""
errors - 样条采样与存储的异常类型

所有异常均为可恢复的输入合法性错误，由调用方处理，不做内部重试。
"""


class SplineError(Exception):
    """样条相关异常的基类。"""


class OutOfRangeError(SplineError, ValueError):
    """采样参数超出关键帧覆盖范围（非钳制采样）。"""

    def __init__(self, t: float, domain: tuple[float, float]):
        self.t = t
        self.domain = domain
        super().__init__(f"t={t} is outside the spline domain [{domain[0]}, {domain[1]}]")


class InsufficientKeyframesError(SplineError, ValueError):
    """关键帧数量不足以支持所请求的插值方式。"""

    def __init__(self, required: int, available: int, kind: str | None = None):
        self.required = required
        self.available = available
        self.kind = kind
        what = f"{kind} interpolation" if kind else "sampling"
        super().__init__(f"{what} needs at least {required} keyframes, got {available}")


class CapacityError(SplineError, OverflowError):
    """固定容量存储已满。"""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"spline is full (capacity={capacity})")


class OutOfBoundsError(SplineError, IndexError):
    """按下标访问关键帧时越界。"""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"keyframe index {index} out of bounds for spline of length {length}")
