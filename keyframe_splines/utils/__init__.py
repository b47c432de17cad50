"""
utils - 工具函数模块

包含:
- serialization: 控制值与样条的 JSON 编解码
"""

from .serialization import decode_value, dumps, encode_value, load, loads, save

__all__ = [
    "decode_value",
    "dumps",
    "encode_value",
    "load",
    "loads",
    "save",
]
