"""IP addresses, messages and optional values."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any


class IpAddrKind(enum.Enum):
    V4 = "v4"
    V6 = "v6"


def route(kind: IpAddrKind) -> str:
    match kind:
        case IpAddrKind.V4:
            return "路由 IPv4 地址"
        case IpAddrKind.V6:
            return "路由 IPv6 地址"
    raise TypeError(f"not an address kind: {kind!r}")


@dataclass(frozen=True)
class IpV4:
    a: int
    b: int
    c: int
    d: int

    def __post_init__(self) -> None:
        for octet in (self.a, self.b, self.c, self.d):
            if not 0 <= octet <= 255:
                raise ValueError(f"octet out of range: {octet}")

    def __str__(self) -> str:
        return f"{self.a}.{self.b}.{self.c}.{self.d}"


@dataclass(frozen=True)
class IpV6:
    address: str

    def __str__(self) -> str:
        return self.address


def describe_ip(ip: IpV4 | IpV6) -> str:
    match ip:
        case IpV4():
            return f"IPv4 地址: {ip}"
        case IpV6():
            return f"IPv6 地址: {ip}"
    raise TypeError(f"not an IP address: {ip!r}")


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Move:
    x: int
    y: int


@dataclass(frozen=True)
class Write:
    text: str


@dataclass(frozen=True)
class ChangeColor:
    r: int
    g: int
    b: int


def describe_message(message: Quit | Move | Write | ChangeColor) -> str:
    match message:
        case Quit():
            return "退出消息"
        case Move(x=x, y=y):
            return f"移动到坐标: ({x}, {y})"
        case Write(text=text):
            return f"文本消息: {text}"
        case ChangeColor(r=r, g=g, b=b):
            return f"改变颜色为: RGB({r}, {g}, {b})"
    raise TypeError(f"not a message: {message!r}")


def _debug(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def describe_option(value: Any) -> str:
    """Describe an optional value; strings are shown quoted."""
    if value is None:
        return "没有值"
    return f"有值: {_debug(value)}"