"""Screen components that can draw themselves."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol


class _Drawable(Protocol):
    def draw(self) -> str: ...


def _size(width: int | None, height: int | None) -> str | None:
    if width is None or height is None:
        return None
    return f"{width}x{height}"


@dataclass
class Button:
    label: str
    width: int | None = None
    height: int | None = None

    def draw(self) -> str:
        size = _size(self.width, self.height)
        if size is None:
            return f"绘制按钮: {self.label}"
        return f"绘制按钮: {self.label} ({size})"


@dataclass
class SelectBox:
    options: list[str] = field(default_factory=list)
    width: int | None = None
    height: int | None = None

    def draw(self) -> str:
        options = "[" + ", ".join(json.dumps(o, ensure_ascii=False) for o in self.options) + "]"
        size = _size(self.width, self.height)
        if size is None:
            return f"绘制选择框: {options}"
        return f"绘制选择框: {size} 选项: {options}"


def draw_screen(components: Iterable[_Drawable]) -> list[str]:
    """Draw every component in order."""
    return [component.draw() for component in components]