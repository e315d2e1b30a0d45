# -*- encoding: utf-8 -*-
# @File   : padding.py
# @Time   : 2026/10/12 22:31:07
# @Author : Kariko Lin

"""Whitespace around each part of an INI line.

Padding only ever records *how many* spaces, which is all we need
to write a parsed line back exactly as it was read.
"""

from dataclasses import dataclass
from typing import Any, Self

from ..config import IniConfig
from ..exceptions import ArgumentError


class PaddingValue(int):
    """A whitespace width. `str()` gives that many spaces."""

    def __new__(cls, value: int = 0) -> Self:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ArgumentError(f'Padding must be an integer, got {value!r}.')
        if value < 0:
            raise ArgumentError(f'Padding cannot be negative, got {value}.')
        return super().__new__(cls, value)

    def __str__(self) -> str:
        return ' ' * int(self)

    def __repr__(self) -> str:
        return f'PaddingValue({int(self)})'


class _Padding:
    # any int assigned to a field becomes a validated PaddingValue.
    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, PaddingValue(value))


@dataclass
class BlankLinePadding(_Padding):
    left: PaddingValue = PaddingValue(0)

    def reset(self, config: IniConfig | None = None) -> None:
        self.left = 0


@dataclass
class CommentPadding(_Padding):
    left: PaddingValue = PaddingValue(0)
    inside: PaddingValue = PaddingValue(1)
    right: PaddingValue = PaddingValue(1)

    @classmethod
    def from_config(cls, config: IniConfig | None = None) -> Self:
        ret = cls()
        ret.reset(config)
        return ret

    def reset(self, config: IniConfig | None = None) -> None:
        defaults = (config or IniConfig()).padding.comment
        self.left = defaults.left
        self.inside = defaults.inside
        self.right = defaults.right


@dataclass
class SectionPadding(_Padding):
    left: PaddingValue = PaddingValue(0)
    inside_left: PaddingValue = PaddingValue(0)
    inside_right: PaddingValue = PaddingValue(0)
    right: PaddingValue = PaddingValue(0)

    @classmethod
    def from_config(cls, config: IniConfig | None = None) -> Self:
        ret = cls()
        ret.reset(config)
        return ret

    def reset(self, config: IniConfig | None = None) -> None:
        defaults = (config or IniConfig()).padding.section
        self.left = defaults.left
        self.inside_left = defaults.inside_left
        self.inside_right = defaults.inside_right
        self.right = defaults.right


@dataclass
class PropertyPadding(_Padding):
    left: PaddingValue = PaddingValue(0)
    inside_left: PaddingValue = PaddingValue(1)
    inside_right: PaddingValue = PaddingValue(1)
    right: PaddingValue = PaddingValue(1)

    @classmethod
    def from_config(cls, config: IniConfig | None = None) -> Self:
        ret = cls()
        ret.reset(config)
        return ret

    def reset(self, config: IniConfig | None = None) -> None:
        defaults = (config or IniConfig()).padding.property
        self.left = defaults.left
        self.inside_left = defaults.inside_left
        self.inside_right = defaults.inside_right
        self.right = defaults.right
