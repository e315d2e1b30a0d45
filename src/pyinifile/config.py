# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2026/10/12 22:05:51
# @Author : Kariko Lin

"""Knobs of parsing, formatting and default padding.

There is no process-wide state here: build an `IniConfig`,
tweak it, and hand it to `Ini` (or to whatever asks for `config`).
Leaving `config` as `None` anywhere means "a fresh `IniConfig()`".

A config may also be kept in a YAML file:

    ```yaml
    hash_comments:
      allow: true
      is_default: false
    padding:
      property: {left: 0, inside_left: 1, inside_right: 1, right: 0}
    types:
      true_string: 'yes'
      false_string: 'no'
    ```
"""

import logging
from dataclasses import dataclass, field, fields
from io import TextIOBase
from os import PathLike
from typing import Any, Literal, Mapping, Self

import yaml

from .exceptions import ArgumentError

CommentMarker = Literal[';', '#']


def _width(value: int | None, default: int) -> int:
    if value is None:
        return default
    # bool is an int, but `right: true` in YAML is a mistake.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ArgumentError(f'Padding must be a non-negative integer, got {value!r}.')
    return int(value)


@dataclass
class HashCommentConfig:
    allow: bool = False
    # write '#' instead of ';' for comments that don't remember their marker.
    is_default: bool = False


@dataclass
class SectionPaddingConfig:
    left: int = 0
    inside_left: int = 0
    inside_right: int = 0
    right: int = 0


@dataclass
class PropertyPaddingConfig:
    left: int = 0
    inside_left: int = 1
    inside_right: int = 1
    right: int = 1


@dataclass
class CommentPaddingConfig:
    left: int = 0
    inside: int = 1
    right: int = 1


@dataclass
class PaddingConfig:
    section: SectionPaddingConfig = field(default_factory=SectionPaddingConfig)
    property: PropertyPaddingConfig = field(
        default_factory=PropertyPaddingConfig)
    comment: CommentPaddingConfig = field(default_factory=CommentPaddingConfig)


@dataclass
class TypesConfig:
    date_format: str = '%Y-%m-%d %H:%M:%S'
    true_string: str = 'True'
    false_string: str = 'False'


@dataclass
class IniConfig:
    hash_comments: HashCommentConfig = field(default_factory=HashCommentConfig)
    padding: PaddingConfig = field(default_factory=PaddingConfig)
    types: TypesConfig = field(default_factory=TypesConfig)

    @property
    def comment_marker(self) -> CommentMarker:
        """Marker for comments that were built in code."""
        if self.hash_comments.allow and self.hash_comments.is_default:
            return '#'
        return ';'

    def allow_hash_for_comments(self, set_as_default: bool = False) -> Self:
        self.hash_comments.allow = True
        self.hash_comments.is_default = set_as_default
        return self

    def set_section_padding_defaults(
        self,
        left: int | None = None,
        inside_left: int | None = None,
        inside_right: int | None = None,
        right: int | None = None
    ) -> Self:
        self.padding.section = SectionPaddingConfig(
            left=_width(left, 0),
            inside_left=_width(inside_left, 0),
            inside_right=_width(inside_right, 0),
            right=_width(right, 0))
        return self

    def set_property_padding_defaults(
        self,
        left: int | None = None,
        inside_left: int | None = None,
        inside_right: int | None = None,
        right: int | None = None
    ) -> Self:
        self.padding.property = PropertyPaddingConfig(
            left=_width(left, 0),
            inside_left=_width(inside_left, 1),
            inside_right=_width(inside_right, 1),
            right=_width(right, 1))
        return self

    def set_comment_padding_defaults(
        self,
        left: int | None = None,
        inside: int | None = None,
        right: int | None = None
    ) -> Self:
        self.padding.comment = CommentPaddingConfig(
            left=_width(left, 0),
            inside=_width(inside, 1),
            right=_width(right, 1))
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build a config from nested mappings, keyed like the dataclasses.

        Keys left out keep their defaults. Unknown keys are rejected,
        since a typo would otherwise be silently ignored.
        """
        ret = cls()
        _check_keys('config', data, ret)

        if (hc := data.get('hash_comments')) is not None:
            _check_keys('hash_comments', hc, ret.hash_comments)
            ret.hash_comments = HashCommentConfig(**{
                k: bool(v) for k, v in hc.items()})

        if (pads := data.get('padding')) is not None:
            _check_keys('padding', pads, ret.padding)
            if (i := pads.get('section')) is not None:
                _check_keys('padding.section', i, ret.padding.section)
                ret.set_section_padding_defaults(**i)
            if (i := pads.get('property')) is not None:
                _check_keys('padding.property', i, ret.padding.property)
                ret.set_property_padding_defaults(**i)
            if (i := pads.get('comment')) is not None:
                _check_keys('padding.comment', i, ret.padding.comment)
                ret.set_comment_padding_defaults(**i)

        if (types := data.get('types')) is not None:
            _check_keys('types', types, ret.types)
            for k, v in types.items():
                # YAML 1.1 reads an unquoted `yes` as True.
                if not isinstance(v, str):
                    raise ArgumentError(
                        f"types.{k} must be a string, quote it in YAML.")
            ret.types = TypesConfig(**types)
        return ret

    @classmethod
    def from_yaml(cls, source: str | PathLike | TextIOBase) -> Self:
        """Read a config from a YAML file path or an opened text stream."""
        if isinstance(source, TextIOBase):
            data = yaml.safe_load(source)
        else:
            with open(source, 'r', encoding='utf-8') as fp:
                data = yaml.safe_load(fp)
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ArgumentError('A YAML config must be a mapping at top level.')
        logging.debug(f'INI config loaded from YAML: {data}')
        return cls.from_dict(data)


def _check_keys(where: str, data: Any, template: object) -> None:
    if not isinstance(data, Mapping):
        raise ArgumentError(f'"{where}" must be a mapping.')
    known = {f.name for f in fields(template)}  # type: ignore[arg-type]
    if unknown := set(data).difference(known):
        raise ArgumentError(
            f'Unknown key(s) in "{where}": {", ".join(sorted(unknown))}.')


@dataclass
class IniLoadSettings:
    encoding: str = 'utf-8'
    # sniff byte input with chardet, `encoding` is then the fallback.
    detect_encoding: bool = False
    case_sensitive: bool = False
    ignore_blank_lines: bool = False
    ignore_comments: bool = False

    def __post_init__(self) -> None:
        if not self.encoding:
            raise ArgumentError('Encoding must not be empty.')


@dataclass
class IniFormatOptions:
    ensure_blank_line_between_sections: bool = False
    ensure_blank_line_between_properties: bool = False
    remove_successive_blank_lines: bool = False
