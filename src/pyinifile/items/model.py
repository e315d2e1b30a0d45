# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/13 01:26:39
# @Author : Kariko Lin

"""INI items: sections, properties, comments and blank lines.

The four kinds are plain dataclasses tied together by type aliases:

    ```python
    MinorIniItem = Comment | BlankLine   # decorations, no name
    MajorIniItem = Section | Property    # named, addressable
    ```

A major item owns the minor items *above* it in the file (`minor_items`).
"""

from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from re import compile as regex
from typing import Any

from ..config import CommentMarker, IniConfig
from ..exceptions import ArgumentError, NotFoundError
from .padding import (
    BlankLinePadding,
    CommentPadding,
    PropertyPadding,
    SectionPadding
)
from .value import PropertyValue

DEFAULT_EOT = 'EOT'
EOT_PATTERN = regex(r'\w+')
# a whole raw value like this opens a heredoc.
MULTILINE_START = regex(r'<<(\w+)')


@dataclass(eq=False)
class Comment:
    text: str = ''
    # None: whatever the config prefers when written.
    marker: CommentMarker | None = None
    padding: CommentPadding = field(default_factory=CommentPadding)

    def __post_init__(self) -> None:
        if self.text is None:
            self.text = ''
        if self.marker not in (None, ';', '#'):
            raise ArgumentError(f'Invalid comment marker: {self.marker!r}')

    def __str__(self) -> str:
        return render(self)


@dataclass(eq=False)
class BlankLine:
    padding: BlankLinePadding = field(default_factory=BlankLinePadding)

    def __str__(self) -> str:
        return render(self)


MinorIniItem = Comment | BlankLine


def minor_item(text: str | MinorIniItem | None) -> MinorIniItem:
    """Whitespace (or nothing) is a blank line, anything else a comment."""
    if isinstance(text, (Comment, BlankLine)):
        return text
    if text is None or not text.strip():
        return BlankLine(BlankLinePadding(len(text or '')))
    return Comment(text)


def _check_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ArgumentError(
            'Name should contain at least one non-whitespace character.')
    return name.strip()


class _MajorIniItem:
    """`name` and `minor_items` shared by sections and properties."""
    name: str
    minor_items: list[MinorIniItem]

    def __setattr__(self, key: str, value: Any) -> None:
        if key == 'name':
            value = _check_name(value)
        elif key == 'minor_items':
            value = [minor_item(i) for i in value]
        super().__setattr__(key, value)

    def add_comment(self, text: str) -> Comment:
        comment = Comment(text)
        self.minor_items.append(comment)
        return comment

    def add_blank_line(self) -> BlankLine:
        blank_line = BlankLine()
        self.minor_items.append(blank_line)
        return blank_line


@dataclass(eq=False)
class Property(_MajorIniItem):
    name: str
    value: PropertyValue = field(default_factory=PropertyValue)
    minor_items: list[MinorIniItem] = field(default_factory=list)
    padding: PropertyPadding = field(default_factory=PropertyPadding)
    # heredoc terminator, used when the value spans lines.
    eot: str = DEFAULT_EOT
    # read as `<<EOT` heredoc, so keep writing it that way.
    multiline: bool = False

    def __setattr__(self, key: str, value: Any) -> None:
        if key == 'value' and not isinstance(value, PropertyValue):
            value = PropertyValue(value)
        elif key == 'eot' and not (
            isinstance(value, str) and EOT_PATTERN.fullmatch(value)
        ):
            raise ArgumentError(f'Invalid end-of-text marker: {value!r}')
        super().__setattr__(key, value)

    def __str__(self) -> str:
        return render(self)


def _same_name(case_sensitive: bool, a: str, b: str) -> bool:
    return a == b if case_sensitive else a.casefold() == b.casefold()


@dataclass(eq=False)
class Section(_MajorIniItem, MutableMapping[str, PropertyValue]):
    """A section, also a `name -> value` mapping over its properties.

    Property names may repeat. Lookups always see the first one,
    and so does assignment (a missing name appends a new property).
    Use `self.properties` for positional access.
    """
    name: str
    properties: list[Property] = field(default_factory=list)
    minor_items: list[MinorIniItem] = field(default_factory=list)
    padding: SectionPadding = field(default_factory=SectionPadding)
    # both follow the owning document, see `Ini.add()`.
    case_sensitive: bool = field(default=False, repr=False)
    config: IniConfig | None = field(default=None, repr=False)

    # Mapping would compare contents; a section is an identity.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __str__(self) -> str:
        return render(self)

    def find(self, name: str) -> Property | None:
        for i in self.properties:
            if _same_name(self.case_sensitive, i.name, name):
                return i
        return None

    def __getitem__(self, key: str) -> PropertyValue:
        if (prop := self.find(key)) is None:
            raise KeyError(key)
        return prop.value

    def __setitem__(self, key: str, value: Any) -> None:
        value = PropertyValue(value, self.config)
        if (prop := self.find(key)) is not None:
            prop.value = value
            return
        self.properties.append(Property(
            key, value, padding=PropertyPadding.from_config(self.config)))

    def __delitem__(self, key: str) -> None:
        if (prop := self.find(key)) is None:
            raise KeyError(key)
        self.properties.remove(prop)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key) is not None

    def __len__(self) -> int:
        return len(self.properties)

    def __iter__(self) -> Iterator[str]:
        return iter([i.name for i in self.properties])

    def add(
        self, prop: Property, before: Property | str | None = None
    ) -> Property:
        """Append `prop`, or insert it right above `before`."""
        if not isinstance(prop, Property):
            raise ArgumentError(f'Expected a Property, got {prop!r}.')
        if before is None:
            self.properties.append(prop)
            return prop

        target = self.find(before) if isinstance(before, str) else before
        for idx, i in enumerate(self.properties):
            if i is target:
                self.properties.insert(idx, prop)
                return prop
        raise NotFoundError(f'[{self.name}] has no property {before!r}.')

    # the shortcuts below raise KeyError for missing names,
    # and ConversionError for values that don't convert.
    def get_int(self, key: str) -> int:
        return self[key].as_int()

    def get_float(self, key: str) -> float:
        return self[key].as_float()

    def get_bool(self, key: str) -> bool:
        return self[key].as_bool(self.config)

    def get_enum[E: Enum](
        self, key: str, enum_type: type[E], case_sensitive: bool = False
    ) -> E:
        return self[key].as_enum(enum_type, case_sensitive)


MajorIniItem = Section | Property
IniItem = MajorIniItem | MinorIniItem


def render(item: IniItem, config: IniConfig | None = None) -> str:
    """Text of an item (without the line break after it).

    Multi-line property values give several lines joined by '\\n'.
    """
    match item:
        case BlankLine(padding=p):
            return str(p.left)
        case Comment(padding=p):
            marker = item.marker or (config or IniConfig()).comment_marker
            return f'{p.left}{marker}{p.inside}{item.text}{p.right}'
        case Section(padding=p):
            return f'{p.left}[{p.inside_left}{item.name}{p.inside_right}]{p.right}'
        case Property(padding=p):
            value = str(item.value)
            if not (
                item.multiline or '\n' in value
                or MULTILINE_START.fullmatch(value)
            ):
                return f'{p.left}{item.name}{p.inside_left}={p.inside_right}{value}{p.right}'
            # an empty heredoc has no lines, '' has a blank one.
            lines = [] if item.value.is_empty() else value.split('\n')
            eot = _free_eot(item.eot, lines)
            return '\n'.join([
                f'{p.left}{item.name}{p.inside_left}={p.inside_right}<<{eot}{p.right}',
                *lines,
                eot
            ])
    raise ArgumentError(f'Not an INI item: {item!r}')


def _free_eot(eot: str, lines: list[str]) -> str:
    """`eot`, or `eot1`, `eot2`... if a value line would end the heredoc."""
    used = {i.strip() for i in lines}
    ret, n = eot, 0
    while ret in used:
        n += 1
        ret = f'{eot}{n}'
    return ret
