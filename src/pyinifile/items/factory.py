# -*- encoding: utf-8 -*-
# @File   : factory.py
# @Time   : 2026/10/13 02:48:10
# @Author : Kariko Lin

"""One line of INI text -> one INI item.

Recognizers run in a fixed order: property, section, comment, blank.
Every whitespace run is its own capture group, and its *length*
becomes padding. That's the whole trick behind exact round trips.

Names never end in whitespace and values/comment texts are lazy,
so spaces before `=`, `]` or the line end always go to padding.
"""

from re import Match
from re import compile as regex

from ..config import IniConfig
from ..exceptions import FormatError
from .model import BlankLine, Comment, IniItem, Property, Section
from .padding import (
    BlankLinePadding,
    CommentPadding,
    PropertyPadding,
    SectionPadding
)

NAME = r'[\w.$:](?:[\w~\-.:\s]*[\w~\-.:])?'

PROPERTY_PATTERN = regex(rf'(\s*)({NAME})(\s*)=(\s*)(.*?)(\s*)')
SECTION_PATTERN = regex(rf'(\s*)\[(\s*)({NAME})(\s*)\](\s*)')
COMMENT_PATTERN = regex(r'(\s*)(;)(\s*)(.*?)(\s*)')
COMMENT_WITH_HASH_PATTERN = regex(r'(\s*)([;#])(\s*)(.*?)(\s*)')


def _width(match: Match[str], group: int) -> int:
    return len(match.group(group))


def try_create_property(line: str) -> Property | None:
    if (m := PROPERTY_PATTERN.fullmatch(line)) is None:
        return None
    return Property(m[2], m[5], padding=PropertyPadding(
        left=_width(m, 1),
        inside_left=_width(m, 3),
        inside_right=_width(m, 4),
        right=_width(m, 6)))


def try_create_section(line: str) -> Section | None:
    if (m := SECTION_PATTERN.fullmatch(line)) is None:
        return None
    return Section(m[3], padding=SectionPadding(
        left=_width(m, 1),
        inside_left=_width(m, 2),
        inside_right=_width(m, 4),
        right=_width(m, 5)))


def try_create_comment(
    line: str, config: IniConfig | None = None
) -> Comment | None:
    pattern = (
        COMMENT_WITH_HASH_PATTERN
        if (config or IniConfig()).hash_comments.allow
        else COMMENT_PATTERN
    )
    if (m := pattern.fullmatch(line)) is None:
        return None
    return Comment(m[4], marker=m[2], padding=CommentPadding(
        left=_width(m, 1),
        inside=_width(m, 3),
        right=_width(m, 5)))


def try_create_blank_line(line: str) -> BlankLine | None:
    if line.strip():
        return None
    return BlankLine(BlankLinePadding(len(line)))


def create_item(
    line: str,
    config: IniConfig | None = None,
    line_number: int | None = None
) -> IniItem:
    """Classify `line` (no line break in it).

    Raises:
        FormatError: if no recognizer accepts the line.
    """
    # no `or` chain here: an empty Section is falsy.
    for recognize in (
        try_create_property,
        try_create_section,
        lambda x: try_create_comment(x, config),
        try_create_blank_line
    ):
        if (item := recognize(line)) is not None:
            return item
    raise FormatError(f'Unrecognized line: {line!r}', line_number, line)
