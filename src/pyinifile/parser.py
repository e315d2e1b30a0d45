# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 21:17:02
# @Author : Kariko Lin

"""Text -> flat INI items -> the `Ini` tree.

Two passes, as the file is small enough to be held in memory anyway:

1. `read_items()` classifies each physical line, except for lines
inside a heredoc value like this one, which all belong to `Text`:

    ```ini
    [Section]
    Text = <<EOT
    first line
    second line
    EOT
    ```

2. `assemble()` hangs comments and blank lines on the section
or property right below them, and properties on their section.
"""

import logging
from dataclasses import dataclass, field
from io import TextIOBase
from typing import TYPE_CHECKING, Iterable, Iterator
from warnings import warn

from chardet import detect as guess_codec

from .config import IniConfig, IniLoadSettings
from .exceptions import FormatError
from .items import BlankLine, Comment, IniItem, Property, Section, create_item
from .items.model import MULTILINE_START

if TYPE_CHECKING:
    from .document import Ini

MIN_CONFIDENCE = 0.8


@dataclass
class _Normal:
    pass


@dataclass
class _CapturingMultiline:
    prop: Property
    eot: str
    line_number: int
    buffer: list[str] = field(default_factory=list)


_ParserState = _Normal | _CapturingMultiline


class LineReader:
    """Iterates the lines of a text stream without their line breaks.

    Remembers whether the last line had a break,
    so that a document can be written back with (or without) one.
    """

    def __init__(self, buf: TextIOBase | Iterable[str]) -> None:
        self._buf = buf
        self.final_newline = True

    def __iter__(self) -> Iterator[str]:
        for i in self._buf:
            self.final_newline = i.endswith(('\n', '\r'))
            yield i.rstrip('\r\n')


def read_items(
    lines: Iterable[str], config: IniConfig | None = None
) -> Iterator[tuple[int, IniItem]]:
    """Yield `(line_number, item)` for each line outside heredoc values.

    Raises:
        FormatError: for unrecognized lines,
            or a heredoc value still open at the end of input.
    """
    state: _ParserState = _Normal()
    lineno = 0
    for lineno, line in enumerate(lines, 1):
        match state:
            case _CapturingMultiline(prop=prop, eot=eot, buffer=buffer):
                # the end marker is case sensitive.
                if line.strip() == eot:
                    # None: no lines at all, unlike '' (one blank line).
                    prop.value = '\n'.join(buffer) if buffer else None
                    state = _Normal()
                else:
                    buffer.append(line)
            case _Normal():
                item = create_item(line, config, lineno)
                if isinstance(item, Property) and (
                    m := MULTILINE_START.fullmatch(str(item.value))
                ):
                    item.eot = m[1]
                    item.multiline = True
                    state = _CapturingMultiline(item, m[1], lineno)
                yield lineno, item

    if isinstance(state, _CapturingMultiline):
        raise FormatError(
            f'Multi-line value of "{state.prop.name}" is never closed '
            f'by "{state.eot}" (reached line {lineno}).',
            state.line_number)


def assemble(
    ini: 'Ini',
    items: Iterable[tuple[int, IniItem]],
    settings: IniLoadSettings | None = None
) -> 'Ini':
    """Group flat items into `ini`.

    Raises:
        FormatError: a property shows up before any section.
        DuplicateKeyError: a section name is repeated.
    """
    if settings is None:
        settings = IniLoadSettings()
    current: Section | None = None
    pending: list[BlankLine | Comment] = []

    for lineno, item in items:
        match item:
            case BlankLine():
                if not settings.ignore_blank_lines:
                    pending.append(item)
            case Comment():
                if not settings.ignore_comments:
                    pending.append(item)
            case Section():
                current = item
                current.minor_items.extend(pending)
                pending.clear()
                ini.add(current)
            case Property() if current is None:
                raise FormatError(
                    f'Property "{item.name}" does not belong to any section.',
                    lineno)
            case Property():
                if item.name in current:
                    warn(f'[{current.name}] "{item.name}" appears more than '
                         'once, lookups by name only see the first one.')
                item.minor_items.extend(pending)
                pending.clear()
                current.properties.append(item)

    # nothing below them to attach to.
    ini.trailing_items.extend(pending)
    return ini


def readstream(
    buf: TextIOBase | Iterable[str],
    ini: 'Ini',
) -> 'Ini':
    """Read decoded text lines into `ini`, using its settings and config."""
    reader = LineReader(buf)
    assemble(ini, read_items(reader, ini.config), ini.settings)
    ini.final_newline = reader.final_newline
    logging.debug(
        f'INI loaded: {len(ini)} section(s), '
        f'{len(ini.trailing_items)} trailing item(s).')
    return ini


def decode_bytes(raw: bytes, settings: IniLoadSettings | None = None) -> str:
    """Decode INI bytes with the configured codec.

    With `detect_encoding`, chardet gets the first word, and the
    configured codec is only the fallback for low-confidence guesses.
    """
    if settings is None:
        settings = IniLoadSettings()
    codec = settings.encoding
    if settings.detect_encoding and raw:
        guess = guess_codec(raw)
        if guess['encoding'] is None or guess['confidence'] < MIN_CONFIDENCE:
            logging.info(
                f'Encoding guess {guess} is not reliable, '
                f'falling back to {settings.encoding}.')
        else:
            codec = guess['encoding']
            logging.debug(f'INI encoding detected as {codec}.')
    # BOM is noise for INI text.
    if codec.lower().replace('-', '').replace('_', '') == 'utf8':
        codec = 'utf-8-sig'

    try:
        return raw.decode(codec)
    except UnicodeDecodeError as e:
        logging.warning(f'Cannot decode INI bytes as {codec}: {e}')
        raise FormatError(f'INI content is not valid {codec}: {e}') from e
