# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/14 01:12:40
# @Author : Kariko Lin

"""Round-trip INI files: read, tweak, and write back what you read.

Unlike `configparser`, comments, blank lines and the exact spacing
of every line survive a load/save cycle.
"""

from .config import (
    IniConfig,
    IniLoadSettings,
    IniFormatOptions,
    HashCommentConfig,
    PaddingConfig,
    TypesConfig
)
from .document import Ini, IniFile
from .exceptions import (
    IniError,
    ArgumentError,
    NotFoundError,
    FormatError,
    ConversionError,
    DuplicateKeyError
)
from .items import (
    PaddingValue,
    PropertyValue,
    Comment,
    BlankLine,
    Section,
    Property,
    MinorIniItem,
    MajorIniItem,
    IniItem
)

__all__ = [
    'Ini', 'IniFile',
    'IniConfig', 'IniLoadSettings', 'IniFormatOptions',
    'HashCommentConfig', 'PaddingConfig', 'TypesConfig',
    'IniError', 'ArgumentError', 'NotFoundError', 'FormatError',
    'ConversionError', 'DuplicateKeyError',
    'PaddingValue', 'PropertyValue',
    'Comment', 'BlankLine', 'Section', 'Property',
    'MinorIniItem', 'MajorIniItem', 'IniItem'
]
