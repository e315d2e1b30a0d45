# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/13 02:55:31
# @Author : Kariko Lin

from .padding import (
    PaddingValue,
    BlankLinePadding,
    CommentPadding,
    SectionPadding,
    PropertyPadding
)
from .value import PropertyValue
from .model import (
    Comment,
    BlankLine,
    Section,
    Property,
    MinorIniItem,
    MajorIniItem,
    IniItem,
    minor_item,
    render
)
from .factory import create_item
