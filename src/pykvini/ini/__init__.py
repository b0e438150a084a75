# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

from .consts import (
    DEFAULT_SECTION,
    DEFAULT_LINE_SEP,
    DEFAULT_KV_SEP,
    DiffState
)
from .model import IniOptions, IniSection
from .parser import FormatError
from .store import IniStore
from .handler import IniFileHandler
from .diff import DiffResult, diff_ini
from .report import DiffReportHandler

__all__ = [
    'DEFAULT_SECTION', 'DEFAULT_LINE_SEP', 'DEFAULT_KV_SEP', 'DiffState',
    'IniOptions', 'IniSection', 'FormatError', 'IniStore', 'IniFileHandler',
    'DiffResult', 'diff_ini', 'DiffReportHandler'
]
