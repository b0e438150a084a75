# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2023/11/14 20:01:52
# @Author : Chloride

import logging

from .ini import (
    DEFAULT_SECTION,
    DiffResult,
    DiffReportHandler,
    DiffState,
    FormatError,
    IniFileHandler,
    IniOptions,
    IniSection,
    IniStore,
    diff_ini
)

__all__ = [
    'DEFAULT_SECTION', 'DiffResult', 'DiffReportHandler', 'DiffState',
    'FormatError', 'IniFileHandler', 'IniOptions', 'IniSection', 'IniStore',
    'diff_ini'
]

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())
