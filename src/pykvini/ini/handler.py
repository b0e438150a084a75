# -*- encoding: utf-8 -*-
# @File   : handler.py
# @Time   : 2024/10/12 23:30:14
# @Author : Kariko Lin

from .model import IniOptions
from .store import IniStore
from ..abstract import FileHandler


class IniFileHandler(FileHandler[IniStore]):
    """读写*一个* INI 文件。

    `read()`走`IniStore.parse_file()`，即强制解析小节、跳过注释；
    `encoding`为`None`时读取会自动探测编码，写出则用 UTF-8。
    写出时使用`instance`自身的分隔符配置。
    """

    def __init__(
        self, filename: str, encoding: str | None = None, *,
        trim_quotes: bool = False
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._trim_quotes = trim_quotes

    def read(self) -> IniStore:
        ret = IniStore(IniOptions(trim_quotes=self._trim_quotes))
        ret.parse_file(self._fn, self._codec)
        return ret

    def write(self, instance: IniStore) -> None:
        # newline='' so that line_sep lands on disk untranslated.
        with open(self._fn, 'w', encoding=self._codec or 'utf-8',
                  newline='') as fp:
            instance.write(fp)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
