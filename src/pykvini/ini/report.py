# -*- encoding: utf-8 -*-
# @File   : report.py
# @Time   : 2024/10/13 21:17:50
# @Author : Kariko Lin

"""Save (and load back) diff results as a YAML document pair:
a small metadata document, then the records themselves."""

import logging
from time import localtime, strftime
from typing import Sequence, TypedDict

import yaml

from ..abstract import FileHandler
from .diff import DiffResult

logger = logging.getLogger(__name__)


class _ReportMeta(TypedDict):
    protocol: int
    count: int
    created: str


class DiffReportHandler(FileHandler[list[DiffResult]]):
    PROTOCOL = 1

    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> list[DiffResult]:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            docs = list(yaml.safe_load_all(fp))
        if len(docs) != 2:
            raise ValueError(
                f'{self._fn}: expected metadata and records documents, '
                f'got {len(docs)}.')
        meta: _ReportMeta
        meta, records = docs
        if not isinstance(meta, dict) or not isinstance(records, list | None):
            raise ValueError(
                f'{self._fn}: not a diff report (bad metadata or records).')
        if meta.get('protocol') != self.PROTOCOL:
            logger.warning('%s: unknown report protocol %r',
                           self._fn, meta.get('protocol'))
        return [DiffResult.from_dict(i) for i in records or []]

    def write(self, instance: Sequence[DiffResult]) -> None:
        meta = _ReportMeta(
            protocol=self.PROTOCOL,
            count=len(instance),
            created=strftime("%Y-%m-%d %H:%M:%S", localtime()))
        # sorted only to keep the file stable between runs.
        records = sorted(
            (i.to_dict() for i in instance),
            key=lambda x: (x['section'], x.get('key') or '', x['state']))
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump_all(
                [dict(meta), records], fp,
                allow_unicode=True, sort_keys=False)
        logger.debug('wrote %d diff records to %s', len(records), self._fn)

    def __str__(self) -> str:
        return "INI diff report: " + super().__str__() + f"({self._codec})"
