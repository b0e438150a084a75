# -*- encoding: utf-8 -*-
# @File   : diff.py
# @Time   : 2024/10/13 15:02:37
# @Author : Kariko Lin

"""Structural comparison of two `IniStore`s.

The result is a flat, *unordered* list of `DiffResult`.
Compare them as sets, never as sequences.
"""

from dataclasses import dataclass
from typing import Any

from .consts import DiffState
from .store import IniStore


@dataclass(frozen=True, kw_only=True)
class DiffResult:
    """One discrepancy. Holds copies only, so it outlives the stores."""
    state: DiffState
    section: str
    key: str | None = None
    a_val: str | None = None
    b_val: str | None = None

    def to_dict(self) -> dict[str, Any]:
        ret: dict[str, Any] = {
            'state': self.state.name,
            'section': self.section,
        }
        if self.key is not None:
            ret['key'] = self.key
        if self.a_val is not None:
            ret['a_val'] = self.a_val
        if self.b_val is not None:
            ret['b_val'] = self.b_val
        return ret

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'DiffResult':
        return cls(
            state=DiffState[data['state']],
            section=str(data['section']),
            key=data.get('key'),
            a_val=data.get('a_val'),
            b_val=data.get('b_val'))


# (section missing, key missing) states for each direction.
_A_TO_B = (DiffState.SECTION_ONLY_IN_A, DiffState.KEY_ONLY_IN_A)
_B_TO_A = (DiffState.SECTION_ONLY_IN_B, DiffState.KEY_ONLY_IN_B)


def _diff_pass(
    src: IniStore, dst: IniStore, reverse: bool
) -> list[DiffResult]:
    """Walk `src` looking things up in `dst`.

    Only the forward pass (`reverse=False`) records differing values,
    the mirrored pass would just repeat them.
    """
    section_only, key_only = _B_TO_A if reverse else _A_TO_B
    ret: list[DiffResult] = []
    for name in src:
        this_sect = src._section(name)
        that_sect = dst._section(name)
        if that_sect is None:
            ret.append(DiffResult(state=section_only, section=name))
            continue
        for key, val in this_sect.items():
            if key not in that_sect:
                ret.append(DiffResult(
                    state=key_only, section=name, key=key,
                    a_val=None if reverse else val,
                    b_val=val if reverse else None))
            elif not reverse and val != that_sect[key]:
                ret.append(DiffResult(
                    state=DiffState.VALUES_DIFFER, section=name, key=key,
                    a_val=val, b_val=that_sect[key]))
    return ret


def diff_ini(a: IniStore, b: IniStore) -> list[DiffResult]:
    """Report every section / key found on one side only,
    and every key whose values differ.

    Note: return order is not stable.
    """
    return _diff_pass(a, b, False) + _diff_pass(b, a, True)
