from __future__ import annotations

from typing import Optional

from pypinyin import Style, lazy_pinyin


def pinyin_key(text: str) -> tuple[list[str], str]:
    """
    Sort key for a string: its pinyin syllables with tone numbers, then the
    raw text. Characters without a pinyin reading are kept as they are.
    """
    return lazy_pinyin(text, style=Style.TONE3), text


class PinyinComparator:
    """Compare strings by pinyin reading. None sorts first."""

    __slots__ = ()

    def __call__(self, s1: Optional[str], s2: Optional[str]) -> int:
        if s1 is s2:
            return 0
        if s1 is None:
            return -1
        if s2 is None:
            return 1
        k1 = pinyin_key(s1)
        k2 = pinyin_key(s2)
        return (k1 > k2) - (k1 < k2)
