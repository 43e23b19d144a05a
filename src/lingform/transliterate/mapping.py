"""Table-driven transliteration (BGN, GOST)."""

from __future__ import annotations

import unicodedata

from lingform.transliterate.base import TransformKey, Transliterator
from lingform.transliterate.tables import MappingRule, MappingTable

# Apostrophes join a word; a letter after one is not word-initial.
_WORD_JOINERS = frozenset("'’ʼ")


class MappingTransliterator(Transliterator):
    """Longest-match transliteration over a MappingTable with case restoration."""

    def __init__(self, key: TransformKey, table: MappingTable) -> None:
        super().__init__(key)
        self.table = table
        self._longest = table.longest_match
        rules: dict[str, list[MappingRule]] = {}
        for rule in sorted(table.rules, key=lambda item: len(item.match), reverse=True):
            rules.setdefault(rule.match[0], []).append(rule)
        self._rules = {first: tuple(group) for first, group in rules.items()}

    def transliterate(self, text: str) -> str:
        # Tables are keyed by precomposed letters.
        text = unicodedata.normalize("NFC", text)
        out: list[str] = []
        pos = 0
        while pos < len(text):
            size, value = self._match(text, pos)
            if not size:
                out.append(text[pos])
                pos += 1
                continue
            out.append(_restore_case(value, text, pos, size))
            pos += size
        return "".join(out)

    def _match(self, text: str, pos: int) -> tuple[int, str]:
        window = _fold(text[pos : pos + self._longest])
        for rule in self._rules.get(window[:1], ()):
            size = len(rule.match)
            if window.startswith(rule.match) and _rule_applies(rule, text, pos, size):
                return size, rule.value
        for size in range(len(window), 0, -1):
            value = self.table.letters.get(window[:size])
            if value is not None:
                return size, value
        return 0, ""


def _fold(text: str) -> str:
    # Keep one output char per input char so positions line up.
    folded: list[str] = []
    for char in text:
        lowered = char.lower()
        folded.append(lowered if len(lowered) == 1 else char)
    return "".join(folded)


def _rule_applies(rule: MappingRule, text: str, pos: int, size: int) -> bool:
    if rule.unconditional:
        return True
    previous = text[pos - 1] if pos > 0 else ""
    following = text[pos + size] if pos + size < len(text) else ""
    if rule.initial and not previous.isalpha() and previous not in _WORD_JOINERS:
        return True
    if rule.after and previous and previous.lower() in rule.after:
        return True
    return bool(rule.before and following and following.lower() in rule.before)


def _restore_case(value: str, text: str, pos: int, size: int) -> str:
    source = text[pos : pos + size]
    if not value or not source[0].isupper():
        return value
    if len(value) > 1 and _in_capitals(text, pos, size):
        return value.upper()
    return value[0].upper() + value[1:]


def _in_capitals(text: str, pos: int, size: int) -> bool:
    source = text[pos : pos + size]
    if size > 1 and all(char.isupper() for char in source if char.isalpha()):
        return True
    following = text[pos + size] if pos + size < len(text) else ""
    previous = text[pos - 1] if pos > 0 else ""
    return following.isupper() or previous.isupper()
