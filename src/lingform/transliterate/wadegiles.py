"""Rule-based Hanyu Pinyin -> Wade-Giles syllable conversion.

Input syllables use numbered tones as produced by pypinyin `Style.TONE3`
(`zhong1`, `lv4`); the tone digit is carried over unchanged.
"""

from __future__ import annotations

import re

_SYLLABLE_RE = re.compile(r"([a-zü]+)([1-5]?)")

_INITIALS = {
    "b": "p",
    "p": "p'",
    "m": "m",
    "f": "f",
    "d": "t",
    "t": "t'",
    "n": "n",
    "l": "l",
    "g": "k",
    "k": "k'",
    "h": "h",
    "j": "ch",
    "q": "ch'",
    "x": "hs",
    "zh": "ch",
    "ch": "ch'",
    "sh": "sh",
    "r": "j",
    "z": "ts",
    "c": "ts'",
    "s": "s",
    "y": "y",
    "w": "w",
}

# Syllables whose spelling does not follow from initial + final rules.
_WHOLE_SYLLABLES = {
    "zhi": "chih",
    "chi": "ch'ih",
    "shi": "shih",
    "ri": "jih",
    "zi": "tzu",
    "ci": "tz'u",
    "si": "ssu",
    "e": "o",
    "er": "erh",
    "yi": "i",
    "ye": "yeh",
    "yan": "yen",
    "you": "yu",
    "yong": "yung",
    "yu": "yü",
    "yue": "yüeh",
    "yuan": "yüan",
    "yun": "yün",
}


def pinyin_to_wade_giles(syllable: str, *, tone: bool = True) -> str:
    """Convert one numbered-tone Pinyin syllable; unknown tokens pass through."""
    match = _SYLLABLE_RE.fullmatch(syllable.lower().replace("v", "ü"))
    if match is None:
        return syllable
    base, digit = match.groups()

    converted = _WHOLE_SYLLABLES.get(base)
    if converted is None:
        initial, final = _split_initial(base)
        converted = _INITIALS.get(initial, initial) + _convert_final(initial, final)
    return converted + digit if tone else converted


def _split_initial(base: str) -> tuple[str, str]:
    if base[:2] in ("zh", "ch", "sh"):
        return base[:2], base[2:]
    if base[:1] in _INITIALS:
        return base[:1], base[1:]
    return "", base


def _convert_final(initial: str, final: str) -> str:
    if initial in ("j", "q", "x") and final.startswith("u"):
        final = "ü" + final[1:]
    if final == "ong":
        return "ung"
    if final == "iong":
        return "iung"
    if final == "uo":
        return "uo" if initial in ("g", "k", "h", "sh") else "o"
    if final == "e":
        return "o" if initial in ("g", "k", "h") else "e"
    if final in ("ue", "üe"):
        return "üeh"
    if final == "ie":
        return "ieh"
    if final == "ian":
        return "ien"
    if final == "ui" and initial in ("g", "k"):
        return "uei"
    return final
