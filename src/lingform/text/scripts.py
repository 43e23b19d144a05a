"""Per-character script classification and script profiles."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import regex

from lingform.iso.scripts import COMMON, HAN, LATIN, SCRIPTS, UNKNOWN, Script
from lingform.text.chinese import han_variant

_SCRIPT_RE = regex.compile(
    "|".join(rf"(?P<{script.code}>\p{{Script={script.unicode_name}}})" for script in SCRIPTS.detectable())
)


@dataclass(frozen=True)
class ScriptShare:
    """How much of a text is written in one script."""

    script: Script
    count: int
    share: float


@lru_cache(maxsize=8192)
def classify_char(char: str) -> Script:
    """Return the Unicode script of a single character."""
    match = _SCRIPT_RE.match(char)
    if match is None or match.lastgroup is None:
        return UNKNOWN
    return SCRIPTS[match.lastgroup]


def profile_scripts(text: str, *, split_han: bool = True) -> list[ScriptShare]:
    """Rank the scripts of `text` by character count, ignoring Common/Inherited/Unknown.

    Ties keep first-occurrence order. With `split_han`, Han characters are
    reported as Hans or Hant when the text is unambiguous.
    """
    if not text:
        return []

    counts: dict[Script, int] = {}
    han_chars: list[str] = []
    for char in text:
        script = classify_char(char)
        if script.is_special:
            continue
        counts[script] = counts.get(script, 0) + 1
        if script == HAN:
            han_chars.append(char)

    total = sum(counts.values())
    if total == 0:
        return []

    if split_han and han_chars:
        variant = han_variant("".join(han_chars))
        if variant != HAN.code:
            counts = {(SCRIPTS[variant] if script == HAN else script): count for script, count in counts.items()}

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [ScriptShare(script=script, count=count, share=count / total) for script, count in ranked]


def dominant_script(text: str) -> Script:
    """Return the most frequent script, or Common when no letters are present."""
    profile = profile_scripts(text)
    return profile[0].script if profile else COMMON


def has_non_latin_letters(text: str) -> bool:
    """Whether any character belongs to a script other than Latin."""
    return any(share.script != LATIN for share in profile_scripts(text, split_han=False))
