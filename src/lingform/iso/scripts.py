"""ISO 15924 script reference table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lingform.errors import UnknownScriptError


@dataclass(frozen=True)
class Script:
    """A writing system identified by its ISO 15924 code."""

    code: str
    name: str
    # Unicode `Script=` property value; None for composite scripts such as Hans.
    unicode_name: str | None = None

    @property
    def is_special(self) -> bool:
        return self.code in _SPECIAL_CODES

    def __str__(self) -> str:
        return self.code


_SCRIPT_ROWS: tuple[tuple[str, str, str | None], ...] = (
    ("Arab", "Arabic", "Arabic"),
    ("Armn", "Armenian", "Armenian"),
    ("Beng", "Bengali", "Bengali"),
    ("Cyrl", "Cyrillic", "Cyrillic"),
    ("Deva", "Devanagari", "Devanagari"),
    ("Ethi", "Ethiopic", "Ethiopic"),
    ("Geor", "Georgian", "Georgian"),
    ("Grek", "Greek", "Greek"),
    ("Hang", "Hangul", "Hangul"),
    ("Hani", "Han", "Han"),
    ("Hans", "Han (Simplified)", None),
    ("Hant", "Han (Traditional)", None),
    ("Hebr", "Hebrew", "Hebrew"),
    ("Hira", "Hiragana", "Hiragana"),
    ("Jpan", "Japanese", None),
    ("Kana", "Katakana", "Katakana"),
    ("Kore", "Korean", None),
    ("Latn", "Latin", "Latin"),
    ("Taml", "Tamil", "Tamil"),
    ("Thai", "Thai", "Thai"),
    ("Zinh", "Inherited", "Inherited"),
    ("Zyyy", "Common", "Common"),
    ("Zzzz", "Unknown", None),
)

_SPECIAL_CODES = frozenset({"Zinh", "Zyyy", "Zzzz"})


class ScriptTable(Mapping[str, Script]):
    """Immutable code -> Script table; codes match case-insensitively."""

    def __init__(self, scripts: Iterable[Script]) -> None:
        by_code: dict[str, Script] = {}
        by_text: dict[str, Script] = {}
        for script in scripts:
            by_code[script.code] = script
            by_text[script.code.casefold()] = script
            by_text[script.name.casefold()] = script
            if script.unicode_name:
                by_text[script.unicode_name.casefold()] = script
        self._by_code = MappingProxyType(by_code)
        self._by_text = MappingProxyType(by_text)

    def __getitem__(self, code: str) -> Script:
        return self._by_code[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_code)

    def __len__(self) -> int:
        return len(self._by_code)

    def by_code(self, code: str) -> Script:
        """Return the script for an ISO 15924 code in any letter case."""
        script = self._by_text.get(code.strip().casefold())
        if script is None or script.code.casefold() != code.strip().casefold():
            raise UnknownScriptError(code)
        return script

    def lookup(self, text: str) -> Script | None:
        """Resolve a code or an English/Unicode script name."""
        return self._by_text.get(text.strip().casefold())

    def detectable(self) -> tuple[Script, ...]:
        """Scripts that map to a single Unicode script property."""
        return tuple(script for script in self._by_code.values() if script.unicode_name)


SCRIPTS = ScriptTable(Script(code=code, name=name, unicode_name=uname) for code, name, uname in _SCRIPT_ROWS)

LATIN = SCRIPTS["Latn"]
CYRILLIC = SCRIPTS["Cyrl"]
ARABIC = SCRIPTS["Arab"]
HAN = SCRIPTS["Hani"]
HAN_SIMPLIFIED = SCRIPTS["Hans"]
HAN_TRADITIONAL = SCRIPTS["Hant"]
COMMON = SCRIPTS["Zyyy"]
INHERITED = SCRIPTS["Zinh"]
UNKNOWN = SCRIPTS["Zzzz"]
