"""ISO 639 language reference table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lingform.errors import UnknownLanguageError


@dataclass(frozen=True)
class Language:
    """A natural language identified by its ISO 639-3 code."""

    code: str
    name: str
    alpha2: str | None = None
    scripts: tuple[str, ...] = ()

    @property
    def preferred_script(self) -> str | None:
        return self.scripts[0] if self.scripts else None

    @property
    def is_undetermined(self) -> bool:
        return self.code == UNDETERMINED.code

    def __str__(self) -> str:
        return self.code


UNDETERMINED = Language(code="und", name="Undetermined")

_LANGUAGE_ROWS: tuple[tuple[str, str | None, str, tuple[str, ...]], ...] = (
    ("ara", "ar", "Arabic", ("Arab",)),
    ("bel", "be", "Belarusian", ("Cyrl",)),
    ("ben", "bn", "Bengali", ("Beng",)),
    ("bul", "bg", "Bulgarian", ("Cyrl",)),
    ("deu", "de", "German", ("Latn",)),
    ("ell", "el", "Greek", ("Grek",)),
    ("eng", "en", "English", ("Latn",)),
    ("fas", "fa", "Persian", ("Arab",)),
    ("fra", "fr", "French", ("Latn",)),
    ("heb", "he", "Hebrew", ("Hebr",)),
    ("hin", "hi", "Hindi", ("Deva",)),
    ("hye", "hy", "Armenian", ("Armn",)),
    ("ita", "it", "Italian", ("Latn",)),
    ("jpn", "ja", "Japanese", ("Jpan", "Hira", "Kana", "Hani")),
    ("kat", "ka", "Georgian", ("Geor",)),
    ("kor", "ko", "Korean", ("Kore", "Hang")),
    ("nld", "nl", "Dutch", ("Latn",)),
    ("pol", "pl", "Polish", ("Latn",)),
    ("por", "pt", "Portuguese", ("Latn",)),
    ("rus", "ru", "Russian", ("Cyrl",)),
    ("spa", "es", "Spanish", ("Latn",)),
    ("srp", "sr", "Serbian", ("Cyrl", "Latn")),
    ("tam", "ta", "Tamil", ("Taml",)),
    ("tha", "th", "Thai", ("Thai",)),
    ("tur", "tr", "Turkish", ("Latn",)),
    ("ukr", "uk", "Ukrainian", ("Cyrl",)),
    ("urd", "ur", "Urdu", ("Arab",)),
    ("zho", "zh", "Chinese", ("Hani", "Hans", "Hant")),
)

# Legacy and bibliographic codes seen in the wild.
_ALIASES = {
    "chi": "zho",
    "ger": "deu",
    "fre": "fra",
    "gre": "ell",
    "iw": "heb",
    "per": "fas",
    "zh-cn": "zho",
    "zh-tw": "zho",
    "zh-hans": "zho",
    "zh-hant": "zho",
}


class LanguageTable(Mapping[str, Language]):
    """Immutable code -> Language table with lenient text lookup."""

    def __init__(self, languages: Iterable[Language], aliases: Mapping[str, str] | None = None) -> None:
        by_code: dict[str, Language] = {}
        by_text: dict[str, Language] = {}
        for language in languages:
            by_code[language.code] = language
            by_text[language.code] = language
            by_text[language.name.casefold()] = language
            if language.alpha2:
                by_text[language.alpha2] = language
        for alias, code in (aliases or {}).items():
            by_text[alias] = by_code[code]
        self._by_code = MappingProxyType(by_code)
        self._by_text = MappingProxyType(by_text)

    def __getitem__(self, code: str) -> Language:
        return self._by_code[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_code)

    def __len__(self) -> int:
        return len(self._by_code)

    def by_code(self, code: str) -> Language:
        """Return the language for an exact ISO 639-3 code."""
        if code == UNDETERMINED.code:
            return UNDETERMINED
        try:
            return self._by_code[code]
        except KeyError:
            raise UnknownLanguageError(code) from None

    def lookup(self, text: str) -> Language | None:
        """Resolve a code, alias, locale tag (`en-US`) or English name."""
        key = text.strip().casefold().replace("_", "-")
        if not key:
            return None
        if key == UNDETERMINED.code:
            return UNDETERMINED
        match = self._by_text.get(key)
        if match is None and "-" in key:
            match = self._by_text.get(key.split("-", 1)[0])
        return match

    def resolve(self, text: str) -> Language:
        """Like `lookup`, raising UnknownLanguageError when nothing matches."""
        language = self.lookup(text)
        if language is None:
            raise UnknownLanguageError(text)
        return language


LANGUAGES = LanguageTable(
    (Language(code=code, alpha2=alpha2, name=name, scripts=scripts) for code, alpha2, name, scripts in _LANGUAGE_ROWS),
    aliases=_ALIASES,
)

ENGLISH = LANGUAGES["eng"]
