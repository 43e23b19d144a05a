"""Script detection analyzers."""

from __future__ import annotations

from collections.abc import Iterator

from lingform.analyze.base import Analysis, Analyzer, TextInfo
from lingform.iso.languages import LANGUAGES, LanguageTable
from lingform.text.scripts import profile_scripts

# Scripts written by a single language in practice.
_SCRIPT_LANGUAGES = {
    "Armn": "hye",
    "Beng": "ben",
    "Geor": "kat",
    "Grek": "ell",
    "Hang": "kor",
    "Hani": "zho",
    "Hans": "zho",
    "Hant": "zho",
    "Hebr": "heb",
    "Hira": "jpn",
    "Jpan": "jpn",
    "Kana": "jpn",
    "Kore": "kor",
    "Taml": "tam",
    "Thai": "tha",
}


class ScriptProfileAnalyzer(Analyzer):
    """Ranks scripts by their share of the text's letters."""

    name = "script_profile"
    features = frozenset({"script"})

    def _analyze(self, data: str, context: TextInfo | None) -> Iterator[Analysis]:
        for share in profile_scripts(data):
            yield Analysis(analyzer=self.name, values={"script": share.script}, score=share.share)


class ScriptLanguageAnalyzer(Analyzer):
    """Infers the language from an already detected single-language script.

    The language is claimed with priority over statistical detectors.
    """

    name = "script_language"
    features = frozenset({"language"})
    priority_features = frozenset({"language"})
    requires = frozenset({"script"})

    def __init__(self, *, languages: LanguageTable = LANGUAGES) -> None:
        super().__init__()
        self.languages = languages

    def _analyze(self, data: str, context: TextInfo | None) -> Iterator[Analysis]:
        script = context.script if context is not None else None
        if script is None:
            return
        code = _SCRIPT_LANGUAGES.get(script.code)
        if code is None or code not in self.languages:
            return
        yield Analysis(analyzer=self.name, values={"language": self.languages[code]}, score=1.0)
