"""Read-only language and script reference tables."""

from lingform.iso.languages import ENGLISH, LANGUAGES, UNDETERMINED, Language, LanguageTable
from lingform.iso.scripts import SCRIPTS, Script, ScriptTable

__all__ = [
    "ENGLISH",
    "LANGUAGES",
    "SCRIPTS",
    "UNDETERMINED",
    "Language",
    "LanguageTable",
    "Script",
    "ScriptTable",
]
