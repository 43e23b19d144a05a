"""Language pack registry and resolution."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from lingform.iso.languages import LANGUAGES, Language, LanguageTable
from lingform.languages.arabic import ARABIC_PACK
from lingform.languages.base import LanguagePack
from lingform.languages.chinese import CHINESE_PACK
from lingform.languages.english import ENGLISH_PACK
from lingform.languages.generic import GENERIC_PACK
from lingform.languages.romance import FRENCH_PACK, SPANISH_PACK
from lingform.languages.russian import RUSSIAN_PACK
from lingform.languages.ukrainian import UKRAINIAN_PACK

LANGUAGE_PACKS: Mapping[str, LanguagePack] = MappingProxyType(
    {
        pack.code: pack
        for pack in (
            ARABIC_PACK,
            ENGLISH_PACK,
            FRENCH_PACK,
            RUSSIAN_PACK,
            SPANISH_PACK,
            UKRAINIAN_PACK,
            CHINESE_PACK,
            GENERIC_PACK,
        )
    }
)


def resolve_language_pack(
    language: Language | str,
    *,
    packs: Mapping[str, LanguagePack] = LANGUAGE_PACKS,
    languages: LanguageTable = LANGUAGES,
) -> LanguagePack:
    """Resolve a language or language string to the best available pack."""
    code = language.code if isinstance(language, Language) else languages.resolve(language).code
    return packs.get(code, packs.get(GENERIC_PACK.code, GENERIC_PACK))
