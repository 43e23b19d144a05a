"""Language-independent text primitives."""

from lingform.text.normalize import DISPLAY, INDEX, SCORING, NormalizeOptions, normalize_text
from lingform.text.scripts import ScriptShare, classify_char, dominant_script, profile_scripts

__all__ = [
    "DISPLAY",
    "INDEX",
    "SCORING",
    "NormalizeOptions",
    "ScriptShare",
    "classify_char",
    "dominant_script",
    "normalize_text",
    "profile_scripts",
]
