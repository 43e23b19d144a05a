"""End-to-end analysis: detect properties, pick a transformer, render variants."""

from __future__ import annotations

from datetime import UTC, datetime

from lingform.analyze import AnalyzerPipeline, TextInfo, default_pipeline
from lingform.errors import UnsupportedOperationError
from lingform.iso.languages import LANGUAGES, UNDETERMINED, Language
from lingform.models import AnalyzeRequest, TextMetadata, TextReport, Transliteration
from lingform.transform import TextTransformer, TextTransformerFactory, default_factory
from lingform.transliterate.base import TextType

AUTO_LANGUAGE = "auto"


def run_analysis(
    request: AnalyzeRequest,
    *,
    pipeline: AnalyzerPipeline | None = None,
    factory: TextTransformerFactory | None = None,
) -> TextReport:
    """Analyze request text and render every variant its language supports.

    Without a `pipeline`, detection runs on the shared default pipeline.
    """
    resolved_factory = factory or default_factory()

    info = (pipeline or default_pipeline()).run(request.text) if request.language == AUTO_LANGUAGE else None
    language = _resolve_language(request.language, info)
    transformer = resolved_factory.get_transformer(language)
    transforms = _select(transformer, transformer.available_transforms(request.text), request.text_types)

    metadata = TextMetadata(
        language=language.code,
        language_name=language.name,
        script=_script_code(info, transforms),
        detected_language=(info.language.code if info is not None and info.language else None),
        sources=dict(info.sources) if info is not None else {},
        errors=dict(info.errors) if info is not None else {},
        normalizer_id=transformer.normalizer.normalizer_id,
        generated_at=datetime.now(UTC),
    )
    return TextReport(
        metadata=metadata,
        display=transformer.normalize_for_display(request.text),
        index=transformer.normalize_for_index(request.text),
        scoring=transformer.normalize_for_scoring(request.text),
        stem_available=transformer.has_stemmer,
        transforms=transforms,
    )


def _resolve_language(requested: str, info: TextInfo | None) -> Language:
    if requested == AUTO_LANGUAGE:
        return info.language if info is not None and info.language else UNDETERMINED
    return LANGUAGES.resolve(requested)


def _select(
    transformer: TextTransformer,
    transforms: list[Transliteration],
    requested: list[str] | None,
) -> list[Transliteration]:
    if not requested:
        return transforms
    wanted = {TextType.from_key(key) for key in requested}
    for text_type in wanted:
        if not transformer.supports(text_type):
            raise UnsupportedOperationError(
                f"{text_type.label} is not available for language {transformer.language_code!r}",
                language=transformer.language_code,
            )
    keys = {text_type.key for text_type in wanted} | {TextType.ORIGINAL.key}
    return [item for item in transforms if item.text_type in keys]


def _script_code(info: TextInfo | None, transforms: list[Transliteration]) -> str | None:
    if info is not None and info.script is not None:
        return info.script.code
    return transforms[0].script if transforms else None
