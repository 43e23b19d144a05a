"""Language identification analyzers."""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterator, Mapping

from langdetect.detector_factory import PROFILES_DIRECTORY, DetectorFactory
from langdetect.lang_detect_exception import LangDetectException

from lingform.analyze.base import Analysis, Analyzer, TextInfo
from lingform.iso.languages import LANGUAGES, LanguageTable

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[^\W\d_]+")

# Short closed-class word lists; enough to separate the supported languages on sentence-length input.
STOPWORDS: Mapping[str, frozenset[str]] = {
    "eng": frozenset(
        "the of and to in is it that was for on are with as i his they be at one have this from or had by "
        "but not what all were we when your can there an which do their if will each no she he you my me so".split()
    ),
    "fra": frozenset(
        "le la les de des du un une et est en que qui dans pour pas sur au aux avec ce cette il elle ils "
        "nous vous je ne se sont mais ou par son sa ses été".split()
    ),
    "spa": frozenset(
        "el la los las de del que y en un una es por con para no se su sus al lo como más pero yo mi muy "
        "son está este esta".split()
    ),
    "deu": frozenset(
        "der die das und ist nicht ein eine zu den dem mit sich des auf für im von auch es ich sie wir er "
        "aber oder wie bei".split()
    ),
    "ita": frozenset(
        "il lo la gli le di del della che e è un una per non con sono si mi ma come anche questo nel alla".split()
    ),
    "por": frozenset(
        "o a os as de do da dos das que e é um uma em no na não para com por se mais como mas eu ele ela".split()
    ),
    "nld": frozenset(
        "de het een en van is dat niet te op met voor zijn ik je maar er ook aan bij wat naar".split()
    ),
    "rus": frozenset(
        "и в не на я что с он а как это по но к у из за то так все она мы вы было был от же для бы или "
        "только его её".split()
    ),
    "ukr": frozenset(
        "і й в у не на що з як це та до за але від по він вона ми ви був була для або тільки його її мене є".split()
    ),
}


class StopwordLanguageAnalyzer(Analyzer):
    """Ranks languages by the share of words found in their function-word lists."""

    name = "stopwords"
    features = frozenset({"language"})

    def __init__(
        self,
        *,
        profiles: Mapping[str, frozenset[str]] = STOPWORDS,
        languages: LanguageTable = LANGUAGES,
    ) -> None:
        super().__init__()
        self.profiles = profiles
        self.languages = languages

    def _analyze(self, data: str, context: TextInfo | None) -> Iterator[Analysis]:
        words = _WORD_RE.findall(data.casefold())
        if not words:
            return
        for code, profile in self.profiles.items():
            hits = sum(1 for word in words if word in profile)
            if hits:
                yield Analysis(
                    analyzer=self.name,
                    values={"language": self.languages.by_code(code)},
                    score=hits / len(words),
                )


class LangdetectAnalyzer(Analyzer):
    """Wraps the `langdetect` n-gram detector with a fixed seed.

    Profiles load on first use and are dropped by `dispose`.
    """

    name = "langdetect"
    features = frozenset({"language"})
    exclusive = True

    def __init__(
        self,
        *,
        seed: int = 0,
        min_probability: float = 0.1,
        languages: LanguageTable = LANGUAGES,
    ) -> None:
        super().__init__()
        self.seed = seed
        self.min_probability = min_probability
        self.languages = languages
        self._factory: DetectorFactory | None = None
        self._lock = threading.Lock()

    def _detector_factory(self) -> DetectorFactory:
        with self._lock:
            if self._factory is None:
                factory = DetectorFactory()
                factory.load_profile(PROFILES_DIRECTORY)
                factory.set_seed(self.seed)
                self._factory = factory
                logger.debug("Loaded %d langdetect profiles", len(factory.get_lang_list()))
            return self._factory

    def _analyze(self, data: str, context: TextInfo | None) -> Iterator[Analysis]:
        detector = self._detector_factory().create()
        detector.append(data)
        try:
            candidates = detector.get_probabilities()
        except LangDetectException as exc:
            # Raised for input without letters; that is "no determination".
            logger.debug("langdetect found no features: %s", exc)
            return
        for candidate in candidates:
            language = self.languages.lookup(candidate.lang)
            if language is None or candidate.prob < self.min_probability:
                continue
            yield Analysis(analyzer=self.name, values={"language": language}, score=candidate.prob)

    def _release(self) -> None:
        with self._lock:
            self._factory = None
