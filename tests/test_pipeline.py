import threading
import time
from collections.abc import Iterator

import pytest

from lingform.analyze import Analysis, Analyzer, AnalyzerPipeline, TextInfo, build_pipeline
from lingform.analyze.pipeline import order_analyzers
from lingform.analyze.script import ScriptLanguageAnalyzer, ScriptProfileAnalyzer
from lingform.config import DEFAULT_ANALYZERS
from lingform.errors import MalformedInputError
from lingform.iso.languages import LANGUAGES


class StaticAnalyzer(Analyzer):
    def __init__(
        self,
        name: str,
        values: dict[str, object],
        *,
        priority: frozenset[str] = frozenset(),
    ) -> None:
        super().__init__()
        self.name = name
        self.features = frozenset(values)
        self.priority_features = priority
        self._values = values
        self.released = 0

    def _analyze(self, data: str, context: TextInfo | None) -> Iterator[Analysis]:
        yield Analysis(analyzer=self.name, values=self._values, score=1.0)

    def _release(self) -> None:
        self.released += 1


class FailingAnalyzer(Analyzer):
    name = "failing"
    features = frozenset({"language"})

    def _analyze(self, data: str, context: TextInfo | None) -> Iterator[Analysis]:
        raise ValueError("model unavailable")
        yield


class SlowExclusiveAnalyzer(Analyzer):
    name = "slow"
    features = frozenset({"length"})
    exclusive = True

    def __init__(self) -> None:
        super().__init__()
        self.active = 0
        self.max_active = 0
        self._counter = threading.Lock()

    def _analyze(self, data: str, context: TextInfo | None) -> Iterator[Analysis]:
        with self._counter:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        time.sleep(0.01)
        with self._counter:
            self.active -= 1
        yield Analysis(analyzer=self.name, values={"length": len(data)})


def test_default_pipeline_detects_english() -> None:
    with build_pipeline() as pipeline:
        info = pipeline.run("I have no special chars")

    assert info.language is not None
    assert info.language.code == "eng"
    assert info.script is not None
    assert info.script.code == "Latn"
    assert info.sources["language"] == "stopwords"
    assert info.frozen


def test_default_pipeline_detects_cyrillic() -> None:
    with build_pipeline() as pipeline:
        info = pipeline.run("Привет, как дела? Это тест.")

    assert info.script is not None
    assert info.script.code == "Cyrl"
    assert info.language is not None
    assert info.language.code == "rus"


def test_script_only_language_comes_from_script() -> None:
    with build_pipeline(["script_language", "script_profile"]) as pipeline:
        info = pipeline.run("Καλημέρα κόσμε")

    assert info.language is not None
    assert info.language.code == "ell"
    assert info.sources["language"] == "script_language"


def test_bytes_input_runs_text_analyzers_after_decoding() -> None:
    with build_pipeline(["charset", "script_profile"]) as pipeline:
        info = pipeline.run("Привет, мир".encode("utf-8"))

    assert info.size == len("Привет, мир".encode("utf-8"))
    assert info.encoding is not None
    assert info.script is not None
    assert info.script.code == "Cyrl"


def test_empty_input_gives_empty_info() -> None:
    with build_pipeline() as pipeline:
        info = pipeline.run("")

    assert info.is_empty
    assert info.language is None
    assert dict(info.errors) == {}


def test_missing_input_is_rejected() -> None:
    with build_pipeline(["script_profile"]) as pipeline:
        with pytest.raises(MalformedInputError):
            pipeline.run(None)  # type: ignore[arg-type]


def test_first_setter_wins_without_priority() -> None:
    pipeline = AnalyzerPipeline(
        [
            StaticAnalyzer("first", {"language": "eng"}),
            StaticAnalyzer("second", {"language": "rus"}),
        ]
    )

    info = pipeline.run("text")

    assert info.get("language") == "eng"
    assert info.sources["language"] == "first"
    assert set(info.rankings) == {"first", "second"}


def test_priority_overrides_once() -> None:
    pipeline = AnalyzerPipeline(
        [
            StaticAnalyzer("first", {"language": "eng"}),
            StaticAnalyzer("priority", {"language": "rus"}, priority=frozenset({"language"})),
            StaticAnalyzer("late", {"language": "fra"}, priority=frozenset({"language"})),
        ]
    )

    info = pipeline.run("text")

    assert info.get("language") == "rus"
    assert info.sources["language"] == "priority"


def test_failing_analyzer_is_isolated() -> None:
    pipeline = AnalyzerPipeline([FailingAnalyzer(), StaticAnalyzer("backup", {"language": "eng"})])

    info = pipeline.run("text")

    assert info.get("language") == "eng"
    assert dict(info.errors) == {"failing": "model unavailable"}


def test_info_is_frozen_after_run() -> None:
    info = AnalyzerPipeline([StaticAnalyzer("only", {"script": "Latn"})]).run("text")

    with pytest.raises(RuntimeError, match="frozen"):
        info.offer("language", "eng", source="late")


def test_close_disposes_each_analyzer_once() -> None:
    analyzer = StaticAnalyzer("only", {"script": "Latn"})
    pipeline = AnalyzerPipeline([analyzer])

    pipeline.close()
    pipeline.close()

    assert analyzer.released == 1
    assert analyzer.disposed
    assert pipeline.closed
    with pytest.raises(RuntimeError, match="closed"):
        pipeline.run("text")


def test_duplicate_names_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        AnalyzerPipeline([StaticAnalyzer("same", {"script": 1}), StaticAnalyzer("same", {"size": 1})])


def test_order_analyzers_respects_requirements() -> None:
    language = ScriptLanguageAnalyzer()
    profile = ScriptProfileAnalyzer()

    assert order_analyzers([language, profile]) == (profile, language)
    assert order_analyzers([profile, language]) == (profile, language)


def test_default_pipeline_keeps_configured_order() -> None:
    with build_pipeline() as pipeline:
        assert tuple(analyzer.name for analyzer in pipeline.analyzers) == DEFAULT_ANALYZERS


def test_run_many_preserves_order_and_serializes_exclusive() -> None:
    slow = SlowExclusiveAnalyzer()
    pipeline = AnalyzerPipeline([slow, ScriptProfileAnalyzer()])
    inputs = ["a", "bb", "ccc", "dddd", "Жжжжж"]

    results = pipeline.run_many(inputs, max_workers=4)

    assert [info.length for info in results] == [1, 2, 3, 4, 5]
    assert results[-1].script is not None
    assert results[-1].script.code == "Cyrl"
    assert slow.max_active == 1


class BrokenReleaseAnalyzer(Analyzer):
    name = "broken_release"
    features = frozenset({"size"})

    def _analyze(self, data: str, context: TextInfo | None) -> Iterator[Analysis]:
        yield Analysis(analyzer=self.name, values={"size": len(data)})

    def _release(self) -> None:
        raise OSError("handle already closed")


@pytest.mark.parametrize(
    ("text", "script"),
    [
        ("我们", "Hans"),
        ("北京大学", "Hans"),
        ("漢字", "Hant"),
    ],
)
def test_default_pipeline_detects_chinese(text: str, script: str) -> None:
    with build_pipeline() as pipeline:
        info = pipeline.run(text)

    assert info.script is not None
    assert info.script.code == script
    assert info.language is not None
    assert info.language.code == "zho"
    assert info.sources["language"] == "script_language"


def test_script_language_overrides_statistical_guess() -> None:
    pipeline = AnalyzerPipeline(
        [
            StaticAnalyzer("guess", {"language": LANGUAGES["kor"]}),
            ScriptProfileAnalyzer(),
            ScriptLanguageAnalyzer(),
        ]
    )

    info = pipeline.run("漢字")

    assert info.language is not None
    assert info.language.code == "zho"
    assert info.sources["language"] == "script_language"
    assert info.rankings["guess"][0].language == LANGUAGES["kor"]


def test_close_disposes_remaining_analyzers_after_failed_release(caplog) -> None:
    broken = BrokenReleaseAnalyzer()
    tracked = StaticAnalyzer("tracked", {"script": "Latn"})
    pipeline = AnalyzerPipeline([broken, tracked])

    with caplog.at_level("ERROR", logger="lingform.analyze.pipeline"):
        pipeline.close()
    pipeline.close()

    assert broken.disposed
    assert tracked.disposed
    assert tracked.released == 1
    assert pipeline.closed
    assert "broken_release" in caplog.text
