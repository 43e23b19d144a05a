"""Byte-level encoding detection."""

from __future__ import annotations

from collections.abc import Iterator

from charset_normalizer import from_bytes

from lingform.analyze.base import Analysis, Analyzer, TextInfo


class EncodingAnalyzer(Analyzer):
    """Ranks candidate character encodings of raw bytes with charset-normalizer."""

    name = "charset"
    input_types = (bytes, bytearray)
    features = frozenset({"encoding", "size", "length"})

    def _analyze(self, data: bytes | bytearray, context: TextInfo | None) -> Iterator[Analysis]:
        payload = bytes(data)
        for match in from_bytes(payload):
            yield Analysis(
                analyzer=self.name,
                values={"encoding": match.encoding, "size": len(payload), "length": len(str(match))},
                score=round(1.0 - match.chaos, 6),
            )
