"""Ensemble analyzer that elects language and script from member rankings."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from lingform.analyze.base import Analysis, Analyzer, TextInfo
from lingform.analyze.election import Election
from lingform.errors import AnalyzerError

logger = logging.getLogger(__name__)

MAX_VOTES = 5


class VotingAnalyzer(Analyzer):
    """Each accepting member votes its ranking with weight 1 / len(members)."""

    name = "voting"
    features = frozenset({"language", "script"})

    def __init__(self, members: Sequence[Analyzer], *, max_rank: int = MAX_VOTES) -> None:
        super().__init__()
        if not members:
            raise ValueError("VotingAnalyzer needs at least one member")
        self.members = tuple(members)
        self.max_rank = max_rank
        self.exclusive = any(member.exclusive for member in self.members)

    def _analyze(self, data: str, context: TextInfo | None) -> Iterator[Analysis]:
        voters = [member for member in self.members if member.accepts(data)]
        if not voters:
            return
        elections: dict[str, Election[object]] = {feature: Election(self.max_rank) for feature in self.features}
        weight = 1.0 / len(self.members)
        for member in voters:
            try:
                analyses = member.analyze(data, context)
            except AnalyzerError:
                logger.exception("Voting member %s failed", member.name)
                continue
            for feature, election in elections.items():
                election.vote_ranking((a.get(feature) for a in analyses if a.get(feature) is not None), weight)

        values: dict[str, object] = {}
        score: float | None = None
        for feature in sorted(elections):
            results = elections[feature].results()
            if not results:
                continue
            values[feature] = results[0][0]
            if feature == "language" or score is None:
                score = results[0][1]
        if values:
            yield Analysis(analyzer=self.name, values=values, score=score)

    def _release(self) -> None:
        for member in self.members:
            member.dispose()
