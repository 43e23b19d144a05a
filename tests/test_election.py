import pytest

from lingform.analyze.election import Election


def test_points_follow_rank_and_weight() -> None:
    election: Election[str] = Election(max_rank=5)
    election.vote_ranking(["eng", "spa"])
    election.vote_ranking(["spa", "eng"], weight=0.5)

    results = election.results()

    assert [candidate for candidate, _ in results] == ["eng", "spa"]
    assert results[0][1] == pytest.approx(7.0 / 13.5)
    assert results[1][1] == pytest.approx(6.5 / 13.5)
    assert sum(share for _, share in results) == pytest.approx(1.0)


def test_ties_go_to_first_voted() -> None:
    election: Election[str] = Election()
    election.vote("fra", 1)
    election.vote("deu", 1)

    assert election.winner() == "fra"


def test_ranks_past_max_are_ignored() -> None:
    election: Election[str] = Election(max_rank=2)
    election.vote_ranking(["a", "b", "c"])

    assert len(election) == 2
    assert dict(election.results()) == pytest.approx({"a": 2 / 3, "b": 1 / 3})


def test_repeated_candidates_keep_best_rank() -> None:
    election: Election[str] = Election(max_rank=3)
    election.vote_ranking(["a", "a", "b"])

    assert dict(election.results()) == pytest.approx({"a": 3 / 5, "b": 2 / 5})


def test_non_positive_weight_is_ignored() -> None:
    election: Election[str] = Election()
    election.vote("a", 1, weight=0.0)

    assert election.results() == []
    assert election.winner() is None


def test_invalid_rank_and_max_rank() -> None:
    with pytest.raises(ValueError, match="rank"):
        Election[str]().vote("a", 0)
    with pytest.raises(ValueError, match="max_rank"):
        Election(max_rank=0)
