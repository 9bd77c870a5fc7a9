"""Unit tests for convention election and ambiguity diagnostics."""

import logging

import pytest

from convention_linter.domain.election import elect, elect_conventions, find_ambiguities
from convention_linter.domain.entities import Ambiguity
from convention_linter.domain.errors import EngineStateError
from tests.convention_test_utils import make_operation


class TestElect:
    def test_zero_evidence_elects_first_declared(self) -> None:
        op = make_operation("empty list", {"empty-list-call": 0, "empty-list-lit": 0})
        assert elect(op) is op.variants[0]

    def test_highest_count_wins(self) -> None:
        op = make_operation("empty list", {"empty-list-call": 2, "empty-list-lit": 5})
        assert elect(op).name == "empty-list-lit"

    def test_tie_goes_to_earliest_declared(self) -> None:
        op = make_operation("op", {"a": 1, "b": 4, "c": 4})
        assert elect(op).name == "b"

    def test_single_variant_is_elected(self) -> None:
        op = make_operation("op", {"only": 0})
        assert elect(op).name == "only"

    def test_elected_count_dominates_all_others(self) -> None:
        op = make_operation("op", {"a": 3, "b": 7, "c": 1, "d": 7})
        winner = elect(op)
        assert all(winner.count >= v.count for v in op.variants)


class TestElectConventions:
    def test_sets_convention_on_every_operation(self) -> None:
        ops = [
            make_operation("one", {"a": 0, "b": 1}),
            make_operation("two", {"c": 2, "d": 1}),
        ]
        assert elect_conventions(ops) == []
        assert [op.convention.name for op in ops] == ["b", "c"]

    def test_tie_reports_ambiguity(self) -> None:
        op = make_operation("empty list", {"empty-list-call": 3, "empty-list-lit": 3})
        ambiguities = elect_conventions([op])
        assert op.convention.name == "empty-list-call"
        assert ambiguities == [
            Ambiguity(operation="empty list", candidate="empty-list-lit", elected="empty-list-call")
        ]
        assert ambiguities[0].text == (
            "empty list: can't decide between empty-list-lit and empty-list-call"
        )

    def test_zero_evidence_is_not_ambiguous(self) -> None:
        op = make_operation("empty list", {"empty-list-call": 0, "empty-list-lit": 0})
        assert elect_conventions([op]) == []
        assert op.convention is op.variants[0]

    def test_only_variants_tied_with_winner_are_reported(self) -> None:
        op = make_operation("op", {"a": 1, "b": 2, "c": 2})
        ambiguities = elect_conventions([op])
        assert [(a.candidate, a.elected) for a in ambiguities] == [("c", "b")]

    def test_ambiguity_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        op = make_operation("empty dict", {"empty-dict-call": 1, "empty-dict-lit": 1})
        with caplog.at_level(logging.WARNING, logger="convention_linter.domain.election"):
            elect_conventions([op])
        assert "empty dict: can't decide between empty-dict-lit and empty-dict-call" in caplog.text

    def test_second_election_is_rejected(self) -> None:
        op = make_operation("op", {"a": 1})
        elect_conventions([op])
        with pytest.raises(EngineStateError):
            elect_conventions([op])


def test_find_ambiguities_without_election_is_empty() -> None:
    op = make_operation("op", {"a": 1, "b": 1})
    assert find_ambiguities(op) == []
