"""Majority-vote election of each operation's convention."""

import logging

from convention_linter.domain.entities import Ambiguity, Operation, Variant
from convention_linter.domain.errors import EngineStateError

logger = logging.getLogger(__name__)


def elect(op: Operation) -> Variant:
    """
    Return the most frequently used variant of ``op``.

    Only a strictly greater count displaces the current candidate, so the
    first declared variant wins ties and the all-zero case.
    """
    winner = op.variants[0]
    for variant in op.variants[1:]:
        if variant.count > winner.count:
            winner = variant
    return winner


def find_ambiguities(op: Operation) -> list[Ambiguity]:
    """Variants that tied with the elected convention. Empty without evidence."""
    elected = op.convention
    if elected is None or elected.count == 0:
        return []
    return [
        Ambiguity(operation=op.name, candidate=v.name, elected=elected.name)
        for v in op.variants
        if v is not elected and v.count == elected.count
    ]


def elect_conventions(operations: list[Operation]) -> list[Ambiguity]:
    """Set ``convention`` on every operation and report tie-broken elections."""
    ambiguities: list[Ambiguity] = []
    for op in operations:
        if op.convention is not None:
            raise EngineStateError(f"{op.name}: convention already elected")
        op.convention = elect(op)
        for ambiguity in find_ambiguities(op):
            logger.warning("warning: %s", ambiguity.text)
            ambiguities.append(ambiguity)
    return ambiguities
