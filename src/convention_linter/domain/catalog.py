"""The fixed table of operations the linter knows how to infer."""

import logging
from typing import Optional

import astroid  # type: ignore[import-untyped]

from convention_linter.domain.entities import Operation, Scope, Variant
from convention_linter.domain.matchers import (
    EmptyCallMatcher,
    EmptyLiteralMatcher,
    EmptyStringMatcher,
    WhileConstantMatcher,
)

logger = logging.getLogger(__name__)


def setup_catalog(disabled: Optional[list[str]] = None) -> list[Operation]:
    """
    Build a fresh catalog with zero counts.

    The first variant of each operation is its default when a batch holds
    no evidence. Operations named in ``disabled`` are left out.
    """
    operations = [
        Operation(
            name="empty list",
            scope=Scope.ANY,
            variants=[
                Variant("empty-list-call", EmptyCallMatcher("list")),
                Variant("empty-list-lit", EmptyLiteralMatcher(astroid.nodes.List)),
            ],
        ),
        Operation(
            name="empty dict",
            scope=Scope.ANY,
            variants=[
                Variant("empty-dict-call", EmptyCallMatcher("dict")),
                Variant("empty-dict-lit", EmptyLiteralMatcher(astroid.nodes.Dict)),
            ],
        ),
        Operation(
            name="empty tuple",
            scope=Scope.ANY,
            variants=[
                Variant("empty-tuple-call", EmptyCallMatcher("tuple")),
                Variant("empty-tuple-lit", EmptyLiteralMatcher(astroid.nodes.Tuple)),
            ],
        ),
        Operation(
            name="empty string",
            scope=Scope.ANY,
            variants=[
                Variant("empty-str-lit", EmptyStringMatcher()),
                Variant("empty-str-call", EmptyCallMatcher("str")),
            ],
        ),
        # Searched in function and method bodies only.
        Operation(
            name="infinite loop",
            scope=Scope.LOCAL,
            variants=[
                Variant("while-true", WhileConstantMatcher(True)),
                Variant("while-one", WhileConstantMatcher(1)),
            ],
        ),
    ]

    if not disabled:
        return operations
    known = {op.name for op in operations}
    for name in disabled:
        if name not in known:
            logger.warning("Configuration Warning: unknown operation %r in 'disable'", name)
    return [op for op in operations if op.name not in disabled]
