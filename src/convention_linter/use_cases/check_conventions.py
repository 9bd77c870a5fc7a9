"""
Two-pass convention checking.

INFER counts every variant's occurrences over the whole batch, election picks
each operation's convention, and DETECT flags every occurrence of any other
variant. Both passes drive the same dispatcher, so they see the same nodes in
the same order.
"""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Optional

import astroid  # type: ignore[import-untyped]

from convention_linter.domain.election import elect_conventions
from convention_linter.domain.entities import (
    Ambiguity,
    ConventionWarning,
    Operation,
    Position,
    RunContext,
    Variant,
)
from convention_linter.domain.errors import EngineStateError
from convention_linter.domain.protocols import AstroidProtocol
from convention_linter.domain.traversal import visit_operations

logger = logging.getLogger(__name__)


def node_position(node: astroid.nodes.NodeNG) -> Position:
    """Resolve a node to file and 1-based line/column."""
    return Position(
        path=node.root().file,
        line=node.lineno or 0,
        column=(node.col_offset or 0) + 1,
    )


def infer_conventions(operations: list[Operation], module: astroid.nodes.Module) -> None:
    """Add one module's occurrences to the variant counts."""

    def visit(op: Operation, v: Variant, node: Optional[astroid.nodes.NodeNG]) -> bool:
        if node is None:
            return False
        if v.matcher.skip(node):
            return True
        if v.matcher.match(node):
            v.count += 1
        return True

    visit_operations(operations, module, visit)


def tally(operations: list[Operation]) -> dict[str, dict[str, int]]:
    """Variant counts keyed by operation name, then variant name."""
    return {op.name: {v.name: v.count for v in op.variants} for op in operations}


def add_counts(operations: list[Operation], counts: dict[str, dict[str, int]]) -> None:
    """Merge counts inferred elsewhere. Summing is order independent."""
    for op in operations:
        op_counts = counts.get(op.name, {})
        for v in op.variants:
            v.count += op_counts.get(v.name, 0)


def capture_inconsistencies(
    operations: list[Operation], module: astroid.nodes.Module
) -> list[ConventionWarning]:
    """Return one warning per occurrence of a non-elected variant, in traversal order."""
    warnings: list[ConventionWarning] = []

    def visit(op: Operation, v: Variant, node: Optional[astroid.nodes.NodeNG]) -> bool:
        if node is None:
            return False
        if v.matcher.skip(node):
            return True
        if op.convention is None:
            raise EngineStateError(f"{op.name}: no convention elected")
        if v is not op.convention and v.matcher.match(node):
            warnings.append(
                ConventionWarning(
                    position=node_position(node),
                    operation=op.name,
                    convention=op.convention.name,
                    variant=v.name,
                    node=node,
                )
            )
        return True

    visit_operations(operations, module, visit)
    return warnings


class EngineState(Enum):
    INFER = "infer"
    DETECT = "detect"
    DONE = "done"


class ConventionEngine:
    """Runs INFER, election and DETECT over one batch, strictly in that order."""

    def __init__(self, context: RunContext, parser: AstroidProtocol) -> None:
        self.context = context
        self.parser = parser
        self.state = EngineState.INFER
        self.ambiguities: list[Ambiguity] = []

    def infer(self, filenames: Iterable[str]) -> list[Ambiguity]:
        """Count every variant over the batch, then elect conventions."""
        self._require(EngineState.INFER)
        for filename in filenames:
            logger.debug("infer: %s", filename)
            infer_conventions(self.context.operations, self.parser.parse_file(filename))
        self.ambiguities = elect_conventions(self.context.operations)
        self.state = EngineState.DETECT
        return self.ambiguities

    def detect(self, filenames: Iterable[str]) -> list[ConventionWarning]:
        """Collect every deviation from the elected conventions."""
        self._require(EngineState.DETECT)
        warnings: list[ConventionWarning] = []
        for filename in filenames:
            logger.debug("detect: %s", filename)
            warnings.extend(
                capture_inconsistencies(self.context.operations, self.parser.parse_file(filename))
            )
        # Published only once the whole batch is checked.
        self.context.warnings = warnings
        self.state = EngineState.DONE
        return list(warnings)

    def run(self, filenames: list[str]) -> list[ConventionWarning]:
        """Both passes over the same file list."""
        self.infer(filenames)
        return self.detect(filenames)

    @property
    def warnings(self) -> tuple[ConventionWarning, ...]:
        return tuple(self.context.warnings)

    def _require(self, expected: EngineState) -> None:
        if self.state is not expected:
            raise EngineStateError(
                f"cannot run {expected.value} pass while engine is in state {self.state.value}"
            )
