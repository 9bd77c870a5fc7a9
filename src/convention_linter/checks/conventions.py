from typing import TYPE_CHECKING, Any

import astroid  # type: ignore[import-untyped]
from pylint.checkers import BaseChecker

from convention_linter.domain.catalog import setup_catalog
from convention_linter.domain.election import elect_conventions
from convention_linter.domain.entities import ConventionWarning, RunContext
from convention_linter.infrastructure.gateways.astroid_gateway import AstroidGateway, ModuleCache
from convention_linter.use_cases.check_conventions import (
    ConventionEngine,
    add_counts,
    capture_inconsistencies,
    infer_conventions,
    tally,
)

if TYPE_CHECKING:
    from pylint.lint import PyLinter

MSG_SYMBOL = "inconsistent-convention"


class ConventionChecker(BaseChecker):
    """
    Runs the convention engine over every module pylint checked.

    Conventions are only known once the whole batch has been seen, so
    messages are emitted from ``close()`` on the trees pylint already built.
    Under ``--jobs`` each worker ships its counts through ``get_map_data`` and
    the main process elects and reports in ``reduce_map_data``.
    """

    name = "convention-consistency"
    msgs = {
        "W9701": (
            "%s",
            MSG_SYMBOL,
            "Used when an idiom differs from the one the rest of the checked "
            "code predominantly uses for the same operation.",
        ),
    }
    options = (
        (
            "convention-disable",
            {
                "default": (),
                "type": "csv",
                "metavar": "<operation names>",
                "help": "Operations that should not be inferred.",
            },
        ),
    )

    def __init__(self, linter: "PyLinter") -> None:
        super().__init__(linter)
        self._reset()

    def _reset(self) -> None:
        self._modules = ModuleCache()
        # Lines where the message is disabled, per file, as pylint saw them while walking it.
        self._disabled_lines: dict[str, frozenset[int]] = {}
        self._file_states: dict[str, tuple[Any, Any]] = {}

    def open(self) -> None:
        self._reset()

    def visit_module(self, node: astroid.nodes.Module) -> None:
        if not self._modules.add(node):
            return
        self._disabled_lines[node.file] = frozenset(
            line
            for line in range(1, (node.tolineno or 0) + 1)
            if not self.linter.is_message_enabled(MSG_SYMBOL, line)
        )
        self._file_states[node.file] = (self.linter.file_state, self.linter.current_name)

    def close(self) -> None:
        if self._runs_in_worker():
            return
        filenames = self._modules.filenames()
        if not filenames:
            return
        engine = ConventionEngine(RunContext(setup_catalog(self._disabled_operations())), self._modules)
        warnings = engine.run(filenames)

        saved = (self.linter.file_state, self.linter.current_name)
        try:
            for warn in warnings:
                # pylint checks suppressions against its current file state
                self.linter.file_state, self.linter.current_name = self._file_states[warn.position.path]
                self._emit(warn, self._disabled_lines[warn.position.path])
        finally:
            self.linter.file_state, self.linter.current_name = saved

    def get_map_data(self) -> dict[str, Any]:
        """Counts and suppressed lines of the files this worker checked."""
        operations = setup_catalog(self._disabled_operations())
        filenames = self._modules.filenames()
        for filename in filenames:
            infer_conventions(operations, self._modules.parse_file(filename))
        return {
            "counts": tally(operations),
            "files": [(filename, self._disabled_lines[filename]) for filename in filenames],
        }

    def reduce_map_data(self, linter: "PyLinter", data: list[dict[str, Any]]) -> None:
        """Elect over the whole batch, then re-parse each file to report deviations."""
        operations = setup_catalog(self._disabled_operations())
        disabled_lines: dict[str, frozenset[int]] = {}
        for chunk in data:
            add_counts(operations, chunk["counts"])
            disabled_lines.update(chunk["files"])
        elect_conventions(operations)

        gateway = AstroidGateway()
        # Workers finish in any order; sort to keep the report stable.
        for filename in sorted(disabled_lines):
            for warn in capture_inconsistencies(operations, gateway.parse_file(filename)):
                self._emit(warn, disabled_lines[filename])

    def _emit(self, warn: ConventionWarning, disabled_lines: frozenset[int]) -> None:
        if warn.position.line in disabled_lines:
            return
        self.add_message(MSG_SYMBOL, node=warn.node, args=(warn.text,))

    def _disabled_operations(self) -> list[str]:
        return list(getattr(self.linter.config, "convention_disable", ()) or ())

    def _runs_in_worker(self) -> bool:
        return int(getattr(self.linter.config, "jobs", 1) or 1) > 1
