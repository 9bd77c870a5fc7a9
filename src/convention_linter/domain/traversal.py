"""
Scope-aware traversal of astroid trees.

The dispatcher decides *where* matchers look (whole module or function bodies);
visit functions decide what to do with each node and whether to descend.
"""

from collections.abc import Callable, Iterator
from typing import Optional

import astroid  # type: ignore[import-untyped]

from convention_linter.domain.entities import Operation, Scope, Variant
from convention_linter.domain.errors import UnimplementedScopeError

NodeVisitor = Callable[[Optional[astroid.nodes.NodeNG]], bool]
OperationVisitor = Callable[[Operation, Variant, Optional[astroid.nodes.NodeNG]], bool]


def walk(root: astroid.nodes.NodeNG, visit: NodeVisitor) -> None:
    """
    Depth-first, pre-order walk of ``root``.

    ``visit(node)`` returning False prunes the node's children. After the
    children of a descended node are exhausted, ``visit(None)`` is called to
    signal the end of that branch.
    """
    if not visit(root):
        return
    stack: list[Iterator[astroid.nodes.NodeNG]] = [iter(root.get_children())]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            visit(None)
            continue
        if visit(child):
            stack.append(iter(child.get_children()))


def local_roots(module: astroid.nodes.Module) -> Iterator[astroid.nodes.NodeNG]:
    """
    Yield the body statements of every top-level function-like declaration.

    Module-level functions and the methods of module-level classes qualify;
    any other top-level statement is skipped.
    """
    for decl in module.body:
        if isinstance(decl, astroid.nodes.FunctionDef):
            yield from decl.body
        elif isinstance(decl, astroid.nodes.ClassDef):
            for member in decl.body:
                if isinstance(member, astroid.nodes.FunctionDef):
                    yield from member.body


def visit_operations(
    operations: list[Operation],
    module: astroid.nodes.Module,
    visit: OperationVisitor,
) -> None:
    """Walk ``module`` once per (operation, variant) pair, honoring each operation's scope."""
    for op in operations:
        if op.scope is Scope.ANY:
            roots: list[astroid.nodes.NodeNG] = [module]
        elif op.scope is Scope.LOCAL:
            roots = list(local_roots(module))
        elif op.scope is Scope.GLOBAL:
            raise UnimplementedScopeError(
                f"{op.name}: package-wide traversal is not implemented"
            )
        else:
            raise UnimplementedScopeError(f"{op.name}: unexpected scope {op.scope!r}")

        for variant in op.variants:
            for root in roots:
                walk(root, lambda node, op=op, variant=variant: visit(op, variant, node))
