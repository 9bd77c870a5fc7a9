"""Node predicates for the catalog's idioms."""

from dataclasses import dataclass

import astroid  # type: ignore[import-untyped]
from astroid.const import Context  # type: ignore[import-untyped]


@dataclass(frozen=True)
class EmptyCallMatcher:
    """``list()``, ``dict()``... : a bare builtin name called without arguments."""

    builtin: str

    def skip(self, node: astroid.nodes.NodeNG) -> bool:
        return not isinstance(node, astroid.nodes.Call)

    def match(self, node: astroid.nodes.NodeNG) -> bool:
        func = node.func
        return (
            isinstance(func, astroid.nodes.Name)
            and func.name == self.builtin
            and not node.args
            and not node.keywords
        )


@dataclass(frozen=True)
class EmptyLiteralMatcher:
    """``[]``, ``()`` or ``{}`` used as a value."""

    node_class: type

    def skip(self, node: astroid.nodes.NodeNG) -> bool:
        return not isinstance(node, self.node_class)

    def match(self, node: astroid.nodes.NodeNG) -> bool:
        if getattr(node, "ctx", None) in (Context.Store, Context.Del):
            return False
        if isinstance(node, astroid.nodes.Dict):
            return not node.items
        return not node.elts


class EmptyStringMatcher:
    def skip(self, node: astroid.nodes.NodeNG) -> bool:
        # f-string fragments are not string literals of their own
        return not isinstance(node, astroid.nodes.Const) or isinstance(
            node.parent, astroid.nodes.JoinedStr
        )

    def match(self, node: astroid.nodes.NodeNG) -> bool:
        return type(node.value) is str and node.value == ""


@dataclass(frozen=True)
class WhileConstantMatcher:
    """``while <value>:`` where the test is exactly ``value`` (``1`` is not ``True``)."""

    value: object

    def skip(self, node: astroid.nodes.NodeNG) -> bool:
        return not isinstance(node, astroid.nodes.While)

    def match(self, node: astroid.nodes.NodeNG) -> bool:
        test = node.test
        return (
            isinstance(test, astroid.nodes.Const)
            and type(test.value) is type(self.value)
            and test.value == self.value
        )
