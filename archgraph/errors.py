# archgraph/errors.py
from __future__ import annotations

from typing import Any


class GraphError(ValueError):
    """Base class for every error raised while building or querying a Graph."""


class SchemaValidationError(GraphError):
    """Raw input does not match the graph shape."""

    def __init__(self, path: str, expected: str, actual: Any) -> None:
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid value at {path}: expected {expected} but got {actual!r}"
        )


class InvalidIdentifierSyntaxError(GraphError):
    def __init__(self, field: str, value: str, *, index: int) -> None:
        self.field = field
        self.value = value
        self.index = index
        super().__init__(
            f"links[{index}].{field}: {value!r} is not a valid identifier "
            "(expected dot-separated alphanumeric segments, e.g. 'Shop.CartAPI')"
        )


class DanglingReferenceError(GraphError):
    def __init__(self, field: str, identifier: str, *, index: int) -> None:
        self.field = field
        self.identifier = identifier
        self.index = index
        super().__init__(
            f"links[{index}].{field} references unknown element {identifier!r}"
        )


class ElementNotFoundError(GraphError):
    def __init__(self, identifier: str, *, context: str = "element") -> None:
        self.identifier = identifier
        super().__init__(f"{context} with id {identifier!r} not found")


class DuplicateIdentifierError(GraphError):
    def __init__(self, identifier: str, names: tuple[str, str]) -> None:
        self.identifier = identifier
        self.names = names
        super().__init__(
            f"elements {names[0]!r} and {names[1]!r} both resolve to id {identifier!r}"
        )


class EmptyIdentifierError(GraphError):
    def __init__(self, name: str, namespace: str) -> None:
        self.name = name
        self.namespace = namespace
        where = f" under {namespace!r}" if namespace else ""
        super().__init__(f"element name {name!r}{where} yields an empty id")
