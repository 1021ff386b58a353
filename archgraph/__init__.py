# archgraph/__init__.py
"""Hierarchical architecture graphs rendered as Mermaid C4 context diagrams."""
from __future__ import annotations

from .diagrams.c4 import C4RenderConfig
from .errors import (
    DanglingReferenceError,
    DuplicateIdentifierError,
    ElementNotFoundError,
    EmptyIdentifierError,
    GraphError,
    InvalidIdentifierSyntaxError,
    SchemaValidationError,
)
from .graph import Graph
from .model import Element, ElementType, GraphValue, Relation

__all__ = [
    "C4RenderConfig",
    "DanglingReferenceError",
    "DuplicateIdentifierError",
    "Element",
    "ElementNotFoundError",
    "ElementType",
    "EmptyIdentifierError",
    "Graph",
    "GraphError",
    "GraphValue",
    "InvalidIdentifierSyntaxError",
    "Relation",
    "SchemaValidationError",
]
