# archgraph/links.py
from __future__ import annotations

from typing import Sequence

from .errors import DanglingReferenceError, InvalidIdentifierSyntaxError
from .ids import is_valid_identifier
from .model import Element, Relation
from .resolve import resolve


def validate_links(nodes: Sequence[Element], links: Sequence[Relation]) -> None:
    """Check every relation endpoint, in input order; stop at the first bad one.

    `from` is checked before `to`, syntax before existence.
    """
    for index, link in enumerate(links):
        for field, value in (("from", link.source), ("to", link.target)):
            if not is_valid_identifier(value):
                raise InvalidIdentifierSyntaxError(field, value, index=index)
            if resolve(nodes, value) is None:
                raise DanglingReferenceError(field, value, index=index)
