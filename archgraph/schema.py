# archgraph/schema.py
"""Input schema for architecture graphs and conversion to typed values."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from jsonschema import Draft202012Validator, ValidationError, validators
from jsonschema.exceptions import best_match

from .errors import SchemaValidationError
from .model import Element, ElementType, GraphValue, Relation

_OPTIONAL_TEXT: Dict[str, Any] = {"type": ["string", "null"]}

GRAPH_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["nodes"],
    "properties": {
        "nodes": {"type": "array", "items": {"$ref": "#/$defs/node"}},
        "links": {
            "type": ["array", "null"],
            "items": {"$ref": "#/$defs/link"},
        },
    },
    "additionalProperties": True,
    "$defs": {
        "node": {
            "type": "object",
            "required": ["name", "type"],
            "properties": {
                "name": {"type": "string"},
                "type": {"type": "string", "enum": [t.value for t in ElementType]},
                "description": _OPTIONAL_TEXT,
                "technology": _OPTIONAL_TEXT,
                "deployment": _OPTIONAL_TEXT,
                # Accepted for compatibility; always recomputed from names.
                "id": _OPTIONAL_TEXT,
                "nodes": {
                    "type": ["array", "null"],
                    "items": {"$ref": "#/$defs/node"},
                },
            },
            "additionalProperties": True,
        },
        "link": {
            "type": "object",
            "required": ["from", "to"],
            "properties": {
                "from": {"type": "string"},
                "to": {"type": "string"},
                "description": _OPTIONAL_TEXT,
                "technology": _OPTIONAL_TEXT,
            },
            "additionalProperties": True,
        },
    },
}

# Python callers may pass any ordered sequence or mapping, not only list/dict.
_TYPE_CHECKER = Draft202012Validator.TYPE_CHECKER.redefine_many(
    {
        "array": lambda _checker, instance: isinstance(instance, (list, tuple)),
        "object": lambda _checker, instance: isinstance(instance, Mapping),
    }
)
_GraphValidator = validators.extend(Draft202012Validator, type_checker=_TYPE_CHECKER)
_VALIDATOR = _GraphValidator(GRAPH_SCHEMA)


def _describe_expected(error: ValidationError) -> str:
    if error.validator == "type":
        types = error.validator_value
        if isinstance(types, list):
            return "one of [" + ", ".join(types) + "]"
        return f"a value of type {types}"
    if error.validator == "enum":
        return "one of [" + ", ".join(str(v) for v in error.validator_value) + "]"
    if error.validator == "required":
        missing = [
            key
            for key in error.validator_value
            if not (isinstance(error.instance, Mapping) and key in error.instance)
        ]
        return "an object with required key(s) " + ", ".join(repr(k) for k in missing)
    return error.message


def check(raw: Any) -> None:
    """Raise SchemaValidationError for the most relevant schema violation, if any."""
    error = best_match(_VALIDATOR.iter_errors(raw))
    if error is None:
        return
    raise SchemaValidationError(
        path=error.json_path,
        expected=_describe_expected(error),
        actual=error.instance,
    ) from error


def _element(raw: Mapping[str, Any]) -> Element:
    return Element(
        name=raw["name"],
        type=ElementType(raw["type"]),
        description=raw.get("description"),
        technology=raw.get("technology"),
        deployment=raw.get("deployment"),
        nodes=tuple(_element(child) for child in raw.get("nodes") or ()),
    )


def _relation(raw: Mapping[str, Any]) -> Relation:
    return Relation(
        source=raw["from"],
        target=raw["to"],
        description=raw.get("description"),
        technology=raw.get("technology"),
    )


def validate(raw: Any) -> GraphValue:
    """Validate `raw` against GRAPH_SCHEMA and convert it into a GraphValue.

    Element ids are left empty; see `ids.assign_ids()`.
    """
    check(raw)
    return GraphValue(
        nodes=tuple(_element(n) for n in raw["nodes"]),
        links=tuple(_relation(link) for link in raw.get("links") or ()),
    )
