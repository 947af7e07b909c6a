#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Generates field datatypes from pydantic models.

Fields opt in through an `es` entry in `json_schema_extra`, holding the
field name and optionally its datatype::

    class Answer(BaseModel):
        body: str = Field(json_schema_extra={"es": "body,text"})
        votes: int = Field(json_schema_extra={"es": "votes"})
        author: Author = Field(json_schema_extra={"es": "author,object"})

When the datatype is left out it is inferred from the annotation. Fields
without the `es` entry, or with `"-"`, are skipped.
"""

import datetime
import types
import typing

from pydantic import BaseModel

from estemplate.datatypes import DATATYPES, NestedDatatype, ObjectDatatype
from estemplate.exceptions import UnsupportedDatatype
from estemplate.logger import logger

TAG_NAME = "es"

DEFAULT_NESTED_LIMIT = 3

# accepted in tags on top of the datatype names
DATATYPE_ALIASES = {
    "date_nanoseconds": "date_nanos",
    "mapper_murmur3": "murmur3",
    "mapper_annotated_text": "annotated_text",
}

SEQUENCE_TYPES = (list, tuple, set, frozenset)


def default_builder(name, nested_count, datatype_name, datatype):
    return datatype


def _split_tag(tag):
    parts = [part.strip() for part in tag.split(",")]
    if len(parts) > 1:
        return parts[0], parts[1]
    return parts[0], ""


def _is_model(annotation):
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _unwrap(annotation, is_nested=False):
    """Strip Optional and containers, returns `(element_type, is_nested)`.

    A sequence of models is nested, a sequence of anything else maps to its
    element type.
    """
    origin = typing.get_origin(annotation)
    args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]

    if origin in SEQUENCE_TYPES:
        if args and _is_model(args[0]):
            is_nested = True
        return _unwrap(args[0], is_nested) if args else (annotation, is_nested)
    if origin in (typing.Union, types.UnionType) and len(args) == 1:
        return _unwrap(args[0], is_nested)
    return annotation, is_nested


def _infer(annotation):
    element, is_nested = _unwrap(annotation)
    if is_nested:
        return "nested"
    if element is bool:
        return "boolean"
    if element is int:
        return "integer"
    if element is float:
        return "float"
    if element is str:
        return "text"
    if element in (datetime.datetime, datetime.date):
        return "date"
    if _is_model(element) or element is dict or typing.get_origin(element) is dict:
        return "object"
    return None


def datatypes_from_model(
    model, builder=default_builder, nested_limit=DEFAULT_NESTED_LIMIT, nested_count=0
):
    """Return the datatypes of the tagged fields of `model`, in field order.

    `builder(name, nested_count, datatype_name, datatype)` is called with each
    datatype and returns the one to keep, so callers can set options such as
    analyzers. Object and nested fields deeper than `nested_limit` are left
    out.
    """
    if not _is_model(model):
        msg = f"requires a pydantic model class; got {model!r}"
        raise UnsupportedDatatype(msg)

    datatypes = []
    for field_name, field in model.model_fields.items():
        extra = field.json_schema_extra
        tag = extra.get(TAG_NAME) if isinstance(extra, dict) else None
        if not tag or tag == "-":
            continue

        name, datatype_name = _split_tag(tag)
        name = name or field_name
        if not datatype_name:
            datatype_name = _infer(field.annotation)
            if datatype_name is None:
                logger.debug(f"Skipping field '{field_name}', no datatype for {field.annotation}")
                continue
        datatype_name = DATATYPE_ALIASES.get(datatype_name, datatype_name)

        if datatype_name not in DATATYPES:
            msg = f"Undefined datatype '{datatype_name}' for field '{field_name}'"
            raise UnsupportedDatatype(msg)

        datatype = DATATYPES[datatype_name](name)
        if isinstance(datatype, (ObjectDatatype, NestedDatatype)):
            if nested_count >= nested_limit:
                logger.debug(f"Skipping field '{field_name}', nested limit reached")
                continue
            element, _ = _unwrap(field.annotation)
            if _is_model(element):
                datatype.properties(
                    *datatypes_from_model(
                        element, builder, nested_limit, nested_count + 1
                    )
                )

        datatype = builder(name, nested_count, datatype_name, datatype)
        if datatype is not None:
            datatypes.append(datatype)
    return datatypes


def to_properties(datatypes):
    """Render datatypes as the `properties` mapping of an index."""
    return {datatype.name: datatype.source(False) for datatype in datatypes}
