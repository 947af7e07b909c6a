#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
import datetime
from typing import List, Optional

import pytest
from pydantic import BaseModel, Field

from estemplate.datatypes import DateNanosDatatype, TextDatatype
from estemplate.exceptions import UnsupportedDatatype
from estemplate.properties import datatypes_from_model, to_properties


class Author(BaseModel):
    name: str = Field(json_schema_extra={"es": "name,keyword"})
    email: str = ""


class Comment(BaseModel):
    body: str = Field(json_schema_extra={"es": "body"})
    author: Author = Field(json_schema_extra={"es": "author"})


class Post(BaseModel):
    title: str = Field(json_schema_extra={"es": "title,text"})
    slug: str = Field(json_schema_extra={"es": "-"})
    votes: int = Field(json_schema_extra={"es": "votes"})
    score: Optional[float] = Field(None, json_schema_extra={"es": "score"})
    published: datetime.datetime = Field(json_schema_extra={"es": "published"})
    draft: bool = Field(json_schema_extra={"es": "is_draft"})
    tags: List[str] = Field(json_schema_extra={"es": "tags,keyword"})
    author: Author = Field(json_schema_extra={"es": "author"})
    comments: List[Comment] = Field(json_schema_extra={"es": "comments"})
    internal: str = ""


def test_datatypes_from_model():
    assert to_properties(datatypes_from_model(Post)) == {
        "title": {"type": "text"},
        "votes": {"type": "integer"},
        "score": {"type": "float"},
        "published": {"type": "date"},
        "is_draft": {"type": "boolean"},
        "tags": {"type": "keyword"},
        "author": {"type": "object", "properties": {"name": {"type": "keyword"}}},
        "comments": {
            "type": "nested",
            "properties": {
                "body": {"type": "text"},
                "author": {
                    "type": "object",
                    "properties": {"name": {"type": "keyword"}},
                },
            },
        },
    }


def test_field_order_is_kept():
    names = [datatype.name for datatype in datatypes_from_model(Post)]

    assert names == [
        "title",
        "votes",
        "score",
        "published",
        "is_draft",
        "tags",
        "author",
        "comments",
    ]


def test_nested_limit():
    properties = to_properties(datatypes_from_model(Post, nested_limit=1))

    assert properties["comments"] == {
        "type": "nested",
        "properties": {"body": {"type": "text"}},
    }


def test_nested_limit_zero_skips_objects(patch_logger):
    properties = to_properties(datatypes_from_model(Post, nested_limit=0))

    assert "author" not in properties
    assert "comments" not in properties
    patch_logger.assert_present("Skipping field 'author', nested limit reached")


def test_builder_callback():
    def builder(name, nested_count, datatype_name, datatype):
        if name == "votes":
            return None
        if isinstance(datatype, TextDatatype) and nested_count == 0:
            return datatype.analyzer("english")
        return datatype

    properties = to_properties(datatypes_from_model(Post, builder=builder))

    assert "votes" not in properties
    assert properties["title"] == {"type": "text", "analyzer": "english"}
    assert properties["comments"]["properties"]["body"] == {"type": "text"}


def test_date_nanoseconds_alias():
    class Event(BaseModel):
        at: str = Field(json_schema_extra={"es": "at,date_nanoseconds"})

    (datatype,) = datatypes_from_model(Event)

    assert isinstance(datatype, DateNanosDatatype)


def test_field_name_defaults_to_attribute():
    class Event(BaseModel):
        kind: str = Field(json_schema_extra={"es": ",keyword"})

    assert to_properties(datatypes_from_model(Event)) == {"kind": {"type": "keyword"}}


def test_unknown_datatype():
    class Event(BaseModel):
        kind: str = Field(json_schema_extra={"es": "kind,sparkly"})

    with pytest.raises(UnsupportedDatatype):
        datatypes_from_model(Event)


def test_uninferable_type_is_skipped(patch_logger):
    class Event(BaseModel):
        payload: bytes = Field(json_schema_extra={"es": "payload"})

    assert datatypes_from_model(Event) == []
    patch_logger.assert_present("Skipping field 'payload'")


def test_requires_model():
    with pytest.raises(UnsupportedDatatype):
        datatypes_from_model(dict)


@pytest.mark.parametrize(
    "tag, datatype_name",
    [
        ("h,mapper_murmur3", "murmur3"),
        ("h,mapper_annotated_text", "annotated_text"),
        ("h,date_nanoseconds", "date_nanos"),
    ],
)
def test_datatype_aliases(tag, datatype_name):
    class Event(BaseModel):
        h: str = Field(json_schema_extra={"es": tag})

    assert to_properties(datatypes_from_model(Event)) == {"h": {"type": datatype_name}}
