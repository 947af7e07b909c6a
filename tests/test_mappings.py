#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
import pytest

from estemplate.datatypes import KeywordDatatype, TextDatatype
from estemplate.dynamic_template import DynamicTemplate
from estemplate.exceptions import TemplateError, ValidationError
from estemplate.mappings import Mappings
from estemplate.meta_fields import (
    MetaFieldFieldNames,
    MetaFieldMeta,
    MetaFieldRouting,
    MetaFieldSize,
    MetaFieldSource,
)


def test_meta_field_source():
    source = MetaFieldSource().enabled(True).excludes("secret")

    assert source.source(True) == {"_source": {"enabled": True, "excludes": ["secret"]}}


def test_meta_fields_wrap():
    assert MetaFieldSize().enabled(True).source(True) == {"_size": {"enabled": True}}
    assert MetaFieldFieldNames().enabled(False).source(True) == {
        "_field_names": {"enabled": False}
    }
    assert MetaFieldRouting().required(True).source(True) == {
        "_routing": {"required": True}
    }


def test_meta_field_meta():
    meta = MetaFieldMeta().value(
        {"class": "MyApp::User", "version": {"min": "1.0", "max": "1.3"}}
    )

    assert meta.source(True) == {
        "_meta": {"class": "MyApp::User", "version": {"max": "1.3", "min": "1.0"}}
    }


def test_meta_field_meta_raw_json_wins():
    meta = MetaFieldMeta().raw_json('{"owner": "search"}').value({"owner": "ops"})

    assert meta.source() == {"owner": "search"}


def test_meta_field_meta_empty():
    assert MetaFieldMeta().source() == {}


@pytest.mark.parametrize("raw_json", ["[1, 2]", '"text"'])
def test_meta_field_meta_requires_object(raw_json):
    with pytest.raises(TemplateError):
        MetaFieldMeta().raw_json(raw_json).source()


def test_dynamic_template():
    template = (
        DynamicTemplate("strings")
        .match_mapping_type("string")
        .mapping(KeywordDatatype().ignore_above(256))
    )

    assert template.source(True) == {
        "strings": {
            "match_mapping_type": "string",
            "mapping": {"type": "keyword", "ignore_above": 256},
        }
    }


def test_mappings():
    mappings = (
        Mappings()
        .dynamic_templates(
            DynamicTemplate("longs").match_mapping_type("long").mapping(
                KeywordDatatype()
            ),
            DynamicTemplate("texts").match("*_text").mapping(TextDatatype()),
        )
        .date_detection(False)
        .dynamic_date_formats("yyyy/MM")
        .meta_source(MetaFieldSource().enabled(False))
        .meta(MetaFieldMeta().value({"version": 1}))
        .properties(TextDatatype("title"))
    )

    assert mappings.source(True) == {
        "mappings": {
            "dynamic_templates": [
                {
                    "longs": {
                        "match_mapping_type": "long",
                        "mapping": {"type": "keyword"},
                    }
                },
                {"texts": {"match": "*_text", "mapping": {"type": "text"}}},
            ],
            "date_detection": False,
            "dynamic_date_formats": ["yyyy/MM"],
            "_source": {"enabled": False},
            "_meta": {"version": 1},
            "properties": {"title": {"type": "text"}},
        }
    }


def test_empty_mappings():
    assert Mappings().source(True) == {"mappings": {}}


def test_mappings_validate_properties():
    mappings = Mappings().properties(
        TextDatatype("title"), KeywordDatatype("tag").index_options("all")
    )

    with pytest.raises(ValidationError) as e:
        mappings.validate()

    assert e.value.invalid == ["properties.tag.index_options"]


def test_meta_field_meta_not_json():
    with pytest.raises(TemplateError) as e:
        MetaFieldMeta().value({"at": object()}).source()

    assert e.match("_meta is not valid JSON")


@pytest.mark.parametrize(
    "meta, invalid",
    [
        (MetaFieldMeta().value([1, 2]), ["_meta.value"]),
        (MetaFieldMeta().raw_json("{not json"), ["_meta.raw_json"]),
    ],
)
def test_mappings_validate_meta(meta, invalid):
    with pytest.raises(ValidationError) as e:
        Mappings().meta(meta).validate()

    assert e.value.invalid == invalid
