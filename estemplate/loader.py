#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Builds template builders out of plain dicts, e.g. parsed from YAML.

The expected shapes are the ones the builders render, so a document such as::

    index:
      number_of_shards: 1
      analysis:
        analyzer:
          folded:
            type: custom
            tokenizer: standard
            filter: [lowercase, asciifolding]
      mappings:
        properties:
          title:
            type: text
            analyzer: folded

is loaded into an `Index` which renders it back.
"""

import re

import yaml

from estemplate.analysis import Analysis
from estemplate.analyzers import ANALYZERS
from estemplate.base import Into, Many, Named, NamedList, Nested, Spread
from estemplate.char_filters import CHAR_FILTERS
from estemplate.datatypes import DATATYPES
from estemplate.exceptions import TemplateError, UnknownBuilderType
from estemplate.index import Index, RoutingAllocation, SlowlogThreshold
from estemplate.logger import logger
from estemplate.mappings import Mappings
from estemplate.meta_fields import MetaFieldMeta
from estemplate.normalizers import NORMALIZERS
from estemplate.options import Relation
from estemplate.script import Params
from estemplate.similarity import SIMILARITIES
from estemplate.token_filters import PHONETIC_TOKEN_FILTERS, TOKEN_FILTERS
from estemplate.tokenizers import TOKENIZERS

FAMILIES = {
    "analyzer": ANALYZERS,
    "tokenizer": TOKENIZERS,
    "filter": TOKEN_FILTERS,
    "char_filter": CHAR_FILTERS,
    "normalizer": NORMALIZERS,
    "datatype": DATATYPES,
    "similarity": SIMILARITIES,
}

ROUTING_ALLOCATION_RE = re.compile(
    r"^routing\.allocation\.(include|require|exclude)\.(.+)$"
)

SLOWLOG_THRESHOLD_RE = re.compile(
    r"^(search|indexing)\.slowlog\.threshold\.(\w+)\.(\w+)$"
)


def _as_list(value):
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _pick_class(family, type_name, definition):
    if family not in FAMILIES:
        raise UnknownBuilderType("builder family", family)

    if family == "datatype" and type_name is None and "properties" in definition:
        # Elasticsearch defaults fields with sub-properties to objects
        type_name = "object"

    klass = FAMILIES[family].get(type_name)
    if family == "filter" and type_name == "phonetic":
        klass = PHONETIC_TOKEN_FILTERS.get(definition.get("encoder"), klass)

    if klass is None:
        raise UnknownBuilderType(family, type_name)
    return klass


def build(family, name, definition):
    """Build the builder of the given family from its rendered form."""
    definition = dict(definition)
    type_name = definition.pop("type", None)
    klass = _pick_class(family, type_name, definition)
    if getattr(klass, "ENCODER", None) is not None:
        definition.pop("encoder", None)

    logger.debug(f"Building {family} '{name}' as {klass.__name__}")
    return apply(klass(name), definition)


def _build_child(builds, name, definition):
    if isinstance(builds, str):
        return build(builds, name, definition)
    if builds is MetaFieldMeta:
        return MetaFieldMeta().value(definition)
    child = builds(name) if name is not None else builds()
    return apply(child, definition)


def apply(builder, definition):
    """Set every key of `definition` on `builder` through its setters."""
    for key, value in definition.items():
        option = builder.option(key)
        if option is None:
            msg = f"Unknown option '{key}' for {builder.__class__.__name__}"
            raise TemplateError(msg)
        _apply_option(builder, option, value)
    return builder


def _apply_option(builder, option, value):
    setter = getattr(builder, option.attr)

    if isinstance(option, Named) and option.merge:
        # join relations, {parent: child or [children]}
        setter(
            *(
                Relation(parent, *_as_list(children))
                for parent, children in value.items()
            )
        )
    elif isinstance(option, Named):
        setter(
            *(
                _build_child(option.builds, name, definition)
                for name, definition in value.items()
            )
        )
    elif isinstance(option, NamedList):
        setter(
            *(
                _build_child(option.builds, name, definition)
                for item in value
                for name, definition in item.items()
            )
        )
    elif isinstance(option, Into):
        setter(_build_child(option.builds, option.entry, value))
    elif isinstance(option, Nested):
        setter(_build_child(option.builds, None, value))
    elif isinstance(option, Params):
        builder.raw_params(value)
    elif isinstance(option, Many):
        setter(*_as_list(value))
    else:
        setter(value)


def load_analysis(definition):
    return apply(Analysis(), definition)


def load_mappings(definition):
    return apply(Mappings(), definition)


def _flatten(prefix, value):
    for key, item in value.items():
        if isinstance(item, dict):
            yield from _flatten(f"{prefix}{key}.", item)
        else:
            yield f"{prefix}{key}", item


def _load_flat_setting(index, key, value):
    option = index.option(key)
    if option is not None and not isinstance(option, Spread):
        _apply_option(index, option, value)
        return

    match = ROUTING_ALLOCATION_RE.match(key)
    if match:
        allocation_type, attribute = match.groups()
        index.routing_allocation(
            RoutingAllocation(allocation_type, attribute, *str(value).split(","))
        )
        return

    match = SLOWLOG_THRESHOLD_RE.match(key)
    if match:
        slowlog_type, phase, level = match.groups()
        threshold = SlowlogThreshold(slowlog_type, phase, level, value)
        if slowlog_type == "search":
            index.search_slowlog_threshold(threshold)
        else:
            index.indexing_slowlog_threshold(threshold)
        return

    msg = f"Unknown index setting '{key}'"
    raise TemplateError(msg)


def load_index(definition):
    """Build an `Index` from its settings.

    Settings may be given flat, e.g. `routing.allocation.require._id`, or
    nested under `routing`, `search` and `indexing`.
    """
    index = Index()
    for key, value in definition.items():
        option = index.option(key)
        if isinstance(option, Spread) and isinstance(value, dict):
            for flat_key, item in _flatten(option.prefix, value):
                _load_flat_setting(index, flat_key, item)
        else:
            _load_flat_setting(index, key, value)
    return index


def load_template(path):
    """Read a YAML template file into an `Index`.

    The settings may be wrapped under a top level `index` key.
    """
    logger.info(f"Loading template from {path}")
    with open(path) as f:
        document = yaml.safe_load(f) or {}

    if not isinstance(document, dict):
        msg = f"{path} must hold a mapping, got {type(document).__name__}"
        raise TemplateError(msg)

    if list(document.keys()) == ["index"]:
        document = document["index"] or {}
    return load_index(document)
