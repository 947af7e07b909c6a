#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Meta-fields, see https://www.elastic.co/guide/en/elasticsearch/reference/current/mapping-fields.html
"""

import json

from estemplate.base import Builder, Listed, Option
from estemplate.exceptions import TemplateError
from estemplate.utils import reencode


class MetaFieldSource(Builder):
    WRAP = "_source"

    enabled = Option()
    includes = Listed()
    excludes = Listed()


class MetaFieldSize(Builder):
    WRAP = "_size"

    enabled = Option()


class MetaFieldFieldNames(Builder):
    WRAP = "_field_names"

    enabled = Option()


class MetaFieldRouting(Builder):
    WRAP = "_routing"

    required = Option()


class MetaFieldMeta(Builder):
    """Application specific metadata stored in the mapping.

    `value` takes any JSON-serializable object. `raw_json` takes an already
    encoded JSON object and, once set, wins over `value` whatever the order
    of the calls.
    """

    WRAP = "_meta"

    value = Option()
    raw_json = Option()

    def _options_source(self):
        raw_json = self._values.get("raw_json")
        try:
            if raw_json:
                meta = json.loads(raw_json)
            elif self._values.get("value") is not None:
                meta = reencode(self._values["value"])
            else:
                return {}
        except (TypeError, ValueError) as e:
            msg = f"_meta is not valid JSON: {e}"
            raise TemplateError(msg) from e
        if not isinstance(meta, dict):
            msg = f"_meta must be a JSON object, got {type(meta).__name__}"
            raise TemplateError(msg)
        return meta

    def _problems(self):
        try:
            self._options_source()
        except TemplateError:
            return ["raw_json" if self._values.get("raw_json") else "value"]
        return []
