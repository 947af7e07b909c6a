#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Character filters, see https://www.elastic.co/guide/en/elasticsearch/reference/current/analysis-charfilters.html
"""

from estemplate.base import Builder, Joined, Listed, Many, Option


class CharFilter(Builder):
    pass


class HTMLStripCharFilter(CharFilter):
    TYPE = "html_strip"

    escaped_tags = Listed()


class MappingCharFilter(CharFilter):
    """Replaces keys with values, e.g. `MappingRule("٠", "0")`.

    `raw_mappings` takes pre-formatted rule strings and overrides `mappings`.
    """

    TYPE = "mapping"

    mappings = Listed()
    raw_mappings = Many(key="mappings")
    mappings_path = Option()


class PatternReplaceCharFilter(CharFilter):
    TYPE = "pattern_replace"

    pattern = Option(required=True)
    replacement = Option()
    flags = Joined("|")


CHAR_FILTERS = {
    klass.TYPE: klass
    for klass in (HTMLStripCharFilter, MappingCharFilter, PatternReplaceCharFilter)
}
