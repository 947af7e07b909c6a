#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Rule strings of the `a, b => c` form used by the mapping character filter,
the synonym token filter and the stemmer override token filter.
"""

from estemplate.base import Builder, Many, Option


def _values(value):
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class MappingRule(Builder):
    """Renders `"k1, k2 => v1, v2"`, or only the side that was set."""

    key = Many()
    value = Many()

    def __init__(self, key=None, value=None):
        super().__init__()
        self.key(*_values(key))
        self.value(*_values(value))

    def source(self, include_name=False):
        key = ", ".join(self._values.get("key", []))
        value = ", ".join(self._values.get("value", []))
        if key and value:
            return f"{key} => {value}"
        return key or value or None


class StemmerMappingRule(Builder):
    """Renders `"from => to"` for the stemmer override token filter."""

    from_ = Option()
    to = Option()

    def __init__(self, from_=None, to=None):
        super().__init__()
        self.from_(from_)
        self.to(to)

    def source(self, include_name=False):
        return f"{self._values.get('from_')} => {self._values.get('to')}"
