#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Values embedded in datatype definitions.
"""

from estemplate.base import Builder, Many, Option, Positive
from estemplate.utils import one_or_many

INDEX_PREFIXES_MAX_CHARS = 20


class DateFormat(Builder):
    """A date format, `strict_` prefixed when strict.

    Several formats given to a date field are joined with `||`.
    """

    format = Option(required=True)  # noqa: A003
    strict = Option()

    def __init__(self, fmt=None):
        super().__init__()
        self.format(fmt)

    def source(self, include_name=False):
        fmt = self._values.get("format")
        if self._values.get("strict"):
            return f"strict_{fmt}"
        return fmt


class Relation(Builder):
    """A parent/children relation of the join datatype.

    >>> Relation("question", "answer", "comment").source()
    {'question': ['answer', 'comment']}
    """

    WRAP = "relations"

    parent = Option(required=True)
    children = Many()

    def __init__(self, parent=None, *children):
        super().__init__()
        self.parent(parent)
        self.children(*children)

    def _options_source(self):
        children = one_or_many(self._values.get("children", []))
        if children is None:
            return {}
        return {self._values.get("parent"): children}


class FielddataFrequencyFilter(Builder):
    WRAP = "fielddata_frequency_filter"

    min = Positive()  # noqa: A003
    max = Positive()  # noqa: A003
    min_segment_size = Positive()

    def __init__(self, min=None, max=None):  # noqa: A002
        super().__init__()
        self.min(min)
        self.max(max)


class IndexPrefixes(Builder):
    WRAP = "index_prefixes"

    min_chars = Positive()
    max_chars = Positive()

    def __init__(self, min_chars=None, max_chars=None):
        super().__init__()
        self.min_chars(min_chars)
        self.max_chars(max_chars)

    def _problems(self):
        invalid = []
        min_chars = self._values.get("min_chars")
        max_chars = self._values.get("max_chars")
        if min_chars is None or min_chars <= 0:
            invalid.append("min_chars")
        if max_chars is not None and max_chars > INDEX_PREFIXES_MAX_CHARS:
            invalid.append("max_chars")
        return invalid
