#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Field datatypes, see https://www.elastic.co/guide/en/elasticsearch/reference/current/mapping-types.html

A datatype is named after the field it maps::

    TextDatatype("title").analyzer("english").fields(KeywordDatatype("raw"))

renders, with `include_name=True`::

    {"title": {"type": "text", "analyzer": "english",
               "fields": {"raw": {"type": "keyword"}}}}
"""

from estemplate.base import Builder, Constant, Joined, Many, Named, Nested, Option
from estemplate.options import FielddataFrequencyFilter, IndexPrefixes

INDEX_OPTIONS = ("docs", "freqs", "positions", "offsets")

TERM_VECTORS = (
    "no",
    "yes",
    "with_positions",
    "with_offsets",
    "with_positions_offsets",
    "with_positions_payloads",
    "with_positions_offsets_payloads",
)


class Datatype(Builder):
    copy_to = Many()


class _Indexed(Datatype):
    boost = Option()
    doc_values = Option()
    index = Option()
    null_value = Option()
    store = Option()


# -- core


class AliasDatatype(Datatype):
    TYPE = "alias"

    path = Option()


class BinaryDatatype(Datatype):
    TYPE = "binary"

    doc_values = Option()
    store = Option()


class BooleanDatatype(_Indexed):
    TYPE = "boolean"


class DateDatatype(_Indexed):
    """`format` joins `DateFormat`s with `||`, `raw_format` overrides it."""

    TYPE = "date"

    format = Joined("||")  # noqa: A003
    raw_format = Option(key="format")
    locale = Option()
    ignore_malformed = Option()


class DateNanosDatatype(DateDatatype):
    TYPE = "date_nanos"


class IPDatatype(_Indexed):
    TYPE = "ip"


class KeywordDatatype(_Indexed):
    TYPE = "keyword"

    eager_global_ordinals = Option()
    fields = Named(builds="datatype")
    ignore_above = Option()
    index_options = Option(choices=INDEX_OPTIONS)
    norms = Option()
    similarity = Option()
    normalizer = Option()
    split_queries_on_whitespace = Option()


class TextDatatype(Datatype):
    TYPE = "text"

    analyzer = Option()
    boost = Option()
    eager_global_ordinals = Option()
    fielddata = Option()
    fielddata_frequency_filter = Nested(builds=FielddataFrequencyFilter)
    fields = Named(builds="datatype")
    index = Option()
    index_options = Option(choices=INDEX_OPTIONS)
    index_prefixes = Nested(builds=IndexPrefixes)
    index_phrases = Option()
    norms = Option()
    position_increment_gap = Option()
    store = Option()
    search_analyzer = Option()
    search_quote_analyzer = Option()
    similarity = Option()
    term_vector = Option(choices=TERM_VECTORS)

    def _problems(self):
        if (
            self._values.get("fielddata_frequency_filter") is not None
            and self._values.get("fielddata") is True
        ):
            return ["fielddata_frequency_filter"]
        return []


# -- numeric


class _Numeric(_Indexed):
    coerce = Option()
    ignore_malformed = Option()


class LongDatatype(_Numeric):
    TYPE = "long"


class IntegerDatatype(_Numeric):
    TYPE = "integer"


class ShortDatatype(_Numeric):
    TYPE = "short"


class ByteDatatype(_Numeric):
    TYPE = "byte"


class DoubleDatatype(_Numeric):
    TYPE = "double"


class FloatDatatype(_Numeric):
    TYPE = "float"


class HalfFloatDatatype(_Numeric):
    TYPE = "half_float"


class ScaledFloatDatatype(_Numeric):
    TYPE = "scaled_float"

    scaling_factor = Option()


# -- range


class _Range(Datatype):
    coerce = Option()
    boost = Option()
    index = Option()
    store = Option()


class IntegerRangeDatatype(_Range):
    TYPE = "integer_range"


class FloatRangeDatatype(_Range):
    TYPE = "float_range"


class LongRangeDatatype(_Range):
    TYPE = "long_range"


class DoubleRangeDatatype(_Range):
    TYPE = "double_range"


class DateRangeDatatype(_Range):
    TYPE = "date_range"


class IPRangeDatatype(_Range):
    TYPE = "ip_range"


# -- complex


class ObjectDatatype(Datatype):
    """`strict(True)` renders `dynamic: "strict"` over `dynamic(bool)`."""

    TYPE = "object"

    copy_to = None
    dynamic = Option()
    strict = Constant("strict", key="dynamic")
    enabled = Option()
    properties = Named(builds="datatype")


class NestedDatatype(Datatype):
    TYPE = "nested"

    dynamic = Option()
    strict = Constant("strict", key="dynamic")
    properties = Named(builds="datatype")


class FlattenedDatatype(Datatype):
    TYPE = "flattened"

    boost = Option()
    depth_limit = Option()
    doc_values = Option()
    eager_global_ordinals = Option()
    ignore_above = Option()
    index = Option()
    index_options = Option(choices=INDEX_OPTIONS)
    null_value = Option()
    similarity = Option()
    split_queries_on_whitespace = Option()


class JoinDatatype(Datatype):
    """Parent/child relations, see `estemplate.options.Relation`."""

    TYPE = "join"

    relations = Named(merge=True)
    eager_global_ordinals = Option()


# -- geo


class GeoPointDatatype(Datatype):
    TYPE = "geo_point"

    ignore_malformed = Option()
    ignore_z_value = Option()
    # any geo point representation: object, string, geohash or array
    null_value = Option()


class GeoShapeDatatype(Datatype):
    TYPE = "geo_shape"

    tree = Option()
    precision = Option()
    tree_levels = Option()
    strategy = Option()
    distance_error_pct = Option()
    orientation = Option()
    points_only = Option()
    ignore_malformed = Option()
    ignore_z_value = Option()
    coerce = Option()


class ShapeDatatype(Datatype):
    TYPE = "shape"

    orientation = Option()
    ignore_malformed = Option()
    ignore_z_value = Option()
    coerce = Option()


# -- specialised


class AnnotatedTextDatatype(Datatype):
    TYPE = "annotated_text"


class CompletionDatatype(Datatype):
    TYPE = "completion"

    analyzer = Option()
    search_analyzer = Option()
    preserve_separators = Option()
    preserve_position_increments = Option()
    max_input_length = Option()


class DenseVectorDatatype(Datatype):
    TYPE = "dense_vector"

    dims = Option()


class Murmur3Datatype(Datatype):
    TYPE = "murmur3"


class PercolatorDatatype(Datatype):
    TYPE = "percolator"


class RankFeatureDatatype(Datatype):
    TYPE = "rank_feature"

    positive_score_impact = Option()


class RankFeaturesDatatype(Datatype):
    TYPE = "rank_features"


class SearchAsYouTypeDatatype(Datatype):
    TYPE = "search_as_you_type"

    max_shingle_size = Option()
    analyzer = Option()
    index = Option()
    index_options = Option(choices=INDEX_OPTIONS)
    norms = Option()
    store = Option()
    search_analyzer = Option()
    search_quote_analyzer = Option()
    similarity = Option()
    term_vector = Option(choices=TERM_VECTORS)

    def _problems(self):
        size = self._values.get("max_shingle_size")
        if size is not None and not 2 <= size <= 4:
            return ["max_shingle_size"]
        return []


class SparseVectorDatatype(Datatype):
    TYPE = "sparse_vector"


class TokenCountDatatype(_Indexed):
    TYPE = "token_count"

    analyzer = Option()
    enable_position_increments = Option()


DATATYPES = {
    klass.TYPE: klass
    for klass in (
        AliasDatatype,
        AnnotatedTextDatatype,
        BinaryDatatype,
        BooleanDatatype,
        ByteDatatype,
        CompletionDatatype,
        DateDatatype,
        DateNanosDatatype,
        DateRangeDatatype,
        DenseVectorDatatype,
        DoubleDatatype,
        DoubleRangeDatatype,
        FlattenedDatatype,
        FloatDatatype,
        FloatRangeDatatype,
        GeoPointDatatype,
        GeoShapeDatatype,
        HalfFloatDatatype,
        IntegerDatatype,
        IntegerRangeDatatype,
        IPDatatype,
        IPRangeDatatype,
        JoinDatatype,
        KeywordDatatype,
        LongDatatype,
        LongRangeDatatype,
        Murmur3Datatype,
        NestedDatatype,
        ObjectDatatype,
        PercolatorDatatype,
        RankFeatureDatatype,
        RankFeaturesDatatype,
        ScaledFloatDatatype,
        SearchAsYouTypeDatatype,
        ShapeDatatype,
        ShortDatatype,
        SparseVectorDatatype,
        TextDatatype,
        TokenCountDatatype,
    )
}
