#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
import pytest

from estemplate.analysis import Analysis
from estemplate.analyzers import CustomAnalyzer
from estemplate.datatypes import TextDatatype
from estemplate.exceptions import ValidationError
from estemplate.index import Index, RoutingAllocation, SlowlogThreshold
from estemplate.mappings import Mappings
from estemplate.similarity import BM25Similarity, DFISimilarity


def test_routing_allocation():
    allocation = RoutingAllocation.require("_id", "id_1", "id_2")

    assert allocation.source(True) == {
        "routing": {"allocation.require._id": "id_1,id_2"}
    }


def test_routing_allocation_incomplete():
    assert RoutingAllocation("include", "_ip").source() == {}

    with pytest.raises(ValidationError) as e:
        RoutingAllocation("include", "_ip").validate()
    assert e.value.invalid == ["values"]


def test_routing_allocation_type():
    with pytest.raises(ValidationError) as e:
        RoutingAllocation("prefer", "_ip", "10.0.0.1").validate()

    assert e.value.invalid == ["allocation_type"]


def test_slowlog_threshold():
    threshold = SlowlogThreshold.search("query", "warn", "5s")

    assert threshold.source(True) == {
        "search": {"slowlog.threshold.query.warn": "5s"}
    }


def test_slowlog_threshold_validation():
    with pytest.raises(ValidationError) as e:
        SlowlogThreshold.indexing("index", "loud", "1s").validate()

    assert e.value.invalid == ["level"]


def test_index_settings():
    index = (
        Index()
        .number_of_shards(1)
        .number_of_replicas(0)
        .refresh_interval("30s")
        .blocks_read_only(True)
        .routing_allocation(
            RoutingAllocation.require("_id", "id_1", "id_2"),
            RoutingAllocation.exclude("_ip", "10.0.0.1"),
        )
        .search_slowlog_threshold(
            SlowlogThreshold.search("query", "warn", "5s"),
            SlowlogThreshold.search("fetch", "info", "800ms"),
        )
        .indexing_slowlog_threshold(SlowlogThreshold.indexing("index", "debug", "2s"))
        .store_preload("nvd")
    )

    assert index.source(True) == {
        "index": {
            "number_of_shards": 1,
            "number_of_replicas": 0,
            "refresh_interval": "30s",
            "blocks.read_only": True,
            "routing.allocation.require._id": "id_1,id_2",
            "routing.allocation.exclude._ip": "10.0.0.1",
            "search.slowlog.threshold.query.warn": "5s",
            "search.slowlog.threshold.fetch.info": "800ms",
            "indexing.slowlog.threshold.index.debug": "2s",
            "store.preload": ["nvd"],
        }
    }


@pytest.mark.parametrize(
    "fields, expected",
    [
        (("date",), "date"),
        (("date", "username"), ["date", "username"]),
    ],
)
def test_index_sort_field(fields, expected):
    assert Index().sort_field(*fields).source()["sort.field"] == expected


def test_index_similarity():
    index = (
        Index()
        .default_similarity(BM25Similarity().b(0.5))
        .similarity(DFISimilarity("dfi").independence_measure("chisquared"))
    )

    assert index.source() == {
        "similarity": {
            "default": {"type": "BM25", "b": 0.5},
            "dfi": {"type": "DFI", "independence_measure": "chisquared"},
        }
    }


def test_index_analysis_and_mappings():
    index = (
        Index()
        .analysis(Analysis().analyzer(CustomAnalyzer("folded", "standard")))
        .mappings(Mappings().properties(TextDatatype("title").analyzer("folded")))
    )

    assert index.source(True) == {
        "index": {
            "analysis": {
                "analyzer": {"folded": {"type": "custom", "tokenizer": "standard"}}
            },
            "mappings": {
                "properties": {"title": {"type": "text", "analyzer": "folded"}}
            },
        }
    }


def test_empty_index():
    assert Index().source(True) == {"index": {}}


def test_index_validates_recursively():
    index = Index().analysis(
        Analysis().analyzer(CustomAnalyzer("folded"))
    ).routing_allocation(RoutingAllocation("include", "_ip"))

    with pytest.raises(ValidationError) as e:
        index.validate()

    assert sorted(e.value.invalid) == [
        "analysis.analyzer.folded.tokenizer",
        "routing.values",
    ]


def test_routing_allocation_numeric_values():
    allocation = RoutingAllocation.require("rack_id", 1, 2)

    assert allocation.source() == {"allocation.require.rack_id": "1,2"}


def test_slowlog_threshold_zero():
    threshold = SlowlogThreshold.search("query", "trace", 0)

    threshold.validate()
    assert threshold.source() == {"slowlog.threshold.query.trace": 0}
