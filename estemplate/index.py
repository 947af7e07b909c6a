#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Index settings, see https://www.elastic.co/guide/en/elasticsearch/reference/current/index-modules.html

`Index` renders the flat, dot separated setting names Elasticsearch
accepts under `settings.index`, together with the `analysis` and
`mappings` sections::

    Index().number_of_shards(1).refresh_interval("30s").source(True)
    # {"index": {"number_of_shards": 1, "refresh_interval": "30s"}}
"""

from estemplate.analysis import Analysis
from estemplate.base import (
    Builder,
    Into,
    Joined,
    Listed,
    Many,
    Named,
    Nested,
    Option,
    Spread,
)
from estemplate.mappings import Mappings

ALLOCATION_TYPES = ("include", "require", "exclude")

SLOWLOG_TYPES = ("search", "indexing")

SLOWLOG_PHASES = ("query", "fetch", "index")

SLOWLOG_LEVELS = ("warn", "info", "debug", "trace")


class RoutingAllocation(Builder):
    """Shard allocation filter, rendered as `allocation.<type>.<attribute>`.

    Nothing is rendered until the type, the attribute and at least one value
    are set.
    """

    WRAP = "routing"

    allocation_type = Option(required=True, choices=ALLOCATION_TYPES)
    attribute = Option(required=True)
    values = Joined(",", required=True)

    def __init__(self, allocation_type=None, attribute=None, *values):
        super().__init__()
        self.allocation_type(allocation_type)
        self.attribute(attribute)
        self.values(*values)

    @classmethod
    def include(cls, attribute, *values):
        return cls("include", attribute, *values)

    @classmethod
    def require(cls, attribute, *values):
        return cls("require", attribute, *values)

    @classmethod
    def exclude(cls, attribute, *values):
        return cls("exclude", attribute, *values)

    def _options_source(self):
        allocation_type = self._values.get("allocation_type")
        attribute = self._values.get("attribute")
        values = self._values.get("values")
        if not (allocation_type and attribute and values):
            return {}
        key = f"allocation.{allocation_type}.{attribute}"
        return {key: type(self).values.encode(values)}


class SlowlogThreshold(Builder):
    """Slowlog threshold, rendered as `slowlog.threshold.<phase>.<level>`
    and wrapped under its slowlog type (`search` or `indexing`).
    """

    slowlog_type = Option(required=True, choices=SLOWLOG_TYPES)
    phase = Option(required=True, choices=SLOWLOG_PHASES)
    level = Option(required=True, choices=SLOWLOG_LEVELS)
    value = Option(required=True)

    def __init__(self, slowlog_type=None, phase=None, level=None, value=None):
        super().__init__()
        self.slowlog_type(slowlog_type)
        self.phase(phase)
        self.level(level)
        self.value(value)

    @classmethod
    def search(cls, phase, level, value):
        return cls("search", phase, level, value)

    @classmethod
    def indexing(cls, phase, level, value):
        return cls("indexing", phase, level, value)

    def _wrap_key(self):
        return self._values.get("slowlog_type")

    def _options_source(self):
        phase = self._values.get("phase")
        level = self._values.get("level")
        value = self._values.get("value")
        if not (phase and level) or value is None:
            return {}
        return {f"slowlog.threshold.{phase}.{level}": value}


class Index(Builder):
    WRAP = "index"

    # static settings
    number_of_shards = Option()
    shard_check_on_startup = Option(key="shard.check_on_startup")
    codec = Option()
    routing_partition_size = Option()
    load_fixed_bitset_filters_eagerly = Option()

    # dynamic settings
    number_of_replicas = Option()
    auto_expand_replicas = Option()
    search_idle_after = Option(key="search.idle.after")
    refresh_interval = Option()
    max_result_window = Option()
    max_inner_result_window = Option()
    max_rescore_window = Option()
    max_docvalue_fields_search = Option()
    max_script_fields = Option()
    max_ngram_diff = Option()
    max_shingle_diff = Option()
    blocks_read_only = Option(key="blocks.read_only")
    blocks_read_only_allow_delete = Option(key="blocks.read_only_allow_delete")
    blocks_read = Option(key="blocks.read")
    blocks_write = Option(key="blocks.write")
    blocks_metadata = Option(key="blocks.metadata")
    max_refresh_listeners = Option()
    analyze_max_token_count = Option(key="analyze.max_token_count")
    highlight_max_analyzed_offset = Option(key="highlight.max_analyzed_offset")
    max_terms_count = Option()
    max_regex_length = Option()
    routing_allocation_enable = Option(key="routing.allocation.enable")
    routing_rebalance_enable = Option(key="routing.rebalance.enable")
    gc_deletes = Option()
    default_pipeline = Option()
    final_pipeline = Option()

    # analysis
    analysis = Nested(builds=Analysis)

    # shard allocation
    routing_allocation = Spread("routing.", builds=RoutingAllocation)
    unassigned_node_left_delayed_timeout = Option(
        key="unassigned.node_left.delayed_timeout"
    )
    priority = Option()
    routing_allocation_total_shards_per_node = Option(
        key="routing.allocation.total_shards_per_node"
    )

    # mapping
    mappings = Nested(builds=Mappings)
    mapping_total_fields_limit = Option(key="mapping.total_fields.limit")
    mapping_depth_limit = Option(key="mapping.depth.limit")
    mapping_nested_fields_limit = Option(key="mapping.nested_fields.limit")
    mapping_nested_objects_limit = Option(key="mapping.nested_objects.limit")
    mapping_field_name_length_limit = Option(key="mapping.field_name_length.limit")

    # merge
    merge_scheduler_max_thread_count = Option(key="merge.scheduler.max_thread_count")

    # similarity
    default_similarity = Into("similarity", "default", builds="similarity")
    similarity = Named(builds="similarity")

    # slowlog
    search_slowlog_threshold = Spread("search.", builds=SlowlogThreshold)
    search_slowlog_level = Option(key="search.slowlog.level")
    indexing_slowlog_threshold = Spread("indexing.", builds=SlowlogThreshold)
    indexing_slowlog_level = Option(key="indexing.slowlog.level")
    indexing_slowlog_source = Option(key="indexing.slowlog.source")
    indexing_slowlog_reformat = Option(key="indexing.slowlog.reformat")

    # store
    store_type = Option(key="store.type")
    store_preload = Listed(key="store.preload")

    # translog
    translog_sync_interval = Option(key="translog.sync_interval")
    translog_durability = Option(key="translog.durability")
    translog_flush_threshold_size = Option(key="translog.flush_threshold_size")
    translog_retention_size = Option(key="translog.retention.size")
    translog_retention_age = Option(key="translog.retention.age")

    # history retention
    soft_deletes_enabled = Option(key="soft_deletes.enabled")
    soft_deletes_retention_lease_period = Option(
        key="soft_deletes.retention_lease.period"
    )

    # index sorting
    sort_field = Many(key="sort.field")
    sort_order = Option(key="sort.order")
    sort_mode = Option(key="sort.mode")
    sort_missing = Option(key="sort.missing")

    # index lifecycle management
    lifecycle_name = Option(key="lifecycle.name")
    lifecycle_rollover_alias = Option(key="lifecycle.rollover_alias")
    lifecycle_parse_origination_date = Option(key="lifecycle.parse_origination_date")
    lifecycle_origination_date = Option(key="lifecycle.origination_date")

    def validate(self, include_name=True, recursive=True):
        super().validate(include_name, recursive)
