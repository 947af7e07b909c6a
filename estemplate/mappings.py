#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
from estemplate.base import Builder, Listed, Named, NamedList, Nested, Option
from estemplate.dynamic_template import DynamicTemplate
from estemplate.meta_fields import (
    MetaFieldFieldNames,
    MetaFieldMeta,
    MetaFieldRouting,
    MetaFieldSize,
    MetaFieldSource,
)


class Mappings(Builder):
    """The `mappings` of an index: field datatypes, meta-fields and rules
    applied to dynamically added fields.

    Dynamic templates render as a list, in the order they were added, since
    Elasticsearch applies the first one that matches.
    """

    WRAP = "mappings"

    dynamic_templates = NamedList(builds=DynamicTemplate)
    date_detection = Option()
    dynamic_date_formats = Listed()
    numeric_detection = Option()
    dynamic = Option()
    meta_source = Nested(key="_source", builds=MetaFieldSource)
    size = Nested(key="_size", builds=MetaFieldSize)
    field_names = Nested(key="_field_names", builds=MetaFieldFieldNames)
    routing = Nested(key="_routing", builds=MetaFieldRouting)
    meta = Nested(key="_meta", builds=MetaFieldMeta)
    properties = Named(builds="datatype")

    def validate(self, include_name=True, recursive=True):
        super().validate(include_name, recursive)
