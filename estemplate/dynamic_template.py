#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
from estemplate.base import Builder, Nested, Option


class DynamicTemplate(Builder):
    """Maps fields added dynamically, matched by detected type, name or path.

    `DynamicTemplate("strings").match_mapping_type("string").mapping(KeywordDatatype())`
    """

    match_mapping_type = Option()
    match_pattern = Option()
    match = Option()
    unmatch = Option()
    path_match = Option()
    path_unmatch = Option()
    mapping = Nested(builds="datatype")
