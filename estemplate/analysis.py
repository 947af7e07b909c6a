#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
from estemplate.base import Builder, Into, Named


class Analysis(Builder):
    """The `analysis` section of the index settings.

    Each section is keyed by the name of its members and only rendered when
    something was added to it. The default analyzer lands under
    `analyzer.default`.
    """

    WRAP = "analysis"

    default_analyzer = Into("analyzer", "default", builds="analyzer")
    analyzer = Named(builds="analyzer")
    tokenizer = Named(builds="tokenizer")
    normalizer = Named(builds="normalizer")
    filter = Named(builds="filter")  # noqa: A003
    char_filter = Named(builds="char_filter")

    def validate(self, include_name=True, recursive=True):
        super().validate(include_name, recursive)
