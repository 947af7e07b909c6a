#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
from estemplate.base import Builder, Listed


class Normalizer(Builder):
    pass


class CustomNormalizer(Normalizer):
    """Like a custom analyzer, without a tokenizer. Used by keyword fields."""

    TYPE = "custom"

    char_filter = Listed()
    filter = Listed()  # noqa: A003


NORMALIZERS = {CustomNormalizer.TYPE: CustomNormalizer}
