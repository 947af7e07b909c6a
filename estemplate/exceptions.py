#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Common exceptions for the estemplate package.
"""


class TemplateError(Exception):
    """Base class for errors raised while building or loading a template."""

    pass


class ValidationError(TemplateError):
    """Raised by `validate()` with every offending field collected at once."""

    def __init__(self, invalid):
        self.invalid = list(invalid)
        super().__init__(f"missing required fields or invalid values: {self.invalid}")


class UnknownBuilderType(TemplateError):
    def __init__(self, family, type_name):
        self.family = family
        self.type_name = type_name
        super().__init__(f"Unknown {family} type: {type_name!r}")


class UnsupportedDatatype(TemplateError):
    pass
