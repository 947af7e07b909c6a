#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
from estemplate.base import Builder, Option

SCRIPT_LANGUAGES = ("painless", "expression", "mustache", "java")


class Params(Option):
    """Script parameters, set one key at a time."""

    def store(self, instance, key, value):
        instance._values.setdefault(self.attr, {})[key] = value

    def is_set(self, instance):
        return bool(self.get(instance))

    def encode(self, value):
        return dict(value)


class Script(Builder):
    """A stored or inline script, e.g. for the condition token filter.

    `Script("doc['x'].value > 1").lang("painless").params("factor", 2)`
    """

    WRAP = "script"

    lang = Option(choices=SCRIPT_LANGUAGES)
    script_source = Option(key="source")
    id = Option()  # noqa: A003
    params = Params()

    def __init__(self, source=None):
        super().__init__()
        self.script_source(source)

    def raw_params(self, params):
        """Replace every parameter set so far."""
        self._values["params"] = dict(params)
        return self

    def _problems(self):
        if self._values.get("script_source") is None and self._values.get("id") is None:
            return ["source || id"]
        return []
