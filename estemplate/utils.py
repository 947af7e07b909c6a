#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
import json


def one_or_many(values):
    """Encode a list of values the way Elasticsearch accepts "one or many".

    - no value: None (the key is left out)
    - a single value: the value itself
    - more values: a new list, in the given order
    """
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return list(values)


def render(value):
    """Render a value that may itself be a builder."""
    if hasattr(value, "source"):
        return value.source(False)
    return value


def reencode(value):
    """Round-trip `value` through JSON so only JSON-compatible types remain."""
    return json.loads(json.dumps(value))


def nest(configuration, field, value):
    """Assign `value` at the dotted `field` path, creating dicts on the way.

    E.g. nest({}, "render.indent", 4) returns {"render": {"indent": 4}}
    """
    subfields = field.split(".")

    current_leaf = configuration
    for subfield in subfields[:-1]:
        if subfield not in current_leaf:
            current_leaf[subfield] = {}
        current_leaf = current_leaf[subfield]

    current_leaf[subfields[-1]] = value
    return configuration
