#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
import datetime

import pytest

from estemplate.options import DateFormat
from estemplate.utils import nest, one_or_many, reencode, render


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], None),
        (None, None),
        (["a"], "a"),
        (["a", "b"], ["a", "b"]),
    ],
)
def test_one_or_many(values, expected):
    assert one_or_many(values) == expected


def test_one_or_many_returns_a_copy():
    values = ["a", "b"]

    assert one_or_many(values) is not values


def test_render():
    assert render("epoch_millis") == "epoch_millis"
    assert render(DateFormat("epoch_millis").strict(True)) == "strict_epoch_millis"


def test_reencode():
    assert reencode({"version": (1, 2), "min": 1.0}) == {"version": [1, 2], "min": 1.0}


def test_reencode_rejects_non_json():
    with pytest.raises(TypeError):
        reencode({"at": datetime.datetime.now()})


def test_nest():
    assert nest({}, "render.indent", 4) == {"render": {"indent": 4}}
    assert nest({"render": {"indent": 2, "sort_keys": True}}, "render.indent", 4) == {
        "render": {"indent": 4, "sort_keys": True}
    }
