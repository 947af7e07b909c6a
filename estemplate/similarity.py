#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Similarity models, see https://www.elastic.co/guide/en/elasticsearch/reference/current/index-modules-similarity.html
"""

from estemplate.base import Builder, Nested, Option
from estemplate.script import Script

INDEPENDENCE_MEASURES = ("standardized", "saturated", "chisquared")

DFR_BASIC_MODELS = ("g", "if", "in", "ine")

DFR_AFTER_EFFECTS = ("b", "l", "no")

NORMALIZATIONS = ("no", "h1", "h2", "h3", "z")

IB_DISTRIBUTIONS = ("ll", "spl")

IB_LAMBDAS = ("df", "ttf")


class Similarity(Builder):
    pass


class BM25Similarity(Similarity):
    TYPE = "BM25"

    k1 = Option()
    b = Option()
    discount_overlaps = Option()


class DFISimilarity(Similarity):
    TYPE = "DFI"

    independence_measure = Option(choices=INDEPENDENCE_MEASURES)


class DFRSimilarity(Similarity):
    TYPE = "DFR"

    basic_model = Option(choices=DFR_BASIC_MODELS)
    after_effect = Option(choices=DFR_AFTER_EFFECTS)
    normalization = Option(choices=NORMALIZATIONS)


class IBSimilarity(Similarity):
    TYPE = "IB"

    distribution = Option(choices=IB_DISTRIBUTIONS)
    lambda_ = Option(choices=IB_LAMBDAS)
    normalization = Option(choices=NORMALIZATIONS)


class LMDirichletSimilarity(Similarity):
    TYPE = "LMDirichlet"

    mu = Option()


class LMJelinekMercerSimilarity(Similarity):
    TYPE = "LMJelinekMercer"

    lambda_ = Option()


class ScriptedSimilarity(Similarity):
    TYPE = "scripted"

    weight_script = Nested(builds=Script)
    script = Nested(builds=Script)


SIMILARITIES = {
    klass.TYPE: klass
    for klass in (
        BM25Similarity,
        DFISimilarity,
        DFRSimilarity,
        IBSimilarity,
        LMDirichletSimilarity,
        LMJelinekMercerSimilarity,
        ScriptedSimilarity,
    )
}
