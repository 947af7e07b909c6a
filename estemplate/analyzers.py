#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Analyzers, see https://www.elastic.co/guide/en/elasticsearch/reference/current/analysis-analyzers.html
"""

from estemplate.base import Builder, Joined, Listed, Many, Option


class Analyzer(Builder):
    pass


class CustomAnalyzer(Analyzer):
    """A tokenizer plus optional character filters and token filters.

    `CustomAnalyzer("folded", "standard").filter("lowercase", "asciifolding")`
    """

    TYPE = "custom"

    tokenizer = Option(required=True)
    char_filter = Listed()
    filter = Listed()  # noqa: A003
    position_increment_gap = Option()

    def __init__(self, name=None, tokenizer=None):
        super().__init__(name)
        self.tokenizer(tokenizer)


class FingerprintAnalyzer(Analyzer):
    TYPE = "fingerprint"

    separator = Option()
    max_output_size = Option()
    stopwords = Many()
    stopwords_path = Option()


class KeywordAnalyzer(Analyzer):
    TYPE = "keyword"


class PatternAnalyzer(Analyzer):
    TYPE = "pattern"

    pattern = Option()
    flags = Joined("|")
    lowercase = Option()
    stopwords = Many()
    stopwords_path = Option()


class SimpleAnalyzer(Analyzer):
    TYPE = "simple"


class StandardAnalyzer(Analyzer):
    TYPE = "standard"

    max_token_length = Option()
    stopwords = Many()
    stopwords_path = Option()


class StopAnalyzer(Analyzer):
    TYPE = "stop"

    stopwords = Many()
    stopwords_path = Option()


class WhitespaceAnalyzer(Analyzer):
    TYPE = "whitespace"


ANALYZERS = {
    klass.TYPE: klass
    for klass in (
        CustomAnalyzer,
        FingerprintAnalyzer,
        KeywordAnalyzer,
        PatternAnalyzer,
        SimpleAnalyzer,
        StandardAnalyzer,
        StopAnalyzer,
        WhitespaceAnalyzer,
    )
}
