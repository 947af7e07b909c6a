#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Tokenizers, see https://www.elastic.co/guide/en/elasticsearch/reference/current/analysis-tokenizers.html
"""

from estemplate.base import Builder, Joined, Listed, Option

TOKEN_CHARS = ("letter", "digit", "whitespace", "punctuation", "symbol", "custom")


class Tokenizer(Builder):
    pass


class CharGroupTokenizer(Tokenizer):
    TYPE = "char_group"

    tokenize_on_chars = Listed()


class ClassicTokenizer(Tokenizer):
    TYPE = "classic"

    max_token_length = Option()


class EdgeNGramTokenizer(Tokenizer):
    TYPE = "edge_ngram"

    min_gram = Option()
    max_gram = Option()
    token_chars = Listed(choices=TOKEN_CHARS)
    custom_token_chars = Option()


class KeywordTokenizer(Tokenizer):
    TYPE = "keyword"

    buffer_size = Option()


class LetterTokenizer(Tokenizer):
    TYPE = "letter"


class LowercaseTokenizer(Tokenizer):
    TYPE = "lowercase"


class NGramTokenizer(EdgeNGramTokenizer):
    TYPE = "ngram"


class PathHierarchyTokenizer(Tokenizer):
    TYPE = "path_hierarchy"

    delimiter = Option()
    replacement = Option()
    buffer_size = Option()
    reverse = Option()
    skip = Option()


class PatternTokenizer(Tokenizer):
    TYPE = "pattern"

    pattern = Option()
    flags = Joined("|")
    group = Option()


class SimplePatternTokenizer(Tokenizer):
    TYPE = "simple_pattern"

    pattern = Option()


class SimplePatternSplitTokenizer(SimplePatternTokenizer):
    TYPE = "simple_pattern_split"


class StandardTokenizer(ClassicTokenizer):
    TYPE = "standard"


class ThaiTokenizer(Tokenizer):
    TYPE = "thai"


class UAXURLEmailTokenizer(ClassicTokenizer):
    TYPE = "uax_url_email"


class WhitespaceTokenizer(ClassicTokenizer):
    TYPE = "whitespace"


TOKENIZERS = {
    klass.TYPE: klass
    for klass in (
        CharGroupTokenizer,
        ClassicTokenizer,
        EdgeNGramTokenizer,
        KeywordTokenizer,
        LetterTokenizer,
        LowercaseTokenizer,
        NGramTokenizer,
        PathHierarchyTokenizer,
        PatternTokenizer,
        SimplePatternTokenizer,
        SimplePatternSplitTokenizer,
        StandardTokenizer,
        ThaiTokenizer,
        UAXURLEmailTokenizer,
        WhitespaceTokenizer,
    )
}
