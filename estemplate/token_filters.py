#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
"""
Token filters, see https://www.elastic.co/guide/en/elasticsearch/reference/current/analysis-tokenfilters.html

Every filter renders its `"type"` first, then the options that were set::

    >>> StopTokenFilter("english_stop").stopwords("_english_").source(True)
    {'english_stop': {'type': 'stop', 'stopwords': '_english_'}}
"""

from estemplate.base import Builder, Listed, Many, Nested, Option
from estemplate.script import Script

CJK_SCRIPTS = ("han", "hangul", "hiragana", "katakana")

PAYLOAD_ENCODINGS = ("float", "identity", "int")

EDGE_NGRAM_SIDES = ("front", "back")

KEEP_TYPES_MODES = ("include", "exclude")

LOWERCASE_LANGUAGES = ("greek", "irish", "turkish")

PHONETIC_ENCODERS = (
    "metaphone",
    "double_metaphone",
    "soundex",
    "refined_soundex",
    "caverphone1",
    "caverphone2",
    "cologne",
    "nysiis",
    "koelnerphonetik",
    "haasephonetik",
    "beider_morse",
    "daitch_mokotoff",
)

BEIDER_MORSE_RULE_TYPES = ("exact", "approx")

BEIDER_MORSE_NAME_TYPES = ("ashkenazi", "sephardic", "generic")

BEIDER_MORSE_LANGUAGES = (
    "any",
    "common",
    "cyrillic",
    "english",
    "french",
    "german",
    "hebrew",
    "hungarian",
    "polish",
    "romanian",
    "russian",
    "spanish",
)

STEMMER_LANGUAGES = (
    "arabic",
    "armenian",
    "basque",
    "bengali",
    "light_bengali",
    "brazilian",
    "bulgarian",
    "catalan",
    "czech",
    "danish",
    "dutch",
    "dutch_kp",
    "english",
    "light_english",
    "minimal_english",
    "possessive_english",
    "porter2",
    "lovins",
    "finnish",
    "light_finnish",
    "french",
    "light_french",
    "minimal_french",
    "galician",
    "minimal_galician",
    "german",
    "german2",
    "light_german",
    "minimal_german",
    "greek",
    "hindi",
    "hungarian",
    "light_hungarian",
    "indonesian",
    "irish",
    "italian",
    "light_italian",
    "sorani",
    "latvian",
    "lithuanian",
    "norwegian",
    "light_norwegian",
    "minimal_norwegian",
    "light_nynorsk",
    "minimal_nynorsk",
    "portuguese",
    "light_portuguese",
    "minimal_portuguese",
    "portuguese_rslp",
    "romanian",
    "russian",
    "light_russian",
    "spanish",
    "light_spanish",
    "swedish",
    "light_swedish",
    "turkish",
)

SYNONYM_FORMATS = ("solr", "wordnet")


def _one_of(builder, *attrs):
    """Report `a || b` unless at least one of the attributes is set."""
    if any(builder._values.get(attr) for attr in attrs):
        return []
    return [" || ".join(attrs)]


class TokenFilter(Builder):
    pass


class ASCIIFoldingTokenFilter(TokenFilter):
    TYPE = "asciifolding"

    preserve_original = Option()


class CJKBigramTokenFilter(TokenFilter):
    TYPE = "cjk_bigram"

    ignored_scripts = Listed(choices=CJK_SCRIPTS)
    output_unigrams = Option()


class CommonGramsTokenFilter(TokenFilter):
    TYPE = "common_grams"

    common_words = Listed()
    common_words_path = Option()
    ignore_case = Option()
    query_mode = Option()

    def _problems(self):
        return _one_of(self, "common_words", "common_words_path")


class ConditionTokenFilter(TokenFilter):
    """Applies `filter` only to tokens matching the predicate `script`."""

    TYPE = "condition"

    filter = Listed(required=True)  # noqa: A003
    script = Nested(builds=Script)


class DelimitedPayloadTokenFilter(TokenFilter):
    TYPE = "delimited_payload"

    delimiter = Option()
    encoding = Option(choices=PAYLOAD_ENCODINGS)


class DictionaryDecompounderTokenFilter(TokenFilter):
    TYPE = "dictionary_decompounder"

    word_list = Listed()
    word_list_path = Option()
    max_subword_size = Option()
    min_subword_size = Option()
    min_word_size = Option()
    only_longest_match = Option()

    def _problems(self):
        return _one_of(self, "word_list", "word_list_path")


class EdgeNGramTokenFilter(TokenFilter):
    TYPE = "edge_ngram"

    max_gram = Option()
    min_gram = Option()
    side = Option(choices=EDGE_NGRAM_SIDES)


class ElisionTokenFilter(TokenFilter):
    TYPE = "elision"

    articles = Listed()
    articles_path = Option()
    articles_case = Option()

    def _problems(self):
        return _one_of(self, "articles", "articles_path")


class FingerprintTokenFilter(TokenFilter):
    TYPE = "fingerprint"

    max_output_size = Option()
    separator = Option()


class HunspellTokenFilter(TokenFilter):
    TYPE = "hunspell"

    ignore_case = Option()
    locale = Option()
    dictionary = Option()
    dedup = Option()
    longest_only = Option()


class HyphenationDecompounderTokenFilter(DictionaryDecompounderTokenFilter):
    TYPE = "hyphenation_decompounder"

    hyphenation_patterns_path = Option(required=True)


class KeepTypesTokenFilter(TokenFilter):
    TYPE = "keep_types"

    types = Listed(required=True)
    mode = Option(choices=KEEP_TYPES_MODES)


class KeepWordsTokenFilter(TokenFilter):
    TYPE = "keep"

    keep_words = Listed()
    keep_words_path = Option()
    keep_words_case = Option()

    def _problems(self):
        return _one_of(self, "keep_words", "keep_words_path")


class KeywordMarkerTokenFilter(TokenFilter):
    TYPE = "keyword_marker"

    keywords = Listed()
    keywords_path = Option()
    keywords_pattern = Option()
    ignore_case = Option()


class LengthTokenFilter(TokenFilter):
    TYPE = "length"

    min = Option()  # noqa: A003
    max = Option()  # noqa: A003


class LimitTokenCountTokenFilter(TokenFilter):
    TYPE = "limit"

    max_token_count = Option()
    consume_all_tokens = Option()


class LowercaseTokenFilter(TokenFilter):
    TYPE = "lowercase"

    language = Option(choices=LOWERCASE_LANGUAGES)


class MinHashTokenFilter(TokenFilter):
    TYPE = "min_hash"

    hash_count = Option()
    bucket_count = Option()
    hash_set_size = Option()
    with_rotation = Option()


class MultiplexerTokenFilter(TokenFilter):
    TYPE = "multiplexer"

    filters = Listed()
    preserve_original = Option()


class NGramTokenFilter(TokenFilter):
    TYPE = "ngram"

    max_gram = Option()
    min_gram = Option()


class PatternCaptureTokenFilter(TokenFilter):
    TYPE = "pattern_capture"

    preserve_original = Option()
    patterns = Listed()


class PatternReplaceTokenFilter(TokenFilter):
    TYPE = "pattern_replace"

    pattern = Option()
    replacement = Option()


class PhoneticTokenFilter(TokenFilter):
    """Phonetic filter from the analysis-phonetic plugin.

    Subclasses pin the encoder and expose the options it supports.
    """

    TYPE = "phonetic"
    ENCODER = None

    encoder = Option(choices=PHONETIC_ENCODERS)
    replace = Option()

    def _fixed(self):
        fixed = super()._fixed()
        if self.ENCODER is not None:
            fixed["encoder"] = self.ENCODER
        return fixed


class BeiderMorsePhoneticTokenFilter(PhoneticTokenFilter):
    ENCODER = "beider_morse"

    encoder = None
    replace = None
    rule_type = Option(choices=BEIDER_MORSE_RULE_TYPES)
    name_type = Option(choices=BEIDER_MORSE_NAME_TYPES)
    languageset = Listed(choices=BEIDER_MORSE_LANGUAGES)


class DoubleMetaphonePhoneticTokenFilter(PhoneticTokenFilter):
    ENCODER = "double_metaphone"

    encoder = None
    max_code_len = Option()


class PredicateScriptTokenFilter(TokenFilter):
    TYPE = "predicate_token_filter"

    script = Nested(builds=Script)


class ShingleTokenFilter(TokenFilter):
    TYPE = "shingle"

    max_shingle_size = Option()
    min_shingle_size = Option()
    output_unigrams = Option()
    output_unigrams_if_no_shingles = Option()
    token_separator = Option()
    filter_token = Option()


class SnowballTokenFilter(TokenFilter):
    TYPE = "snowball"

    language = Option()


class StemmerTokenFilter(TokenFilter):
    TYPE = "stemmer"

    language = Option(choices=STEMMER_LANGUAGES)


class StemmerOverrideTokenFilter(TokenFilter):
    """Rules are `StemmerMappingRule` instances or `"from => to"` strings."""

    TYPE = "stemmer_override"

    rules = Listed()
    rules_path = Option()


class StopTokenFilter(TokenFilter):
    TYPE = "stop"

    stopwords = Many()
    stopwords_path = Option()
    ignore_case = Option()
    remove_trailing = Option()


class SynonymTokenFilter(TokenFilter):
    """Synonyms as `MappingRule` instances; `raw_synonyms` overrides them."""

    TYPE = "synonym"

    synonyms = Many()
    raw_synonyms = Many(key="synonyms")
    synonyms_path = Option()
    expand = Option()
    lenient = Option()
    format = Option(choices=SYNONYM_FORMATS)  # noqa: A003
    tokenizer = Option()
    ignore_case = Option()


class SynonymGraphTokenFilter(TokenFilter):
    TYPE = "synonym_graph"

    synonyms = Many()
    synonyms_path = Option()
    expand = Option()
    lenient = Option()
    format = Option(choices=SYNONYM_FORMATS)  # noqa: A003
    tokenizer = Option()
    ignore_case = Option()


class TruncateTokenFilter(TokenFilter):
    TYPE = "truncate"

    limit = Option()


class UniqueTokenFilter(TokenFilter):
    TYPE = "unique"

    only_on_same_position = Option()


class WordDelimiterTokenFilter(TokenFilter):
    TYPE = "word_delimiter"

    generate_word_parts = Option()
    generate_number_parts = Option()
    catenate_words = Option()
    catenate_numbers = Option()
    catenate_all = Option()
    split_on_case_change = Option()
    preserve_original = Option()
    split_on_numerics = Option()
    stem_english_possessive = Option()
    protected_words = Many()
    protected_words_path = Option()
    type_table = Many()
    type_table_path = Option()


class WordDelimiterGraphTokenFilter(WordDelimiterTokenFilter):
    TYPE = "word_delimiter_graph"


TOKEN_FILTERS = {
    klass.TYPE: klass
    for klass in (
        ASCIIFoldingTokenFilter,
        CJKBigramTokenFilter,
        CommonGramsTokenFilter,
        ConditionTokenFilter,
        DelimitedPayloadTokenFilter,
        DictionaryDecompounderTokenFilter,
        EdgeNGramTokenFilter,
        ElisionTokenFilter,
        FingerprintTokenFilter,
        HunspellTokenFilter,
        HyphenationDecompounderTokenFilter,
        KeepTypesTokenFilter,
        KeepWordsTokenFilter,
        KeywordMarkerTokenFilter,
        LengthTokenFilter,
        LimitTokenCountTokenFilter,
        LowercaseTokenFilter,
        MinHashTokenFilter,
        MultiplexerTokenFilter,
        NGramTokenFilter,
        PatternCaptureTokenFilter,
        PatternReplaceTokenFilter,
        PhoneticTokenFilter,
        PredicateScriptTokenFilter,
        ShingleTokenFilter,
        SnowballTokenFilter,
        StemmerTokenFilter,
        StemmerOverrideTokenFilter,
        StopTokenFilter,
        SynonymTokenFilter,
        SynonymGraphTokenFilter,
        TruncateTokenFilter,
        UniqueTokenFilter,
        WordDelimiterTokenFilter,
        WordDelimiterGraphTokenFilter,
    )
}

PHONETIC_TOKEN_FILTERS = {
    klass.ENCODER: klass
    for klass in (BeiderMorsePhoneticTokenFilter, DoubleMetaphonePhoneticTokenFilter)
}
