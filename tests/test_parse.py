"""
Unit tests for langparse.parse.
"""

import pytest

from bcp47 import parse, Extension, Schema
from charclass import is_alpha
from langparse import (ERR_EMPTY_EXTENSION, ERR_EXTENSION_TOO_LONG,
                       ERR_EXTRA_CONTENT, ERR_PRIVATE_USE_TOO_LONG,
                       ERR_TOO_MANY_SUBTAGS, ERR_VARIANT_TOO_LONG, MESSAGES,
                       Cursor)


class TestInput:
    """Precondition checks and coercion."""

    def test_none_raises(self):
        with pytest.raises(TypeError):
            parse(None)

    def test_coerces_to_string(self):
        class Tagish(object):
            def __str__(self):
                return 'en'

        assert parse(Tagish()).language == 'en'

    def test_empty_string(self, warning, empty_schema):
        assert parse('', warning=warning) == empty_schema
        assert warning.calls == []


class TestGrandfathered:
    """Irregular and regular legacy tags."""

    def test_normalizes_when_possible(self):
        assert parse('i-klingon') == Schema(language='tlh')

    def test_normalize_off(self):
        assert parse('i-klingon', normalize=False) == \
            Schema(irregular='i-klingon')

    def test_irregular_without_replacement(self):
        assert parse('i-default') == Schema(irregular='i-default')

    def test_regular_without_replacement(self):
        assert parse('zh-min') == Schema(regular='zh-min')

    def test_regular_normalize_off(self):
        assert parse('zh-min-nan', normalize=False) == \
            Schema(regular='zh-min-nan')

    def test_case_insensitive_keeps_spelling(self):
        assert parse('EN-gb-OED', normalize=False) == \
            Schema(irregular='EN-gb-OED')

    def test_replacement_is_parsed(self):
        schema = parse('en-GB-oed')
        assert schema.language == 'en'
        assert schema.region == 'GB'
        assert schema.variants == ('oxendict',)

    def test_normalize_none_means_default(self):
        assert parse('no-bok', normalize=None) == Schema(language='nb')


class TestWellFormed:
    """Tags that parse without warnings."""

    def test_language_only(self, warning):
        assert parse('de', warning=warning) == Schema(language='de')
        assert warning.calls == []

    def test_full_tag(self, warning):
        schema = parse('hy-Latn-IT-arevela', warning=warning)
        assert schema.language == 'hy'
        assert schema.script == 'Latn'
        assert schema.region == 'IT'
        assert schema.variants == ('arevela',)
        assert warning.calls == []

    def test_extended_language_subtags(self):
        schema = parse('zh-yue-HK')
        assert schema.language == 'zh'
        assert schema.extended_language_subtags == ('yue',)
        assert schema.region == 'HK'

    def test_no_extlang_after_long_language(self, warning):
        # 4+ letter languages can't take extlangs, so 'abc' is left over
        assert parse('abcd-abc', warning=warning) == Schema()
        assert warning.calls == [(MESSAGES[ERR_EXTRA_CONTENT],
                                  ERR_EXTRA_CONTENT, 4)]

    def test_numeric_region(self):
        schema = parse('es-419')
        assert schema.region == '419'

    def test_script_before_region(self):
        schema = parse('sr-Cyrl')
        assert schema.script == 'Cyrl'
        assert schema.region is None

    def test_short_variant_needs_leading_digit(self):
        assert parse('de-CH-1901').variants == ('1901',)
        assert parse('de-CH-abcd', forgiving=True).variants == ()

    def test_several_variants(self):
        assert parse('sl-rozaj-biske-1994').variants == \
            ('rozaj', 'biske', '1994')

    def test_extensions(self):
        schema = parse('en-a-bbb-ccc-u-co-phonebk')
        assert schema.extensions == (
            Extension('a', ('bbb', 'ccc')),
            Extension('u', ('co', 'phonebk')),
        )

    def test_privateuse_after_tag(self):
        schema = parse('en-US-x-twain-1')
        assert schema.language == 'en'
        assert schema.region == 'US'
        assert schema.privateuse == ('twain', '1')

    def test_privateuse_only(self):
        assert parse('x-whatever') == Schema(privateuse=['whatever'])

    def test_privateuse_upper_x(self):
        assert parse('X-Foo').privateuse == ('Foo',)

    def test_keeps_case(self):
        schema = parse('EN-latn-gb')
        assert schema.language == 'EN'
        assert schema.script == 'latn'
        assert schema.region == 'gb'

    def test_reserved_and_registered_languages(self):
        assert parse('abcd').language == 'abcd'
        assert parse('abcdefgh').language == 'abcdefgh'

    def test_lone_x(self, warning, empty_schema):
        assert parse('x', warning=warning) == empty_schema
        assert warning.calls == []


class TestFailures:
    """Malformed tags, warning codes and offsets, forgiving mode."""

    def test_too_long_variant(self, warning, empty_schema):
        assert parse('en-GB-abcdefghi', warning=warning) == empty_schema
        assert warning.calls == [(MESSAGES[ERR_VARIANT_TOO_LONG],
                                  ERR_VARIANT_TOO_LONG, 14)]
        assert parse('en-GB-abcdefghi', forgiving=True) == \
            Schema(language='en', region='GB')

    def test_too_many_extended_language_subtags(self, warning, empty_schema):
        assert parse('aa-bbb-ccc-ddd-eee', warning=warning) == empty_schema
        assert warning.calls == [(MESSAGES[ERR_TOO_MANY_SUBTAGS],
                                  ERR_TOO_MANY_SUBTAGS, 14)]
        assert parse('aa-bbb-ccc-ddd-eee', forgiving=True) == \
            Schema(language='aa',
                   extended_language_subtags=['bbb', 'ccc', 'ddd'])

    def test_too_long_extension(self, warning, empty_schema):
        assert parse('en-i-abcdefghi', warning=warning) == empty_schema
        assert warning.calls == [(MESSAGES[ERR_EXTENSION_TOO_LONG],
                                  ERR_EXTENSION_TOO_LONG, 13)]
        assert parse('en-i-abcdefghi', forgiving=True) == \
            Schema(language='en')

    def test_empty_extension(self, warning, empty_schema):
        assert parse('en-i-a', warning=warning) == empty_schema
        assert warning.calls == [(MESSAGES[ERR_EMPTY_EXTENSION],
                                  ERR_EMPTY_EXTENSION, 4)]
        assert parse('en-i-a', forgiving=True) == Schema(language='en')

    def test_too_long_privateuse(self, warning, empty_schema):
        assert parse('en-x-abcdefghi', warning=warning) == empty_schema
        assert warning.calls == [(MESSAGES[ERR_PRIVATE_USE_TOO_LONG],
                                  ERR_PRIVATE_USE_TOO_LONG, 13)]
        assert parse('en-x-abcdefghi', forgiving=True) == \
            Schema(language='en')

    def test_extra_content(self, warning, empty_schema):
        fixture = 'abcdefghijklmnopqrstuvwxyz'
        assert parse(fixture, warning=warning) == empty_schema
        assert warning.calls == [(MESSAGES[ERR_EXTRA_CONTENT],
                                  ERR_EXTRA_CONTENT, 0)]
        assert parse(fixture, forgiving=True) == empty_schema

    def test_forgiving_keeps_earlier_extensions(self):
        schema = parse('en-a-bb-b-c', forgiving=True)
        assert schema.extensions == (Extension('a', ('bb',)),)

    def test_underscore_is_extra_content(self, warning):
        parse('en_US', warning=warning)
        assert warning.calls == [(MESSAGES[ERR_EXTRA_CONTENT],
                                  ERR_EXTRA_CONTENT, 2)]

    def test_warning_called_once(self, warning):
        parse('en-GB-abcdefghi-x-abcdefghi', warning=warning)
        assert len(warning.calls) == 1

    def test_non_ascii_offsets(self, warning):
        parse('en-İ', warning=warning)
        assert warning.calls == [(MESSAGES[ERR_EXTRA_CONTENT],
                                  ERR_EXTRA_CONTENT, 2)]


class TestCursor:
    """Lookahead helpers."""

    def test_peek_past_end(self):
        cur = Cursor('en')
        cur.advance(2)
        assert cur.at_end()
        assert cur.peek() == -1
        assert cur.peek(5) == -1

    def test_run_stops_at_limit(self):
        cur = Cursor('abcdefghijk')
        assert cur.run(is_alpha, 0, 9) == 9
        assert cur.run(is_alpha, 0, 20) == 11
