import re

import pytest

from identgen.core.config import NamingConfig
from identgen.core.naming import IdentifierNormalizer
from identgen.languages.go.naming import create_go_normalizer, goify


SAMPLE_NAMES = [
    "",
    "!!!",
    "_",
    "___",
    "a",
    "I",
    "7",
    "map",
    "Map",
    "type",
    "go",
    "id",
    "ok_id",
    "id_ok",
    "id2",
    "a1b",
    "v2",
    "v2Something",
    "user_id",
    "httpStatus",
    "statusHTTP",
    "XMLHttpRequest",
    "FOO bar",
    "foo__bar",
    "  $foo#  ",
    "__init__",
    "kebab-case-name",
    "snake_case_name",
    "hello world",
    "café",
    "naïve_user",
    "日本語",
    "ß_street",
    "Ünïcödé__mess--here",
]


@pytest.fixture
def normalizer():
    return create_go_normalizer()


class TestDocumentedVectors:
    @pytest.mark.parametrize(
        "name,first_upper,expected",
        [
            ("httpStatus", True, "HTTPStatus"),
            ("statusHTTP", False, "statusHTTP"),
            ("http", False, "http"),
            ("http", True, "HTTP"),
            ("foo__bar", True, "FooBar"),
            ("map", False, "map_"),
            ("  $foo#  ", True, "Foo"),
            ("", True, ""),
            ("!!!", True, ""),
        ],
    )
    def test_vector(self, normalizer, name, first_upper, expected):
        assert normalizer.normalize(name, first_upper) == expected


class TestWordBoundaries:
    def test_underscore_run_is_a_boundary_only(self, normalizer):
        assert normalizer.normalize("snake___case__name", False) == "snakeCaseName"

    def test_leading_and_trailing_underscores_dropped(self, normalizer):
        assert normalizer.normalize("__init__", True) == "Init"
        assert normalizer.normalize("___", True) == ""

    def test_lower_to_upper_boundary(self, normalizer):
        assert normalizer.segment("fooBarBaz") == ["foo", "Bar", "Baz"]

    def test_separators_after_lowercase_end_a_word(self, normalizer):
        assert normalizer.normalize("hello world", True) == "HelloWorld"
        assert normalizer.normalize("kebab-case-name", True) == "KebabCaseName"

    def test_separator_after_uppercase_does_not_end_a_word(self, normalizer):
        assert normalizer.segment("FOO bar") == ["FOObar"]
        assert normalizer.normalize("FOO bar", True) == "FOObar"
        assert normalizer.normalize("FOO bar", False) == "fOObar"

    def test_uppercase_run_passes_through(self, normalizer):
        assert normalizer.normalize("XMLHttpRequest", True) == "XMLHttpRequest"

    def test_invalid_characters_inside_a_word_are_dropped(self, normalizer):
        assert normalizer.normalize("AB$CD", True) == "ABCD"


class TestDigits:
    def test_lowercase_then_digit_splits(self, normalizer):
        assert normalizer.segment("v2") == ["v", "2"]
        assert normalizer.normalize("v2", True) == "V2"
        assert normalizer.normalize("v2", False) == "v2"

    def test_digit_does_not_end_a_word(self, normalizer):
        assert normalizer.segment("v2Something") == ["v", "2Something"]
        assert normalizer.normalize("v2Something", True) == "V2Something"

    def test_digit_then_lowercase(self, normalizer):
        assert normalizer.segment("a1b") == ["a", "1b"]
        assert normalizer.normalize("a1b", True) == "A1b"

    def test_initialism_followed_by_digit(self, normalizer):
        assert normalizer.normalize("id2", False) == "id2"
        assert normalizer.normalize("id2", True) == "ID2"

    def test_leading_digit_is_kept(self, normalizer):
        assert normalizer.normalize("7", True) == "7"
        assert normalizer.normalize("3d_model", True) == "3dModel"


class TestCasing:
    @pytest.mark.parametrize(
        "name,first_upper,expected",
        [
            ("user_id", True, "UserID"),
            ("user_id", False, "userID"),
            ("id", True, "ID"),
            ("id", False, "id"),
            ("ok_id", False, "okID"),
            ("id_ok", True, "IDOK"),
            ("api_version", False, "apiVersion"),
            ("api_version", True, "APIVersion"),
            ("Api_Version", True, "APIVersion"),
            ("snake_case_name", False, "snakeCaseName"),
            ("a", True, "A"),
            ("a", False, "a"),
            ("I", False, "i"),
            ("MixedCase", False, "mixedCase"),
            ("MixedCase", True, "MixedCase"),
        ],
    )
    def test_casing(self, normalizer, name, first_upper, expected):
        assert normalizer.normalize(name, first_upper) == expected

    def test_pascal_and_camel_helpers(self, normalizer):
        assert normalizer.pascal("request_url") == "RequestURL"
        assert normalizer.camel("request_url") == "requestURL"

    def test_without_initialisms(self):
        plain = IdentifierNormalizer()
        assert plain.normalize("user_id", True) == "UserId"
        assert plain.normalize("map", False) == "map"


class TestReservedWords:
    @pytest.mark.parametrize("name", ["map", "type", "go", "string", "int64", "func"])
    def test_reserved_escaped(self, normalizer, name):
        assert normalizer.normalize(name, False) == name + "_"

    def test_escape_applies_to_assembled_output(self, normalizer):
        assert normalizer.normalize("Go", False) == "go_"
        assert normalizer.normalize("go", True) == "Go"
        assert normalizer.normalize("map_type", False) == "mapType"

    def test_package_names_not_reserved_by_default(self, normalizer):
        assert normalizer.normalize("json", False) == "json"
        assert normalizer.normalize("time", False) == "time"


class TestUnicode:
    def test_non_ascii_letters_dropped_by_default(self, normalizer):
        assert normalizer.normalize("café", True) == "Caf"
        assert normalizer.normalize("日本語", True) == ""

    def test_allow_unicode(self):
        unicode_normalizer = IdentifierNormalizer(
            NamingConfig(initialisms={"ID"}, allow_unicode=True)
        )
        assert unicode_normalizer.normalize("café", True) == "Café"
        assert unicode_normalizer.normalize("naïve_user", True) == "NaïveUser"
        assert unicode_normalizer.normalize("日本語", True) == "日本語"
        assert unicode_normalizer.normalize("größe_id", False) == "größeID"

    def test_case_mapping_keeps_word_length(self):
        unicode_normalizer = IdentifierNormalizer(NamingConfig(allow_unicode=True))
        assert unicode_normalizer.normalize("ß_street", False) == "ßStreet"


class TestProperties:
    @pytest.mark.parametrize("first_upper", [True, False])
    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_idempotent(self, normalizer, name, first_upper):
        once = normalizer.normalize(name, first_upper)
        assert normalizer.normalize(once, first_upper) == once

    @pytest.mark.parametrize("first_upper", [True, False])
    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_output_alphabet(self, normalizer, name, first_upper):
        assert re.fullmatch(r"[A-Za-z0-9]*_?", normalizer.normalize(name, first_upper))

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_underscore_only_as_escape(self, normalizer, name):
        result = normalizer.normalize(name, False)
        if result.endswith("_"):
            assert normalizer.config.is_reserved(result[:-1])


def test_goify():
    assert goify("user_id") == "UserID"
    assert goify("map", False) == "map_"
    assert goify("http_request", False) == "httpRequest"


def test_package_names_opt_in():
    normalizer = create_go_normalizer(include_packages=True)
    assert normalizer.normalize("http", False) == "http_"
    assert normalizer.normalize("json", False) == "json_"
    assert normalizer.normalize("http", True) == "HTTP"
