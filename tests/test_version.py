import itertools

import pytest

from refshelf.core.version import ParseError, Version

SAMPLES = [
    "1", "4.3", "5.0", "5.0.0", "5.0.1", "5.1", "5.2--alpha", "5.2--beta",
    "5.2", "5.2--2020-12-01--abcdef0", "5.10", "6.0--alpha", "10.0",
]


class TestParse:

    @pytest.mark.parametrize("text", [
        "5", "5.1", "5.1.2", "5.2--beta", "5.3--2021-03-07--e3f1a5c", " 5.1 ",
    ])
    def test_valid(self, text):
        assert str(Version.parse(text)) == text.strip()

    @pytest.mark.parametrize("text", [
        "", "v5.1", "5.", ".5", "5..1", "5.1-beta", "5.1--", "5.1--a b",
        "five", "5.1beta", "--beta", "\u0665.1", "5.\uff11",
    ])
    def test_invalid(self, text):
        with pytest.raises(ParseError):
            Version.parse(text)

    def test_non_string_is_parse_error(self):
        with pytest.raises(ParseError):
            Version.parse(None)

    def test_parse_error_is_value_error(self):
        assert issubclass(ParseError, ValueError)

    def test_components(self):
        v = Version.parse("5.3--2021-03-07--e3f1a5c")
        assert v.base == "5.3"
        assert v.suffix == "2021-03-07--e3f1a5c"
        assert not v.is_stable

    @pytest.mark.parametrize("text", SAMPLES)
    def test_round_trip(self, text):
        v = Version.parse(text)
        assert Version.parse(str(v)) == v


class TestStability:

    def test_release_is_stable(self):
        assert Version.parse("5.1").is_stable

    def test_suffix_is_unstable(self):
        assert not Version.parse("5.1--beta").is_stable


class TestOrdering:

    def test_numeric_segments_compare_numerically(self):
        assert Version.parse("5.10") > Version.parse("5.9")
        assert Version.parse("10.0") > Version.parse("9.99")

    def test_trailing_zero_is_insignificant(self):
        assert Version.parse("5.0") == Version.parse("5.0.0")
        assert hash(Version.parse("5.0")) == hash(Version.parse("5.0.0"))

    def test_stable_beats_unstable_of_same_base(self):
        assert Version.parse("5.2") > Version.parse("5.2--beta")
        assert Version.parse("5.2--beta") > Version.parse("5.1")

    def test_suffixes_compare_lexicographically(self):
        assert Version.parse("5.2--alpha") < Version.parse("5.2--beta")

    def test_compare_to(self):
        a, b = Version.parse("5.1"), Version.parse("5.2--alpha")
        assert a.compare_to(b) == -1
        assert b.compare_to(a) == 1
        assert a.compare_to(Version.parse("5.1")) == 0

    def test_equal_text_is_equal(self):
        assert Version.parse("5.2--beta") == Version.parse("5.2--beta")
        assert Version.parse("5.2--beta") != Version.parse("5.2--alpha")

    def test_not_equal_to_strings(self):
        assert Version.parse("5.1") != "5.1"

    def test_antisymmetric(self):
        versions = [Version.parse(t) for t in SAMPLES]
        for a, b in itertools.product(versions, repeat=2):
            assert a.compare_to(b) == -b.compare_to(a)

    def test_transitive(self):
        versions = [Version.parse(t) for t in SAMPLES]
        for a, b, c in itertools.product(versions, repeat=3):
            if a.compare_to(b) <= 0 and b.compare_to(c) <= 0:
                assert a.compare_to(c) <= 0

    def test_sorting(self):
        ordered = sorted(Version.parse(t) for t in ["5.2", "5.2--beta", "5.1", "5.2--alpha"])
        assert [str(v) for v in ordered] == ["5.1", "5.2--alpha", "5.2--beta", "5.2"]


def test_immutable():
    v = Version.parse("5.1")
    with pytest.raises(AttributeError):
        v.suffix = "beta"
    with pytest.raises(AttributeError):
        v._text = "6.0"


def test_changelog_url():
    assert Version.parse("5.1").changelog_url.endswith("/blob/v5.1/CHANGELOG.md")
    assert Version.parse("5.2--beta").changelog_url.endswith("/blob/main/CHANGELOG.md")
