import pytest

from ftkit.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("s", ["", "a", "hello world", "tab\there"])
def test_strlen_matches_len(s):
    assert strlen(s) == len(s)


def test_strchr_finds_first_occurrence():
    s = "hello world"
    index = strchr(s, "o")
    assert s[index] == "o"
    assert "o" not in s[:index]


def test_strchr_accepts_integer_code():
    s = "hello"
    assert strchr(s, ord("l")) == strchr(s, "l")


def test_strchr_missing_returns_none():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strrchr_finds_last_occurrence():
    s = "hello world"
    index = strrchr(s, "o")
    assert s[index] == "o"
    assert "o" not in s[index + 1:]
    assert index > strchr(s, "o")


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", 0) == len("hello")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_prefixes():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("anything", "other", 0) == 0


def test_strncmp_sign_follows_order():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_difference_of_codes():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string_ends_with_nul():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_found_within_length():
    haystack = "Foo Bar Baz"
    index = strnstr(haystack, "Bar", len(haystack))
    assert haystack[index:index + 3] == "Bar"


def test_strnstr_beyond_length_not_found():
    haystack = "Foo Bar Baz"
    assert strnstr(haystack, "Bar", 6) is None


def test_strnstr_empty_needle():
    assert strnstr("whatever", "", 0) == 0


def test_strlcpy_truncates_and_reports_source_length():
    src = "hello world"
    copied, length = strlcpy(src, 6)
    assert copied == "hello"
    assert length == len(src)


def test_strlcpy_fits():
    copied, length = strlcpy("abc", 10)
    assert copied == "abc"
    assert length == 3


def test_strlcpy_zero_size():
    copied, length = strlcpy("abc", 0)
    assert copied == ""
    assert length == len("abc")


def test_strlcat_appends_with_room():
    result, length = strlcat("foo", "bar", 20)
    assert result == "foobar"
    assert length == len("foo") + len("bar")


def test_strlcat_truncates_to_size():
    result, length = strlcat("foo", "barbaz", 6)
    assert len(result) == 5
    assert result.startswith("foo")
    assert length == len("foo") + len("barbaz")


def test_strlcat_size_not_larger_than_dst():
    result, length = strlcat("foobar", "xy", 3)
    assert result == "foobar"
    assert length == 3 + len("xy")


def test_strdup_copies():
    assert strdup("duplicate me") == "duplicate me"
    assert strdup("") == ""


def test_substr_basic_and_clamped():
    s = "abcdef"
    assert substr(s, 2, 3) == s[2:5]
    assert substr(s, 4, 100) == s[4:]


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""


def test_substr_negative_start_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "x") == "x"


def test_strtrim_both_ends():
    assert strtrim("xxhelloxx", "x") == "hello"
    assert strtrim("  hi there \n", " \n") == "hi there"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  keep  ", "") == "  keep  "


def test_strtrim_none_rejected():
    with pytest.raises(TypeError):
        strtrim("abc", None)


def test_split_drops_empty_pieces():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_no_separator_and_empty():
    assert split("word", ",") == ["word"]
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_join_round_trip():
    words = ["one", "two", "three"]
    assert split(",".join(words), ",") == words


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def visit(i, c):
        seen.append(i)
        return c.upper()

    striteri(chars, visit)
    assert chars == ["A", "B", "C"]
    assert seen == [0, 1, 2]


def test_striteri_none_keeps_item():
    chars = list("xyz")
    striteri(chars, lambda i, c: None)
    assert chars == ["x", "y", "z"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("+17abc", 17),
        ("\t\n\v\f\r 7", 7),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("-2147483648", -2147483648),
        ("2147483647", 2147483647),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"