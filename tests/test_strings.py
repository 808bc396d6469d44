import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftprintf.strings import (
    atoi,
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

no_nul = st.text(alphabet=st.characters(blacklist_characters="\0"))
ascii_text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127))
int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


# strlen

@given(no_nul)
def test_strlen_matches_len(s):
    assert strlen(s) == len(s)


@given(no_nul, no_nul)
def test_strlen_stops_at_nul(head, tail):
    assert strlen(head + "\0" + tail) == len(head)


def test_strlen_none_is_zero():
    assert strlen(None) == 0


# atoi

@given(int32)
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


@given(int32)
def test_atoi_skips_whitespace_and_trailing_text(n):
    assert atoi(" \t\n\r\f\v" + str(n) + "xyz") == n


@given(st.integers(min_value=0, max_value=2**31 - 1))
def test_atoi_plus_sign(n):
    assert atoi("+" + str(n)) == n


@pytest.mark.parametrize("text", ["abc", "", "- 5", "--5", "+-5", None])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_to_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("4294967296") == 0


# split

def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_string():
    assert split("", ",") == []
    assert split(",,,", ",") == []


@given(
    st.lists(st.text(alphabet="abc", min_size=1), max_size=6),
    st.integers(min_value=1, max_value=3),
    st.integers(min_value=0, max_value=2),
)
def test_split_recovers_words(words, gap, edge):
    text = "," * edge + ("," * gap).join(words) + "," * edge
    assert split(text, ",") == words


def test_split_none_raises():
    with pytest.raises(TypeError):
        split(None, ",")


# strchr / strrchr

@given(ascii_text, st.characters(min_codepoint=1, max_codepoint=127))
def test_strchr_agrees_with_find(s, c):
    expected = s.find(c)
    assert strchr(s, c) == (None if expected < 0 else expected)


@given(ascii_text, st.characters(min_codepoint=1, max_codepoint=127))
def test_strrchr_agrees_with_rfind(s, c):
    expected = s.rfind(c)
    assert strrchr(s, c) == (None if expected < 0 else expected)


def test_strchr_finds_terminator():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_accepts_code():
    assert strchr("abcb", ord("b")) == strchr("abcb", "b")
    assert strrchr("abcb", ord("b")) == strrchr("abcb", "b")


def test_strchr_none_string():
    assert strchr(None, "a") is None
    assert strrchr(None, "a") is None


# strdup

@given(no_nul)
def test_strdup_copies(s):
    assert strdup(s) == s


def test_strdup_none_raises():
    with pytest.raises(TypeError):
        strdup(None)


# striteri

def test_striteri_replaces_in_place():
    buf = list("abc")
    striteri(buf, lambda i, ch: ch.upper())
    assert "".join(buf) == "abc".upper()


def test_striteri_passes_indices_and_stops_at_nul():
    seen = []
    striteri(list("ab\0c"), lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("ab"))


def test_striteri_none_result_keeps_char():
    buf = list("xyz")
    striteri(buf, lambda i, ch: None)
    assert buf == list("xyz")


# strjoin

@given(no_nul, no_nul)
def test_strjoin_concatenates(a, b):
    assert strjoin(a, b) == a + b


def test_strjoin_none_sides():
    assert strjoin(None, "abc") == "abc"
    assert strjoin("abc", None) == "abc"
    with pytest.raises(TypeError):
        strjoin(None, None)


# strmapi

@given(no_nul)
def test_strmapi_identity(s):
    assert strmapi(s, lambda i, ch: ch) == s


def test_strmapi_receives_indices():
    seen = []

    def record(i, ch):
        seen.append((i, ch))
        return ch.upper()

    assert strmapi("abc", record) == "ABC"
    assert seen == list(enumerate("abc"))


def test_strmapi_none_raises():
    with pytest.raises(TypeError):
        strmapi("abc", None)
    with pytest.raises(TypeError):
        strmapi(None, lambda i, ch: ch)


# strncmp

def test_strncmp_basic():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_none_is_zero():
    assert strncmp(None, "abc", 3) == 0


@given(ascii_text, ascii_text, st.integers(min_value=0, max_value=10))
def test_strncmp_sign_matches_ordering(a, b, n):
    left, right = a[:n], b[:n]
    expected = (left > right) - (left < right)
    result = strncmp(a, b, n)
    assert (result > 0) - (result < 0) == expected


# strnstr

def test_strnstr_found_and_bounded():
    haystack = "lorem ipsum dolor"
    assert strnstr(haystack, "ipsum", len(haystack)) == haystack.index("ipsum")
    assert strnstr(haystack, "ipsum", haystack.index("ipsum") + 4) is None


def test_strnstr_empty_and_none_needle():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", None, 3) is None


@given(st.text(alphabet="ab", max_size=8), st.text(alphabet="ab", min_size=1, max_size=3),
       st.integers(min_value=0, max_value=10))
def test_strnstr_agrees_with_find(haystack, needle, n):
    expected = haystack[:n].find(needle)
    assert strnstr(haystack, needle, n) == (None if expected < 0 else expected)


# strtrim

def test_strtrim_both_ends():
    assert strtrim("xxhelloxx", "x") == "hello"
    assert strtrim("xyxy", "xy") == ""


def test_strtrim_none_charset_copies():
    assert strtrim("  a ", None) == "  a "


def test_strtrim_none_string_raises():
    with pytest.raises(TypeError):
        strtrim(None, "x")


@given(no_nul, st.text(alphabet="ab ", max_size=3))
def test_strtrim_agrees_with_strip(s, charset):
    assert strtrim(s, charset) == s.strip(charset)


# substr

def test_substr_slices():
    assert substr("hello", 1, 3) == "hello"[1:4]
    assert substr("hello", 0, 99) == "hello"
    assert substr("hello", 5, 2) == ""


def test_substr_errors():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(TypeError):
        substr(None, 0, 2)


@given(no_nul, st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_substr_length_bound(s, start, length):
    result = substr(s, start, length)
    assert len(result) <= length
    assert s.startswith(result, min(start, len(s)))