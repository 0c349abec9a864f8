import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.chars import to_upper
from libft.output import INT_MAX, INT_MIN
from libft.text import (
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

int32 = st.integers(min_value=INT_MIN, max_value=INT_MAX)
small_text = st.text(alphabet="abc xy-")


# strlen

def test_strlen_whole_string():
    s = "hello"
    assert strlen(s) == len(s)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")
    assert strlen(b"ab\0c") == len(b"ab")


def test_strlen_rejects_other_types():
    with pytest.raises(TypeError):
        strlen(42)


# strlcpy

def test_strlcpy_full_copy():
    dst = bytearray(10)
    src = "hello"
    assert strlcpy(dst, src, len(dst)) == len(src)
    assert dst[:len(src)] == b"hello"
    assert dst[len(src)] == 0


def test_strlcpy_truncates_and_terminates():
    dst = bytearray(b"xxxxxxxx")
    src = "abcdef"
    assert strlcpy(dst, src, 4) == len(src)
    assert dst[:4] == b"abc\0"
    assert dst[4:] == b"xxxx"


def test_strlcpy_zero_size_leaves_dst():
    dst = bytearray(b"keep")
    assert strlcpy(dst, "abc", 0) == len("abc")
    assert dst == bytearray(b"keep")


def test_strlcpy_destination_too_small():
    with pytest.raises(IndexError):
        strlcpy(bytearray(2), "abcdef", 10)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy(bytearray(4), "a", -1)


# strlcat

def test_strlcat_appends():
    dst = bytearray(b"foo\0" + bytes(6))
    assert strlcat(dst, "bar", len(dst)) == len("foo") + len("bar")
    assert dst[:7] == b"foobar\0"


def test_strlcat_truncates():
    dst = bytearray(b"foo\0" + bytes(6))
    assert strlcat(dst, "bar", 5) == len("foo") + len("bar")
    assert dst[:5] == b"foob\0"


def test_strlcat_dst_longer_than_size():
    dst = bytearray(b"foobar\0")
    assert strlcat(dst, "xyz", 3) == len("xyz") + 3
    assert dst == bytearray(b"foobar\0")


def test_strlcat_zero_size():
    dst = bytearray(b"ab\0")
    assert strlcat(dst, "xyz", 0) == len("xyz")
    assert dst == bytearray(b"ab\0")


# strchr / strrchr

def test_strchr_and_strrchr_find_positions():
    s = "hello"
    assert strchr(s, "l") == s.index("l")
    assert strrchr(s, "l") == s.rindex("l")
    assert strchr(s, "z") is None
    assert strrchr(s, "z") is None


def test_strchr_nul_finds_terminator():
    s = "hello"
    assert strchr(s, "\0") == len(s)
    assert strrchr(s, 0) == len(s)


def test_strchr_int_code_is_reduced_to_a_byte():
    s = "hello"
    assert strchr(s, ord("e")) == s.index("e")
    assert strchr(s, ord("e") + 256) == s.index("e")


def test_strchr_ignores_text_after_nul():
    assert strchr("ab\0c", "c") is None


# strncmp

def test_strncmp_equal_and_bounded():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_stops_at_nul():
    assert strncmp("a\0x", "a\0y", 3) == 0


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


@given(small_text, small_text, st.integers(min_value=0, max_value=10))
def test_strncmp_antisymmetric(a, b, n):
    assert strncmp(a, b, n) == -strncmp(b, a, n)


# strnstr

def test_strnstr_found_and_bounded():
    big = "Foo Bar Baz"
    pos = big.index("Bar")
    assert strnstr(big, "Bar", len(big)) == pos
    assert strnstr(big, "Bar", pos + len("Bar")) == pos
    assert strnstr(big, "Bar", pos + len("Bar") - 1) is None
    assert strnstr(big, "Qux", len(big)) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


# atoi / itoa

@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("\t\n\v\f\r +7", 7),
        ("12abc34", 12),
        ("+-5", 0),
        ("-+5", 0),
        ("abc", 0),
        ("", 0),
        ("2147483647", INT_MAX),
        ("-2147483648", INT_MIN),
        ("2147483648", INT_MIN),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_itoa_fixed_values():
    assert itoa(0) == "0"
    assert itoa(INT_MIN) == "-2147483648"
    assert itoa(-42) == "-42"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)


@given(int32)
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


# strdup / substr / strjoin

def test_strdup_copies_up_to_nul():
    assert strdup("hello") == "hello"
    assert strdup("ab\0cd") == "ab"


def test_substr():
    s = "Hello, world"
    start = s.index("world")
    assert substr(s, start, len("world")) == "world"
    assert substr(s, start, 100) == "world"
    assert substr(s, len(s) + 1, 3) == ""
    assert substr(s, len(s), 3) == ""
    assert substr(s, 0, 0) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


@given(small_text, st.integers(min_value=0, max_value=12), st.integers(min_value=0, max_value=12))
def test_substr_is_bounded_piece(s, start, length):
    piece = substr(s, start, length)
    assert len(piece) <= length
    assert piece in s


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    with pytest.raises(TypeError):
        strjoin(None, "bar")


# strtrim

def test_strtrim():
    assert strtrim("xxhelloxyx", "xy") == "hello"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim("  a b  ", None) == "  a b  "
    assert strtrim("xax", "") == "xax"


@given(small_text)
def test_strtrim_invariants(s):
    chars = "xy"
    result = strtrim(s, chars)
    assert result in s
    if result:
        assert result[0] not in chars
        assert result[-1] not in chars


# split

def test_split():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("   ", " ") == []
    assert split("abc", "\0") == ["abc"]


def test_split_bad_delimiter():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@given(small_text)
def test_split_invariants(s):
    pieces = split(s, " ")
    assert all(piece and " " not in piece for piece in pieces)
    assert "".join(pieces) == s.replace(" ", "")


# strmapi / striteri

def test_strmapi_maps_every_character():
    seen = []

    def upper(i, c):
        seen.append(i)
        return to_upper(c)

    s = "abc"
    assert strmapi(s, upper) == "ABC"
    assert seen == list(range(len(s)))


def test_strmapi_needs_callable():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_striteri_list_in_place():
    buf = list("abc")
    striteri(buf, lambda i, c: to_upper(c))
    assert buf == list("ABC")


def test_striteri_bytearray_stops_at_nul():
    buf = bytearray(b"ab\0cd")
    striteri(buf, lambda i, c: to_upper(c))
    assert buf == bytearray(b"AB\0cd")


def test_striteri_none_result_keeps_item():
    seen = []
    buf = list("xyz")
    striteri(buf, lambda i, c: seen.append((i, c)))
    assert buf == list("xyz")
    assert seen == list(enumerate("xyz"))