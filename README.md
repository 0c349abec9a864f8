# libft

This is a small library with no dependencies. It provides helpers for
classifying characters, working on byte buffers, handling
NUL-terminated strings and writing to file descriptors. Each helper
keeps the exact edge-case behaviour of the classic low-level routines
it is named after. Use it when Python code must reproduce those
results exactly: bounded copies, truncation return values, wrapping
integer parsing and similar cases.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## `libft.chars`

Each function here accepts either an integer character code or a
one-character string. Other input has these results:

- A longer string raises `ValueError`.
- Any other type raises `TypeError`.

The functions:

- `is_alpha(c)`, `is_digit(c)`, `is_alnum(c)`: test for ASCII letters
  and digits only.
- `is_ascii(c)`: true for codes 0 to 127.
- `is_print(c)`: true for codes 32 to 126, which includes the space.
- `to_upper(c)` and `to_lower(c)`: change the case of ASCII letters.
  Any other character comes back unchanged. The result is an `int` if
  an `int` was given, and a `str` if a `str` was given.

```python
from libft.chars import is_alpha, to_upper

is_alpha("a")          # True
to_upper("q")          # 'Q'
to_upper(ord("q"))     # 81
```

## `libft.memory`

These functions work on `bytearray` buffers and on bytes-like data.
Error handling is the same throughout:

- A negative count raises `ValueError`.
- A span that runs past the end of a buffer raises `IndexError`.

The functions:

- `memset(buf, c, n)`: fills the first `n` bytes with `c & 0xFF` and
  returns `buf`.
- `bzero(buf, n)`: sets the first `n` bytes to zero.
- `memcpy(dest, src, n)`: copies `n` bytes into the start of `dest`
  and returns `dest`. If both arguments are `None`, it returns `None`.
- `memmove(buf, dest_offset, src_offset, n)`: copies `n` bytes within
  one buffer. The two ranges may overlap.
- `memchr(data, c, n)`: returns the index of the first byte equal to
  `c & 0xFF` among the first `n` bytes, or `None` if there is none.
- `memcmp(s1, s2, n)`: compares bytes as unsigned values. It returns
  the difference of the first pair of bytes that differ, or `0`.
- `calloc(nmemb, size)`: returns a zero-filled `bytearray`. It raises
  `OverflowError` if the size would go past the 64-bit limit. It
  raises `MemoryError` if the allocation fails.

```python
from libft.memory import memmove

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 4)   # bytearray(b'ababcd')
```

## `libft.output`

These functions write to an open file descriptor. A `str` is encoded
as UTF-8. A bytes-like value is written as it is.

- `putchar_fd(c, fd)`: writes one character.
- `putstr_fd(s, fd)`: writes a string.
- `putendl_fd(s, fd)`: writes a string followed by a newline.
- `putnbr_fd(n, fd)`: writes an integer in decimal. The integer must
  be in the 32-bit signed range, or `OverflowError` is raised.

```python
from libft.output import putnbr_fd

putnbr_fd(-42, 1)  # writes "-42" to standard output
```

## `libft.text`

In these string functions, a NUL character (`"\0"`) ends the text.
Anything after it is ignored. Search results are indices, or `None`
when nothing is found.

Length and bounded copying:

- `strlen(s)`: length up to the first NUL. Works on `str` and on bytes.
- `strlcpy(dst, src, size)`: copies into the `bytearray` `dst` and
  always ends it with a NUL. It returns the length of `src`.
- `strlcat(dst, src, size)`: appends to `dst` and always ends it with
  a NUL. It returns the length the full result would have. A returned
  length of at least `size` means the text was cut short.

Searching and comparing:

- `strchr(s, c)`, `strrchr(s, c)`: find the first or the last
  occurrence of a character. Searching for NUL returns `strlen(s)`.
- `strncmp(s1, s2, n)`: compares at most `n` characters. It returns
  the difference of the first pair of character codes that differ.
- `strnstr(big, little, length)`: finds `little` only where it lies
  wholly inside the first `length` characters of `big`.

Numbers:

- `atoi(s)`: skips leading whitespace and accepts one sign. It stops
  at the first non-digit and returns `0` if no number can be read.
  Results wrap around as a 32-bit signed integer.
- `itoa(n)`: returns the decimal string of a 32-bit signed integer.
  Values outside that range raise `OverflowError`.

Building strings:

- `strdup(s)`: copies the text up to the first NUL.
- `substr(s, start, length)`: returns a slice of the text.
- `strjoin(s1, s2)`: joins two strings.
- `strtrim(s, chars)`: strips any of the characters in `chars` from
  both ends. If `chars` is `None`, nothing is stripped.
- `split(s, delimiter)`: splits on a single-character delimiter and
  drops empty pieces.

Mapping:

- `strmapi(s, f)`: builds a new string from `f(index, char)`.
- `striteri(buf, f)`: calls `f(index, item)` for each item of a
  `bytearray` or a list of characters, up to its terminator. If `f`
  returns anything other than `None`, that value replaces the item in
  place.

```python
from libft.text import split, atoi, strtrim

split("  hello  world ", " ")   # ['hello', 'world']
atoi("   -123abc")              # -123
strtrim("xxhixx", "x")          # 'hi'
```

## What it does not do

This is a library only. It has no command-line tool. Allocation
returns ordinary `bytearray` objects, and nothing tracks or frees
memory.