# libft

A small general-purpose utility library with no dependencies outside the
standard library. It is a library only; it installs no commands.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.check`

ASCII character predicates that accept either a one-character string or an
integer code: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
`isspace`. All return `bool`.

- `isalnum_string(s)` is true when every character is an ASCII letter or digit.
- `isalpha_string(s)` is true when, after one optional leading `+`, every
  character is an ASCII letter.
- `iterate(s, f)` calls `f(s, i)` for each index and returns `False` at the
  first falsy result, otherwise `True`.
- `iterate_double(rows, f)` does the same with `f(rows, i, j)` over every
  character of every row.

### `libft.conversion`

- `atoi(s)` and `atol(s)` skip leading whitespace, accept one `+` or `-`,
  read the decimal digits that follow and wrap the result to a 32-bit or
  64-bit signed value. Text with no digits gives `0`.
- `itoa(n)` returns the decimal text of `n`.
- `tolower(c)` and `toupper(c)` change only ASCII letters; they take and
  return a one-character string or an integer code.

### `libft.search`

Functions that locate text return an index, or `None` when nothing is found.

- `strchr(s, c)` / `strrchr(s, c)`: first / last index of `c`; searching for
  `"\0"` gives `len(s)`. `strchr(None, c)` returns `None`.
- `strcmp(s1, s2)`: difference of the first differing character codes, `0`
  when equal, `404` when either argument is `None`.
- `strncmp(s1, s2, n)`: the same over at most `n` characters.
- `strnstr(big, little, length)`: index of `little` lying wholly within the
  first `length` characters of `big`; an empty `little` gives `0`.
- `strstr(s1, s2)`: `True` when `s2` occurs in `s1`.
- `count_chars(s, chars)`: counts matches of the characters of `s` against
  `chars`. The first character of `s` is checked against all of `chars`,
  every later one against all of `chars` except its first entry.

### `libft.memory`

Routines working on `bytes` / `bytearray` buffers. Counts that are negative
or larger than a buffer raise `ValueError`.

- `bzero(buf, n)`, `memset(buf, c, n)`: fill the first `n` bytes.
- `calloc(nmemb, size)`: a zero-filled `bytearray`; raises `OverflowError`
  when `nmemb * size` would exceed 64-bit addressing.
- `memchr(buf, c, n)`: index of the first byte equal to `c & 0xFF`, or `None`.
- `memcmp(a, b, n)`: difference of the first differing bytes, or `0`.
- `memcpy(dest, src, n)`: copies into `dest` and returns it.
- `memmove(buf, dest, src, n)`: copies `n` bytes between two offsets of the
  same buffer; the regions may overlap.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)`: NUL-terminated
  copy and append within `size` bytes; they return the length the full
  result would have had.

### `libft.strings`

- `split(s, c)`: splits on `c`, dropping empty pieces.
- `strtrim(s, charset)`: strips characters of `charset` from both ends.
- `substr(s, start, length)`: up to `length` characters from `start`; `""`
  when `start` is past the end.
- `strjoin(s1, s2)`, `strndup(s, n)`, `strlen(s)` (`0` for `None`).
- `strmapi(s, f)`: builds a string from `f(i, ch)`.
- `striteri(s, f)`: calls `f(i, ch)` for each character; a string returned
  by `f` replaces the character.
- `char_trim(s, quote)`: the text between the first `quote` and the last
  later `quote`, or `None`.
- `cut_chars(s, cut)`: `s` without any character found in `cut`.
- `linelen(lines)`, `strdup_lines(lines)`.

### `libft.lists`

`Node` is a dataclass holding `content` plus `key_env`, `exp`, `interro`,
`index`, `next` and `prev`. `LinkedList` links nodes through `head`:

- `add_back(node)` appends, links `prev` and resets `node.interro` to `0`.
- `add_front(node)` puts the node at the head.
- `last()`, `len(lst)` and iteration over the nodes.
- `iterate(f)` calls `f` on every content.
- `clear(delete)` passes every content to `delete` and empties the list.
- `map(f, delete)` returns a new list of `f(content)`; if `f` raises, the
  contents built so far are passed to `delete` and the error propagates.

### `libft.gnl`

`LineReader(stream, buffer_size=42)` reads a text or binary stream in chunks
and yields lines with their newline kept; `read_line()` returns `None` at
the end. `read_all(stream)` joins every line, or returns `None` for an empty
stream.

### `libft.output`

`putchar`, `putstr`, `putendl`, `putnbr` and `putstr_lines` write to a text
stream (standard output by default). `putstr_lines` writes each line with a
newline and then one extra blank line.

### `libft.printf`

`printf(fmt, *args, stream=None)` handles `%c %s %p %d %i %u %x %X %%` and
returns the number of characters written; `format_printf(fmt, *args)`
returns the text instead. `%d`/`%i` wrap to 32-bit signed, `%u`/`%x`/`%X`
to 32-bit unsigned, `%s` of `None` gives `(null)` and `%p` of zero gives
`(nil)`. Unknown conversions are dropped. The single-conversion writers
`print_char`, `print_str`, `print_nbr`, `print_ptr`, `print_unsigned` and
`print_hex` are also available. No widths, precisions or flags are
supported.

## Examples

```python
import io

from libft.conversion import atoi, itoa
from libft.strings import split, strtrim
from libft.printf import format_printf, printf
from libft.gnl import LineReader

atoi("  -42abc")               # -42
itoa(-123)                      # "-123"
split("  a b  c ", " ")         # ["a", "b", "c"]
strtrim("xxhixx", "x")          # "hi"

format_printf("%d is %x", 255, 255)   # "255 is ff"

out = io.StringIO()
printf("Hello, %s!\n", "world", stream=out)   # returns 14

reader = LineReader(io.StringIO("one\ntwo\n"))
list(reader)                    # ["one\n", "two\n"]
```