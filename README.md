# ftprint

A compact printf-style formatter and a set of classic C-style string, character and memory helpers, written as plain Python functions. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Formatting

`ftprint.printf.sprintf` returns the formatted text. `ftprint.printf.printf` writes it to a stream (standard output unless `stream=` is given) and returns the number of characters written.

```python
from ftprint.printf import sprintf, printf

sprintf("%s has %d items (%x)", "box", 42, 255)   # 'box has 42 items (ff)'
sprintf("%p", 0)                                  # '(nil)'
sprintf("%s", None)                               # '(null)'
count = printf("%c%c\n", "o", "k")                # prints "ok", returns 3
```

The supported conversions are:

| Spec       | Meaning                                                   |
|------------|-----------------------------------------------------------|
| `%c`       | one character; an integer is taken modulo 256             |
| `%s`       | a string, `(null)` for `None`                             |
| `%p`       | `0x` and lowercase hex of a 64-bit value, `(nil)` for zero |
| `%d`, `%i` | a signed 32-bit decimal (larger values wrap)              |
| `%u`       | an unsigned 32-bit decimal                                |
| `%x`, `%X` | an unsigned 32-bit hex value, lower or upper case         |
| `%%`       | a literal percent sign                                    |

There are no flags, widths or precisions. An unknown conversion produces no output and consumes no argument; extra arguments are ignored. A missing argument, or a format ending in a lone `%`, raises `ValueError`.

Each conversion is also available on its own: `format_char`, `format_str`, `format_decimal`, `format_unsigned`, `format_hex(value, spec)` and `format_pointer`.

## Helpers

- `ftprint.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower` (each taking a one-character string or an integer code) and `atoi`.
- `ftprint.strings`: `itoa`, `split`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `strjoin`, `substr`, `strtrim`, `strmapi`, `striteri`. The search functions return an index or `None`.
- `ftprint.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr`, `memcmp`, `strlcpy`, `strlcat`, working on `bytes` and `bytearray` buffers. `memmove(buf, dest_offset, src_offset, n)` moves bytes within one buffer, and `calloc` refuses either count above 65535 with `ValueError`.
- `ftprint.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to any text stream (standard output by default).

```python
from ftprint.strings import split, itoa
from ftprint.chars import atoi

split("  a  b c ", " ")   # ['a', 'b', 'c']
itoa(-2147483648)         # '-2147483648'
atoi("  -42abc")          # -42
```

## Command

```
ftprint-demo
```

prints the number `13232` to standard output, with no trailing newline.