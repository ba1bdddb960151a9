# ftkit

A small library of classic low-level helpers with Python interfaces.

## Modules

- `ftkit.chars`: ASCII classification and case conversion: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and `to_upper`. Each one takes a one-character string or an integer code. The case converters give back the same kind of value they were given.
- `ftkit.memory`: operations on byte buffers such as `bytearray`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr` (returns an index or `None`), `memcmp` and `calloc` (returns a zeroed `bytearray`). A length larger than a buffer raises `ValueError`.
- `ftkit.strings`: string helpers: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `atoi` (wraps to a 32-bit signed value), `substr`, `strdup`, `strjoin`, `strtrim`, `split` (drops empty words), `itoa` (32-bit signed range only), `strmapi` and `striteri` (replaces the items of a mutable sequence in place). `strlcpy` and `strlcat` write a NUL-terminated string into a `bytearray` and return the length of the string they tried to build. The search functions return an index, or `None` when nothing is found.
- `ftkit.output`: write to a file descriptor: `put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd`.
- `ftkit.linked`: a singly linked list. `LinkedList` is made of `Node` objects. It supports `prepend`, `append`, `last`, `len()`, iteration, `clear(delete)`, `for_each(func)` and `map(func, delete)`.
- `ftkit.printf`: a minimal formatter for the conversions `%c %s %p %d %i %u %x %X %%`. It provides `format_string`, `printf(fmt, *args, file=None)` and `to_base`. `printf` writes to standard output by default and returns the number of characters it wrote. An unknown conversion letter prints nothing and uses no argument. Widths, precisions and flags are not supported.
- `ftkit.line_reader`: `LineReader` reads a file descriptor or any object with a `read` method one line at a time, through a buffer of `buffer_size` (3 by default). A file descriptor yields `bytes`. A stream yields whatever its `read` returns.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.strings import split, strtrim, itoa
from ftkit.printf import format_string
from ftkit.linked import LinkedList

split("  hello  world ", " ")        # ['hello', 'world']
strtrim("xxabcxx", "x")              # 'abc'
itoa(-42)                            # '-42'

format_string("%s is %d (%x)", "n", 255, 255)   # 'n is 255 (ff)'

items = LinkedList(["a", "b"])
items.append("c")
len(items)                           # 3
upper = items.map(str.upper, None)
list(upper)                          # ['A', 'B', 'C']
```

Reading lines:

```python
import io
from ftkit.line_reader import LineReader

reader = LineReader(io.BytesIO(b"first\nsecond"), 3)
for line in reader:
    print(line)                      # b'first\n', then b'second'
```