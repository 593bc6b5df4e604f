# pedrolib

A small library of everyday helpers that follow the behaviour of the classic
C routines of the same names, expressed with Python values.

- `pedrolib.chars`: ASCII character classification and case mapping:
  `is_ascii`, `is_print`, `is_alpha`, `is_digit`, `is_alnum`, `is_space`,
  `is_sign`, `to_lower`, `to_upper`. Each accepts a one-character string or an
  integer code point; the case mappers return the same kind they were given.
- `pedrolib.numbers`: `atoi` and `atol` read an optional sign and leading
  digits (no whitespace skipping; no digits gives 0) and wrap to 32 or 64 bits;
  `itoa` returns the decimal form of an integer.
- `pedrolib.memory`: operations on mutable byte buffers (`bytearray`,
  writable `memoryview`): `bzero`, `calloc`, `memset`, `memcpy`, `memmove`,
  `memchr`, `memcmp`, `realloc`, and NUL-terminated string helpers `strcpy`,
  `strcat`, `strlcpy`, `strlcat`. `memchr` returns an index or `None`.
- `pedrolib.strings`: `strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
  `strnstr`, `strdup`, `strjoin`, `strjoin_equal`, `substr`, `strtrim`,
  `split`, `strmapi`, `striteri`. Searches return an index or `None`.
- `pedrolib.linkedlist`: a singly linked `LinkedList` of `Node` objects with
  `push_front`, `push_back`, `last`, `delete_node`, `clear`, `for_each`,
  `map`, `len()` and iteration over the contents.
- `pedrolib.output`: `sprintf` and `printf` supporting
  `%c %s %d %i %u %x %X %p %%` (no flags, widths or precisions), and
  `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`, which write to a given
  text stream or to standard output.
- `pedrolib.lines`: `LineReader`, which reads a text or binary stream line by
  line in chunks of a fixed size (6 by default), keeping the trailing newline.

The package is a library only; it installs no command.

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
import io

from pedrolib.numbers import atoi, itoa
from pedrolib.strings import split, strtrim
from pedrolib.output import sprintf
from pedrolib.linkedlist import LinkedList
from pedrolib.lines import LineReader

atoi("-42abc")                      # -42
itoa(-94120)                        # "-94120"
split("salut comment vas tu", " ")  # ["salut", "comment", "vas", "tu"]
strtrim("xxhixx", "x")              # "hi"
sprintf("%s has %d items (%x)", "box", 3, 255)  # "box has 3 items (ff)"

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda v: v * 2, None)
list(doubled)                       # [0, 2, 4, 6]

reader = LineReader(io.StringIO("first\nsecond\n"), 6)
list(reader)                        # ["first\n", "second\n"]
```