# ftkit

Small, dependency-free helpers for characters, strings and byte buffers.
They keep the behaviour of the classic C library routines: the same return
values, limits and edge cases. They work on ordinary Python values,
`str`, `bytes` and `bytearray`. Positions come back as indices, and "not
found" comes back as `None`. Where a C routine would read or write past the
end of a buffer, these functions raise `ValueError`.

The package also has input-code enums and plain data types for a small
graphics layer.

## Installation

```
pip install ftkit
```

## Modules

- `ftkit.chars` classifies ASCII characters and converts their case.
  Every function takes an integer code or a one-character string:
  `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper` and
  `tolower`. `toupper` and `tolower` return a value of the same type as
  their argument.
- `ftkit.memory` works on byte buffers: `memset`, `bzero`, `calloc`,
  `memcpy`, `memmove`, `memchr` and `memcmp`. `memmove` copies within a
  single buffer, from one offset to another, and handles overlapping spans
  correctly.
- `ftkit.strings` inspects, searches and copies strings with a size bound:
  `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`,
  `strlcat` and `strdup`. A string ends at its first NUL character, if it
  has one. `strlcpy` and `strlcat` each return a pair: the resulting text
  and the length that a C caller would use to detect truncation.
- `ftkit.transform` builds new strings and converts between text and
  integers: `substr`, `strjoin`, `strtrim`, `split`, `atoi`, `itoa`,
  `strmapi` and `striteri`. `atoi` wraps around to the 32-bit signed
  range. `itoa` raises `OverflowError` when its argument lies outside that
  range.
- `ftkit.mlx_keys` defines the input-code enums `Action`, `ModifierKey`
  (an `IntFlag`), `MouseKey`, `MouseMode`, `CursorShape` and `Key`.
- `ftkit.mlx_types` defines data types:
  - `ErrorCode`, whose members each have a `.description`.
  - `Setting`, together with `default_settings()`.
  - `Texture`, an RGBA texture with `Texture.blank()` and `pixel_at()`.
    `pixel_at()` returns the pixel packed as `0xRRGGBBAA`.
  - `Xpm`, `Instance`, `KeyData` and `Vertex`.

  Each type checks the ranges of its fields when it is constructed.

## Examples

```python
from ftkit.transform import split, atoi, itoa, strtrim
from ftkit.strings import strncmp, strlcat, strchr
from ftkit.chars import toupper

split("  hello  world ", " ")      # ['hello', 'world']
atoi("   -42abc")                  # -42
itoa(-2147483648)                  # '-2147483648'
strtrim("xxhixx", "x")             # 'hi'
strncmp("abc", "abd", 2)           # 0
strchr("hello", "l")               # 2
strlcat("ab", "cdef", 4)           # ('abc', 6)
toupper("a")                       # 'A'
toupper(ord("a")) == ord("A")      # True
```

```python
from ftkit.memory import calloc, memset, memcmp

buf = calloc(2, 3)                 # bytearray(b'\x00\x00\x00\x00\x00\x00')
memset(buf, ord("x"), 3)           # bytearray(b'xxx\x00\x00\x00')
memcmp(b"abc", b"abd", 3)          # -1
```

```python
from ftkit.mlx_keys import Key, ModifierKey
from ftkit.mlx_types import ErrorCode, Texture, default_settings

Key(256)                           # <Key.ESCAPE: 256>
ModifierKey.SHIFT | ModifierKey.CONTROL
ErrorCode.INVPNG.description       # 'Something is wrong with the given PNG file'

tex = Texture.blank(2, 2)
tex.pixel_at(1, 1)                 # 0
default_settings()                 # every Setting mapped to its default
```

## What it does not do

- It has no helpers for writing characters, strings or numbers to a file
  descriptor. Use `print`, `sys.stdout.write` or `os.write` for that.
- The graphics modules hold only definitions. They open no window, draw
  nothing, decode no PNG or XPM files and dispatch no input events.

## Running the tests

```
pip install "ftkit[test]"
pytest
```