# fdlines

Read a raw file descriptor one line at a time. Data is pulled in with
`os.read` in fixed-size chunks. Any bytes read past the end of a line are
kept and returned by the next call.

## Installation

```
pip install fdlines
```

## Reading a single descriptor

`fdlines.reader.LineReader(fd, buffer_size=10)` wraps one file descriptor.

- `readline()` returns the next line as `bytes`, including its trailing
  newline. At end of file it returns `b""`. If the input does not end with
  a newline, the last line comes back without one.
- The reader is an iterator. Iteration stops at end of file.

```python
import os
from fdlines.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(fd, 10)      # read 10 bytes at a time
for line in reader:
    print(line)
os.close(fd)
```

The constructor raises `ValueError` for a negative descriptor or for a
buffer size that is not positive. When a read fails, `readline()` drops
whatever it had buffered and lets the `OSError` propagate.

## Reading many descriptors at once

`fdlines.multi.MultiLineReader(buffer_size=200, fd_max=4096)` keeps a
separate leftover buffer for each descriptor in the range `[0, fd_max)`.
You can interleave reads from several files or pipes, and a read on one
descriptor does not affect the others.

- `readline(fd)` returns the next line from `fd`, or `b""` at end of file.
- `lines(fd)` yields the remaining lines of `fd` until end of file.
- `discard(fd)` forgets any bytes buffered for `fd`.

```python
from fdlines.multi import MultiLineReader

multi = MultiLineReader(200, 4096)
first = multi.readline(fd_a)
second = multi.readline(fd_b)
rest_of_a = list(multi.lines(fd_a))
multi.discard(fd_b)
```

A descriptor outside `[0, fd_max)` raises `ValueError`. So does a buffer
size that is not positive. A read error drops the bytes buffered for that
descriptor and lets the `OSError` propagate.

`fdlines.multi.get_next_line(fd)` is a module-level shortcut. It calls one
shared `MultiLineReader` that uses the default settings: a buffer size of
200 and an `fd_max` of 4096.

```python
from fdlines.multi import get_next_line

line = get_next_line(fd)
```

## What it does not do

The package works on bytes and descriptors only. It does not decode text,
open or close files, or provide a command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```