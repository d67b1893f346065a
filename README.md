# toolshelf

A collection of small, independent tools that share one package.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Find and replace in files

The `toolshelf-text` command has two subcommands. Both take one or more input
files with `-i`/`--input` (a single value containing spaces is split into
several file names) and a regular expression with `-p`/`--pattern`.

`find` reads each file and prints its content with every match of the pattern
removed. The files are not changed:

```
toolshelf-text find -i notes.txt -p "TODO"
```

`replace` rewrites each file in place, replacing every match with the text
given by `-r`/`--replace`, and prints the content before and after. Add
`-c` (`--ignore-case`) for a case-insensitive match:

```
toolshelf-text replace -i a.txt b.txt -p "colour" -r "color" -c
```

The replacement may refer to groups as `$1`, `$name` or `${name}`; `$$` is a
literal dollar sign. With no subcommand the command prints a hint to use
`--help`. `-V`/`--version` prints the version; `-d`/`--debug` is accepted but
changes nothing. A file that cannot be read or written, or a pattern that is
not a valid expression, makes the command print an error and exit with
status 1.

From Python, `toolshelf.cli` offers `parse_args(argv)` (returning a
`FindCommand`, a `ReplaceCommand` or `None`), `run_find(command, out)` and
`run_replace(command, out)`, which return the resulting content of each file.
The file work itself is in `toolshelf.fileops`:

```python
from toolshelf.fileops import find_and_replace, read_file_to_string, write_string_to_file

text = read_file_to_string("notes.txt")
write_string_to_file("notes.txt", find_and_replace(text, "colour", "color", True))
```

`replace_literal(content, pattern, replacement)` does a plain substring
replacement with no regular expressions. Files are read and written as UTF-8
with line endings left as they are.

## Small helpers

- `toolshelf.shapes`: `Circle`, `Rectangle` and `Triangle`, with `area(shape)`.
  A triangle's area comes from Heron's formula; sides that cannot form a
  triangle give NaN, and anything that is not a shape raises `TypeError`.
- `toolshelf.prefix`: `longest_common_prefix(x, y)`.
- `toolshelf.mathfun`: `perform_addition(a, b)` and `fibonacci(n)`
  (`fibonacci(0) == 0`; a negative `n` raises `ValueError`).
- `toolshelf.workers`: `double_all(items)`, `count_concurrently(workers)` and
  `sum_in_threads(data, threads)`, which spread simple work over threads and
  print each result as it is made.

## Bytes and images

- `toolshelf.crypto.encrypt(data, key)`: AES-128 in CBC mode with an all-zero
  IV and PKCS#7 padding. The key must be exactly 16 bytes.
- `toolshelf.imaging.apply_grayscale(data, width, height)`: turns a flat RGBA
  buffer to grayscale and keeps the alpha channel. A buffer shorter than
  `width * height * 4` bytes raises `ValueError`.
- `toolshelf.chart.generate_realtime_chart(x_values, y_values)`: draws the
  points as a red line on a white 1600x1400 chart with axes 0..10 and 0..100,
  and returns its raw RGB pixels row by row.

## Network

- `toolshelf-fetch URL` downloads a document over HTTP and prints it. From
  Python, `toolshelf.fetch.perform_get_request(url)` returns the body and
  raises `httpx.HTTPError` on failure; `get_request(url)` returns the body or
  an `Error: ...` message.
- `toolshelf-sensors [--host HOST] [--port PORT]` (default `0.0.0.0:8080`)
  accepts TCP connections from devices, reads one message of up to 1024 bytes
  from each, prints it as received and answers
  `Data received and processed.`
- `toolshelf-serve [http|raw] [--host HOST] [--port PORT]` (default
  `http` on `127.0.0.1:8080`). In `http` mode it answers every HTTP/1.x
  request with `Device control response`, honouring keep-alive and replying
  `400 Bad Request` to malformed requests. In `raw` mode it reads up to 512
  bytes from each connection, prints them and sends back a bare HTTP 200
  reply with the body `Hello, Asynchronous TCP!`.

## What it does not do

- The sensor server does not decode readings: every message becomes an empty
  `SensorData` whatever bytes it held, and nothing is stored or acted on
  beyond printing it.
- The web servers have no routing or device control: every request gets the
  same fixed reply.
- The chart is a single rendered frame returned as pixels; nothing is
  displayed or updated live.