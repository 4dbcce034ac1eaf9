# labworks

Small, self-contained tools built around one idea: take a file, transform its
text, write the result, and report how many changes were made, either
directly or through a client/server pair that hands the work to a separate
processor program. Alongside them: a matrix type, a binary book record file,
a line-grouping tool and a bubble-sort comparison counter.

The process-starting and networking parts use `fork`, `posix_spawnp`,
`waitpid` and named pipes, so they need a POSIX system.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Library

### Text transforms: `labworks.textops`

Each function takes a string and returns `(new_text, changes)`.

- `replace_pair(text, old_pair, new_pair)`: replace non-overlapping
  occurrences of a two-character pair, left to right. Both pairs must be two
  characters long, otherwise `ValueError`.
- `collapse_repeats(text, count)`: from the third character on, replace a
  character equal to the one before it with a space, at most `count` times;
  the character after a replacement is skipped.
- `replace_digits(text, symbol)`: replace every ASCII digit with `symbol`
  (a single character).
- `blank_digits(text, count)`: replace ASCII digits with spaces, stopping
  after `count` of them.
- `mark_line_ends(text, symbol)`: overwrite the last character of every
  non-empty line (the character before each `\n` that does not follow another
  `\n`) with `symbol`.

```python
from labworks.textops import replace_pair

text, replaces = replace_pair("aFFbFF", "FF", "#@")   # ("a#@b#@", 2)
```

### Process status: `labworks.status`

- `error_message(error)`: `"error <n>: <strerror>\n"`.
- `status_message(status)`: describe a raw wait status as
  `return status: N`, `killed by signal: N` (with ` (dumped core)` when
  applicable), `stopped by signal: N` or `continued`.
- `result_message(status)`: the same, but an exit is reported as
  `replaces: N`.

An unrecognised status raises `ValueError`.

### Logging: `labworks.applog`

- `Level`: `INFO` and `ERROR`.
- `TaggedLog(path, info_marker, error_marker)`: appends entries of the form
  `<marker>: <text>\n`, where `{label}` in a marker is replaced by the level
  name. `format(level, text)` builds an entry (cut to 118 characters);
  `info(text)` and `error(text)` append one and return it.
- `append_line(path, message)`: append `message` and a newline, cut to 299
  characters.
- `format_timestamped(content, when=None)` and
  `write_timestamped(path, content, when=None)`: `[<ctime>]: content\n`
  entries.

### Matrix: `labworks.matrix`

`Matrix(rows, cols)` is a zero-filled grid; `Matrix.from_rows(...)` builds one
from equally long rows. It supports `m[row]` (the live row list),
`m[row, col]`, iteration over rows as tuples, `copy()`, the `rows` and `cols`
properties, element-wise `+`/`-` (and `+=`/`-=`) between matrices of the same
size, `*` and `/` by a value (integer elements divide with truncation toward
zero), `resize(rows, cols)` (keeps overlapping elements, zero-fills the rest),
in-place `transpose()` and `render()`, which gives one `| a b c |` line per row.

`==` and `!=` compare element by element. `>` holds when every element is
greater; if some elements are greater and others are not, it raises
`MatrixError`. `<`, `>=` and `<=` are built from `==` and `>`. Combining or
comparing matrices of different sizes raises `MatrixError`.

```python
from labworks.matrix import Matrix

m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
m.transpose()
print(m.render())
```

### Books: `labworks.books`

`Book(title, pages)`; `encode_books` / `decode_books` convert to and from
records of `[pages][title length][title]` (32-bit little-endian integers,
UTF-8 title); `save_books(path, books)` writes `<path>.bin`;
`find_book(path, title)` returns the first matching book or `None`;
`read_books(ask, limit=32)` collects books by calling `ask(prompt)`;
`format_book(book)` renders the information block.

### Line groups: `labworks.letter_groups`

`group_by_first_letter(lines)` maps each lower-cased first non-space character
to its lines (blank lines go under `""`); `largest_group(groups)` returns the
biggest group, ties going to the smallest key; `read_groups(path)` reads a
file, stopping at the first line of 1024 characters or more.

### Bubble-sort counts: `labworks.sortbench`

`bubble_sort(keys)` returns a sorted copy and the number of comparisons;
`random_keys`, `best_keys`, `worst_keys` build inputs; `measure(amount, rng)`
returns `(amount, best, worst, average)`; `render_table(measurements)` draws
the table.

### File processing

- `labworks.processor`: `run_transform(path, transform, output_path, limit)`
  applies any text transform to a file and returns the change count;
  `process_file(path, target, pair)` writes `processed-<name>` next to the
  input and rejects files of 128 bytes or more with `FileTooLargeError`.
- `labworks.protocol`: the TCP wire format. `Request(filenames, target, pair)`,
  `send_request` / `receive_request`, `send_message` / `receive_message`,
  `recv_exact`. Lengths are unsigned 64-bit little-endian; malformed or
  truncated data raises `ProtocolError`.
- `labworks.server`: `run_processor`, `handle_connection`, `serve`.
- `labworks.client`: `parse_args`, `ClientOptions`, `UsageError`, `run`.
- `labworks.batch`: `process_concurrently(paths, ...)` processes the first
  128 bytes of each file on its own thread and writes `output-<i>.txt`;
  `spawn_processors(paths, command)` starts one processor per file at once and
  describes how each ended.
- `labworks.fifo_exchange`: `write_frames` / `read_frames` (32-bit length,
  bytes, NUL), `client_exchange(fifo_path, filenames)` and
  `server_exchange(fifo_path, command)` for the same exchange over a named
  pipe (default `/tmp/my_fifo`).
- `labworks.udp_service`: `handle_request`, `serve_udp`, `request`.

## Commands

| Command                  | What it does                                                       |
|--------------------------|--------------------------------------------------------------------|
| `labworks-sortbench`     | Print the table of bubble-sort comparison counts                   |
| `labworks-books`         | Enter books and save them, or look one up by title                 |
| `labworks-letter-groups` | Show or save the largest group of lines sharing a first letter     |
| `labworks-processor`     | Replace a character pair in one file and write the result          |
| `labworks-server`        | Accept files over TCP and run the processor on each                |
| `labworks-client`        | Send files to the server and print the results                     |
| `labworks-batch`         | Process several files at once                                      |
| `labworks-udp`           | Digit-replacement service over UDP                                 |

Details:

- `labworks-sortbench [AMOUNT...]`: defaults to 8 32 64 88 108.
- `labworks-books FILE` asks for books interactively and saves them to
  `FILE.bin`; `labworks-books FILE TITLE` looks the title up in `FILE` and
  exits with 1 if it is missing.
- `labworks-letter-groups FILE` reads the file, then asks where to put the
  largest group: `0` prints it, anything else is a file name to write.
- `labworks-processor FILE TARGET PAIR`: both pairs must be two characters.
  The output goes to `processed-<name>` next to the input and the exit status
  is the number of replacements; failures are logged to `error.log`.
- `labworks-server [--host H] [--port P] [--log FILE] [--foreground]`:
  listens on `0.0.0.0:5000` by default, logs to `./server-action.log`, and
  detaches from the terminal unless `--foreground` is given. Each named file
  is handed to the processor and the answer sent back is `replaces: N` (or how
  the processor otherwise ended).
- `labworks-client [-t PAIR] [-p PAIR] -f FILE [-f FILE]...`: connects to
  `127.0.0.1:5000`; the target pair defaults to `FF`, the replacement to `#@`;
  at most 16 files; `-h` prints help.
- `labworks-batch [--processes] [--output-dir DIR] FILE...`: replaces `FF`
  with `#@`, on threads by default, or in one processor program per file with
  `--processes`.
- `labworks-udp serve [--host H] [--port P] [--log FILE] [--foreground]`
  (default `[::]:50002`, log `log.txt`), `labworks-udp request SYMBOL FILE...`
  (default server `::1`), and `labworks-udp child FILE SYMBOL`, which writes
  `<FILE>-with-<SYMBOL>.txt` and exits with the number of digits replaced.

Examples:

```
labworks-processor notes.txt FF "#@"
labworks-client -t FF -p "#@" -f notes.txt -f todo.txt
labworks-books library
labworks-books library.bin Dune
labworks-letter-groups poem.txt
```

## What is not included

- The named-pipe exchange in `labworks.fifo_exchange` has no command of its
  own; it is used from Python only.
- `collapse_repeats`, `blank_digits` and `mark_line_ends` are not wired to any
  command or server; only pair replacement (processor, TCP server, batch) and
  digit replacement (UDP service) are.
- The servers handle one client at a time and keep nothing between requests.