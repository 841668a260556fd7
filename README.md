# wolvlib

A small collection of general-purpose building blocks for Python programs. It
has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

### `wolvlib.strings`

- `split_string(string, delimiter)` splits at every delimiter. An empty delimiter
  returns the whole string as the only element.
- `combine_strings(strings, delimiter)` joins the strings with the delimiter between them.
- `replace_strings(string, search, replace)` keeps replacing until no occurrence is
  left, so occurrences created by a replacement are replaced too. For example,
  `replace_strings("houhousese", "house", "")` gives `""`.
- `strnlen(data, n)` returns the length of a `str` or `bytes` value up to its first
  NUL, capped at `n`.
- `trim(s)` removes leading and trailing whitespace and control characters from a
  `str` or `bytes` value.

### `wolvlib.guards`

- `ScopeGuard(func)` is a context manager. It calls `func` when the `with` block is
  left, unless `release()` was called first.
- `at_first_time(func)` calls `func` only the first time its definition site is reached.
- `at_final_cleanup(func)` registers `func` to run once at interpreter exit.

Both of the last two can be used as decorators.

### `wolvlib.lock`

`ScopedTryLock(mutex)` and `try_lock(mutex)` make one non-blocking attempt to acquire
the lock. The result is truthy only if the attempt succeeded. Leaving the `with`
block, or calling `release()`, releases the lock.

### `wolvlib.thread_pool`

`ThreadPool(thread_count)` runs tasks queued with `enqueue(task)` on daemon worker
threads. Each task is called with a `threading.Event`, which is set once `stop()` has
been called. Tasks already queued when `stop()` is called still run. Leaving a `with`
block calls `stop()`.

### `wolvlib.core`

- `to_bytes(value, fmt)` returns the raw bytes of `value` packed with a `struct`
  format. If the format has no byte-order prefix, native order with standard sizes is
  used. For example, `to_bytes(0xAABBCCDD, "I")` gives the four bytes of a `u32`.
- `kib`, `mib` and `gib` convert a count of kibibytes, mebibytes or gibibytes to a
  byte count.

### `wolvlib.crc`

`Crc(num_bits, polynomial, init, xor_out, reflect_input, reflect_output)` is a
table-driven CRC. `num_bits` must be a power of two no larger than 64; any other value
raises `ValueError`. Use `process(data)` to feed in bytes, `result()` to read the
checksum and `reset()` to start over.

```python
from wolvlib.crc import Crc

crc32 = Crc(32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True, True)
crc32.process(bytes([1, 2, 3, 4, 5]))
print(crc32.result())  # 1191942644
```

### `wolvlib.uuids`

`generate_uuid()` returns a random version-4 UUID string in lower case.

### `wolvlib.interval_tree`

`IntervalTree` stores `(Interval, value)` pairs ordered by start. `Interval` is a
closed interval `[start, end]`. `overlapping(interval)` returns `Entry` tuples of
`(interval, value)`, from the highest start downwards. Only intervals that start at or
before the query start are considered.

By default the search walks backwards and stops at the first interval that ends
before the query start. If `search_range` is given, the search keeps going past
non-overlapping intervals and gives up after that many misses, so intervals that
enclose smaller ones are found as well.

```python
from wolvlib.interval_tree import Interval, IntervalTree

tree = IntervalTree([
    (Interval(0, 5), 69),
    (Interval(1, 3), 420),
    (Interval(3, 6), 9001),
])
for entry in tree.overlapping(Interval(4, 5)):
    print(entry.value)
```

### `wolvlib.buffered_reader`

`BufferedReader(reader, data_size, buffer_size=0x100000)` puts a read-ahead buffer in
front of any function `reader(address, size) -> bytes`.

- `read(address, size)` reads forwards. `read_reverse(address, size)` buffers the data
  that comes before `address`.
- Bytes outside the data come back as zeros.
- Iterating yields every byte from the start address, which `seek` sets, up to the
  end address, which `set_end_address` sets.
- `reversed()` walks from the start address down to address 1.

```python
from wolvlib.buffered_reader import BufferedReader

data = b"Hello World"
reader = BufferedReader(lambda address, size: data[address:address + size], len(data))
assert bytes(reader) == data
```

### `wolvlib.fs`

These helpers report failure instead of raising:

- `exists`, `is_regular_file`, `is_directory`, `create_directories`, `copy_file`,
  `remove` and `remove_all` return `False` on failure.
- `get_file_size` returns `0` on failure.
- `is_sub_path(base, destination)` reports whether `destination` is at or below `base`.
- `to_short_path` returns the path unchanged, as a `Path`.
- `get_executable_path()` returns the running interpreter's executable, or `None`.

### `wolvlib.file`

`File(path, mode)` opens a binary file with a `FileMode`:

- `READ` opens an existing file for reading.
- `WRITE` opens an existing file without truncating it, and creates it if it is missing.
- `CREATE` always starts from an empty file.

Opening never raises. A file that could not be opened reports `is_valid()` as
`False`, and every operation on it returns an empty result.

The available operations are:

- reading: `read_buffer`, `read_vector`, `read_string` (decodes UTF-8 up to the first NUL)
- writing: `write_buffer`, `write_vector`, `write_string`
- position and size: `seek`, `size`, `set_size`, `update_size`
- memory mapping: `map`, `unmap`, `mapping`
- other: `flush`, `remove`, `clone`, `disable_buffering`, `file_info`

`File` is also a context manager.

`ChangeTracker(path_or_file)` polls a file's status in a background thread. It calls
the callback given to `start_tracking` whenever the file changes, and once more if
the file disappears. `start_tracking` raises `FileNotFoundError` if the file cannot be
watched. `stop_tracking()` ends the thread.

### `wolvlib.socket_client` and `wolvlib.socket_server`

`SocketClient(SocketType.TCP | SocketType.UDP)` connects to a dotted IPv4 address. It
offers `read_bytes` / `read_string` and `write_bytes` / `write_string`. Failures never
raise: a failed connection leaves `is_connected()` `False`, and failed reads return
empty data.

`SocketServer(port, buffer_size=1024, max_client_count=5, local_only=True)` listens
on an IPv4 TCP port. By default it listens on the loopback address only.

- Each call to `accept(callback, close_callback=None, keep_alive=False)` waits for one
  client and serves it on a worker thread.
- When the client pauses, `callback(sock, data)` is called with the bytes received so
  far. A non-empty return value is sent back.
- If binding or listening fails, `error` holds the error number and `is_listening()`
  is `False`.
- `shutdown()` stops the workers and closes the listening socket.

## What it does not do

- There is no command-line program. The package is a library only.
- `ChangeTracker` polls file status every 0.1 seconds. It does not use operating
  system change notifications.
- `to_short_path` does not shorten anything.
- The socket classes handle IPv4 only. The server does not accept clients by itself:
  `accept` must be called once for each client.

## Running the tests

```
pip install .[test]
pytest
```