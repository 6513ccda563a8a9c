# wdtools

A collection of small helpers for everyday Python code, both synchronous and asyncio-based.

## Install

```
pip install wdtools
```

To run the test suite, install the test extra and run pytest:

```
pip install "wdtools[test]"
pytest
```

## Modules

| Module | Provides |
| --- | --- |
| `wdtools.encoding` | `hex_encode`, `base64_encode_url` / `base64_decode_url` (URL-safe, no padding), `base64_encode_std` / `base64_decode_std` (standard, padded), `md5` (raw 16-byte digest), `sha1` (hex digest). Decoders raise `ValueError` on malformed input. |
| `wdtools.text` | `regex_captures(text, pattern)`: the single capture group of every match; `ValueError` if the pattern is invalid or does not have exactly one group |
| `wdtools.bytes_key` | `as_bytes(value)`: turns bytes, `str` (UTF-8), `int` (8 little-endian bytes), lists of byte values and lists of characters (UTF-32LE) into key bytes |
| `wdtools.byte_map` | `ByteMap`: a byte-keyed trie with `insert`, `get`, `match_first` (shortest stored prefix), `match_all` (all stored prefixes, shortest first) and `remove` |
| `wdtools.ids` | `uuid_v4`, `uuid_v4_raw`, `uuid_v5`, `uuid_v5_raw` and `UuidV5Namespace` (`DNS`, `OID`, `URL`, `X500`; `X500` names are hashed in the DNS name space) |
| `wdtools.timeutil` | `utc_timestamp` (seconds) and `utc_timestamp_millis` (milliseconds) since the Unix epoch |
| `wdtools.fs` | `await exist(path, FileType.FILE)`: whether a path exists and is of the given `FileType`; links are followed, a missing path gives `False` |
| `wdtools.registry` | `init(value)` / `fetch(kind, handle)`: a process-wide store holding one value per type; `handle` gets a slot whose `value` it may replace, or `None` |
| `wdtools.wait_group` | `WaitGroup` with `add`, `done`, `defer(function, *args)` (runs it as a task and counts it) and `await wait()` |
| `wdtools.channel` | a bounded async `Channel` with `try_send`/`send`, `try_recv`/`recv`, `close`; `open_channel(cap)` returns a `(Sender, Receiver)` pair; errors `SendClosedError`, `SendFullError`, `RecvClosedError`, `RecvEmptyError` |
| `wdtools.async_mutex` | `AsyncMutex`: `await lock()` from coroutines or `synchronize()` from threads, both returning an `AsyncMutexGuard` with `value` and `release()` that works as a context manager |
| `wdtools.copy_lock` | `CopyLock`: `share()` reads without waiting; `update(function)` and `set(value)` replace the value under a writer lock |
| `wdtools.null_lock` | `NullLock`: an asyncio lock around a value that may be absent, with `init`, `reset`, `get`, `get_unwrap(default)`, `map` and `map_mut` (raises `NullLockError` when empty) |
| `wdtools.async_lru` | `AsyncLru(group, group_cap)`: a thread-safe LRU cache split into hash-chosen shards, with `put` and `get` |
| `wdtools.shared` | `Shared`: a mutable object behind an `AsyncMutex`, reached through `lock_ref_mut`, `async_ref`, `async_ref_handle` or the unlocked `peek` |
| `wdtools.ctx` | `Ctx`: a key/value context with a stop flag and a sub-task counter; `call`, `call_timeout` and `exec_future` run work as counted sub-tasks, `wait_stop_status` and `wait_all_subtask_over` return `CtxFutResult.OVER` |
| `wdtools.parallel_pool` | `ParallelPool(parallel)`: `try_launch`/`launch` start coroutines while fewer than `parallel` are running; `wait_over()` or awaiting the pool waits for them all |
| `wdtools.object_pool` | `ObjPool(max_size, idle, factory)`: `defer(handle)` lends a `PooledObject` to `handle` and takes it back afterwards; raises `ObjPoolError` when no object can be had |
| `wdtools.http` | `Http(method, url)`: a request builder on `httpx` with `header`, `body`, client/request/response hooks and `send`, `send_no_body`, `into_send` (optionally checking the result type, raising `TypeError`) |

## Examples

```python
from wdtools.encoding import base64_encode_url, md5, hex_encode

base64_encode_url("@hello, wo/-rld*")   # 'QGhlbGxvLCB3by8tcmxkKg'
hex_encode(md5("hello world"))          # '5eb63bbbe01eeed093cb22bb8f5acdc3'
```

```python
from wdtools.byte_map import ByteMap

m = ByteMap()
m.insert([1, 2, 3], 123)
m.insert([1, 2, 3, 0, 255], 255)
m.match_first([1, 2, 3, 0, 255])   # 123
m.match_all([1, 2, 3, 0, 255])     # [123, 255]
```

```python
import asyncio
from wdtools.channel import open_channel, RecvClosedError

async def main():
    sender, receiver = open_channel(10)
    await sender.send(1)
    print(await receiver.recv())
    sender.close()
    try:
        await receiver.recv()
    except RecvClosedError:
        print("closed")

asyncio.run(main())
```

## What it does not do

This is a library only: there is no command-line program. Identifiers are UUIDs only; there is no time-ordered numeric id generator.