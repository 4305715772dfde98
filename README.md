# hyperdbg-client

A small Python client for a HyperDbg debugger server that exposes the
debugger's API over plain HTTP GET requests. It has no runtime
dependencies and uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from hyperdbg_client.client import Client, ValueKind

client = Client("http://127.0.0.1:8888/", 15)

if client.request("VmxSupportDetection", kind=ValueKind.BOOL):
    print(client.request("CpuReadVendorString", kind=ValueKind.STRING))
    print(client.request("RunCommand", {"command": "r"}))
    base = client.request("DebuggerGetKernelBase", kind=ValueKind.UINT64)
    print(hex(base))
```

### `hyperdbg_client.client`

- `Client(base_url="http://127.0.0.1:8888/", timeout=15.0)` sends GET
  requests with `Connection: close`.
  - `Client.get(endpoint, params=None)` returns the reply body as text.
    Any status other than 200 raises `ServerError`.
  - `Client.request(endpoint, params=None, kind=ValueKind.STRING)` fetches
    the endpoint and converts the body with `parse_value`.
- `build_url(base_url, endpoint, params=None)` joins the base URL and
  endpoint. It then appends the parameters as a query string, with keys
  and values percent-encoded.
- `parse_value(text, kind)` converts a reply body into a value of the
  given `ValueKind`. Surrounding whitespace is dropped first. A leading
  `0x` is also removed, and for integer kinds it selects base 16.
  - `BOOL` accepts `true` or `false`, in any case.
  - `BYTES` decodes a hex string.
  - The integer kinds (`INT`, `INT8` … `INT64`, `UINT`, `UINT8` …
    `UINT64`, `UINTPTR`) check the value against the range of their bit
    size.
  - `FLOAT32` and `FLOAT64` read floating-point numbers. `FLOAT32`
    rounds the result to single precision.
  - `STRING` returns the trimmed text.
  - `VOID` returns `None`.

  A reply that cannot be read as the requested kind raises `ValueError`.
- `ServerError` carries `status`, `body` and `url` of the failed request.

### `hyperdbg_client.hexjson`

These helpers handle JSON scalars written as `0x`-prefixed hex strings.
Each one accepts `bytes` or `str`, with or without the surrounding quotes.

- `decode_hex_uint64(data)` returns an unsigned 64-bit integer.
- `encode_hex_uint64(value)` returns a quoted string, such as `"0x1f"`.
- `decode_hex_int(data)` reads a signed 64-bit hex number. It returns the
  number as an unsigned 64-bit value, so `-1` becomes `0xffffffffffffffff`.
- `decode_hex_bytes(data)` returns raw bytes.
- `decode_hex_string(data)` returns the decoded bytes as text. Bytes that
  are not valid UTF-8 are kept as surrogate escapes.

Malformed or out-of-range input raises `ValueError`.

## What this package does not do

The package has no named method for each debugger operation. Callers
pass the endpoint name, such as `RunCommand`, and its query parameters
to `Client.request` themselves, as strings. It also has no Python
definitions of the debugger's enums or structures, such as register
identifiers or memory-read options. Those have to be encoded by the
caller in the form the server expects. There is no command-line tool
and no server.