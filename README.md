# dbuswire

`dbuswire` writes D-Bus values in the D-Bus wire format. It uses only the standard library.

## Installation

```
pip install dbuswire
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "dbuswire[test]"
pytest
```

## Modules

- `dbuswire.ostream` provides `MessageOStream`. It is an append-only little-endian byte stream, held in its `data` attribute, and it pads before each value to the alignment that value needs.
- `dbuswire.scalars` holds the abstract base `DBusType` and the basic types `Boolean`, `Byte`, `Double`, `String`, `ObjectPath` and `Signature`.
- `dbuswire.integers` holds the fixed-width integer types `Int16`, `Uint16`, `Int32`, `Uint32`, `Int64` and `Uint64`. Values wrap to their width when they are constructed.
- `dbuswire.containers` holds the container types `Struct`, `DictEntry` and `Variant`.
- `dbuswire.validation` checks basic type codes. `is_valid_basic_type` returns a bool. `check_basic_type` raises `InvalidTypeError`, a subclass of `ValueError`, for anything that is not a single basic type code.
- `dbuswire.utils` has the padding helpers `get_padding`, `is_aligned_to` and `is_aligned_to_8`, and the hex helpers `hex_to_binary` and `binary_to_hex`.

## Writing to a stream

```python
from dbuswire.ostream import MessageOStream

stream = MessageOStream()
stream.write_byte(21)
stream.write_string("Text")      # pad to 4, uint32 length, bytes, nul
stream.write_signature("a{sv}")  # length byte, bytes, nul
print(len(stream), bytes(stream.data))
```

The writers are:

- `write_byte` and `write_boolean`
- `write_int16`, `write_uint16`, `write_int32`, `write_uint32`, `write_int64` and `write_uint64`
- `write_double`
- `write_string` and `write_signature`. `write_signature` raises `ValueError` when the signature is longer than 255 bytes.
- `write`, which appends raw bytes, text as UTF-8, or the contents of another stream.

For padding there are `pad(alignment)`, `pad2`, `pad4` and `pad8`.

## Typed values

Every type has a `signature` property. Each type writes itself to a stream with `marshall(stream)`.

```python
from dbuswire.ostream import MessageOStream
from dbuswire.scalars import Byte, String
from dbuswire.integers import Int32, Uint32
from dbuswire.containers import Struct, DictEntry, Variant

record = Struct(Byte(85), String("example"))
record.add(Uint32(7))

entry = DictEntry(Int32(131073), record)
print(entry.signature)        # {i(ysu)}
print(entry.to_string())

out = MessageOStream()
entry.marshall(out)
Variant(Uint32(42)).marshall(out)
```

- `to_string(prefix)` returns an indented, human-readable dump of the value.
- `as_string()` returns the plain textual value. For a `Struct` it returns `[struct]`, and for a `DictEntry` it returns `[DictEntry]`.
- A `Struct` supports `len()`, indexing and iteration. You can empty it with `clear()`.
- A `DictEntry` key must be of a basic type, or `InvalidTypeError` is raised. Plain `str` keys and values become `String`. Plain `int` values become `Uint32`.
- A `Variant` writes the signature of the value it holds, then the value itself.

## Validation

```python
from dbuswire.validation import is_valid_basic_type, check_basic_type, InvalidTypeError

is_valid_basic_type("s")   # True
try:
    check_basic_type("v")
except InvalidTypeError as exc:
    print(exc)             # Invalid basic type: v
```

## What it does not do

- The package only writes. It has no input stream and does not read or unmarshall wire data back into values.
- It has no array type.
- It does not build message headers or whole messages.
- It does not authenticate and does not connect to a bus.