# fltkit

fltkit holds low-level pieces for reading and writing OpenFlight (`.flt`)
scene files from Python.

## What is in it

- `fltkit.reader.BinaryReader` reads typed values from a byte buffer
  (`BinaryReader(data)`) or from a file (`BinaryReader.open(path)`). It has
  big- and little-endian getters for 8-, 16- and 32-bit integers and 32- and
  64-bit floats, `read(length)`, 16-bit peeks, `rewind(n_bytes)`,
  `unget_uint32_be(value)` and `hex_dump(out, n_bytes)`. Reads past the end
  return zero bytes rather than raising. A reader opened from a file can call
  a progress callback set with `set_progress_callback(func, data)`. The
  reader reports its state through `position`, `length`, `remaining`,
  `filename` and `at_eof()`.
- `fltkit.writer.BinaryWriter` writes to a file through a 4 KiB buffer. It is a
  context manager, and it has `write(data)` and `put_*` methods that match the
  reader's getters. Integers are truncated to the width of the type that is
  written.
- `fltkit.records_hierarchy` defines dataclasses for the bodies of face, group,
  object, instance definition, instance reference and push/pop extension
  records: `FaceData`, `GroupData`, `ObjectData`, `InstanceDefinitionData`,
  `InstanceReferenceData` and `ExtensionData`. Each one has `unpack(data)` and
  `pack()`, and the layouts are big-endian. The module also defines the
  enumerations `FaceDrawType`, `FaceTemplate`, `FaceFlag`, `FaceLightMode` and
  `GroupFlag`.
- `fltkit.traversal` defines `TraversalAction`, the values a traversal callback
  may return, and `Callback`, which pairs a function with user data and calls
  it as `func(sysdata, data)`. `Callback` converts the result to a
  `TraversalAction` and raises `ValueError` when the value is unknown.
- `fltkit.growarray.GrowableArray` is a sequence that tracks its capacity and
  doubles it when the sequence fills.
- `fltkit.mempool.PoolSystem` is a registry of numbered arenas. Its `malloc`
  returns 8-byte-aligned slices of larger blocks as writable memoryviews.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from fltkit.reader import BinaryReader
from fltkit.writer import BinaryWriter
from fltkit.records_hierarchy import GroupData, GroupFlag

with BinaryWriter("out.bin") as out:
    out.put_uint16_be(2)                  # opcode
    out.put_uint16_be(4 + GroupData.SIZE) # record length
    out.write(GroupData(ascii_id="g1", flags=GroupFlag.FORWARD_ANIMATION).pack())

reader = BinaryReader.open("out.bin")
opcode = reader.get_uint16_be()
length = reader.get_uint16_be()
group = GroupData.unpack(reader.read(length - 4))
assert group.ascii_id == "g1" and group.animated
```

## What it does not do

fltkit cannot load or save a whole scene file. It has no node tree, no
vertex, material or texture model, and no code that walks a hierarchy. It has
no layouts for palette, matrix, texture, external reference or vertex records.
It has no command-line tool. Your own code reads record headers and dispatches
them by opcode.

The package has no runtime dependencies. It needs Python 3.10 or newer.