# latticefields

Building blocks for coarse-grained lattice models of liquids near surfaces
and solutes: periodic-box geometry, Lennard-Jones potentials, smearing
functions, a neighbour cell list, a reader for brace-structured parameter
files, a `.gro` coordinate reader and a small BMP writer.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `latticefields.vecmath`: element-wise `add`, `sub`, `mul`, `scale`,
  `div`; `norm2`, `dot`, `cross`, `mean`, `var`, `vec_to_array`; and
  nested-tuple matrix helpers `matrix_mult`, `matrix_hadamard`,
  `matrix_scalar_mult`, `arr_to_col`, `arr_to_row`, `col_to_arr`,
  `row_to_arr`. Length and shape mismatches raise `ValueError`.
- `latticefields.pbc`: `wrap_number`, `wrap_index`, `place_inside_box`,
  `distance` (minimum image), `distance_no_pbc`, `nearest_image_1d` and
  `nearest_image_3d` for orthorhombic boxes.
- `latticefields.smear`: `heaviside`, the smearing kernel `phi_x`, its
  constants `indus_k`, `indus_k1`, `indus_k2`, the smoothed indicators
  `h_x` and `h_r`, and their derivatives `dh_x` and `dh_r`.
- `latticefields.forcefields`: `lj_6_12(r, epsilon, sigma)` and
  `lj_3_9(r, epsilon, sigma)`.
- `latticefields.cellgrid`: `CellGrid(cutoff, box_size)` bins indices by
  position with `add_index(atom_index, position)` and returns the indices in
  the 27 surrounding cells with `nearby_indices(position, exclude=None)`;
  `reset(cutoff, box_size)` rebuilds an empty grid.
- `latticefields.bitmap`: `write_bitmap(image, height, width, path)` writes
  rows of BGR bytes as an uncompressed 24-bit BMP; `bitmap_file_header` and
  `bitmap_info_header` return the two headers.
- `latticefields.stringtools`: `string_to_bool`, `string_to_value`,
  `strings_to_vector`, `strings_to_array`, `split`, `string_to_vector`
  (the compact `[x,y,z]` form), `trim_whitespace`,
  `remove_trailing_comment`, `get_file_extension`, `is_number` and
  `fixed_width`.
- `latticefields.groreader`: `read_gro(path)` returns a list of
  `SimpleAtom` records with position `x`, velocity `v` (zero when the file
  has none), `name` and `resname`.
- `latticefields.parampack` and `latticefields.inputparser`: the parameter
  file reader, described below.

## Parameter files

Parameter files are whitespace-separated tokens. Any token containing `#`
starts a comment that runs to the end of the line.

```
OutputFile = atoms.txt        # a single value
GroScale   = 10.0
Atomdef = {                   # a nested block
  atomname = OW
  resname  = SOL
  params   = [ 0.65 0.32 0.4 ]   # a vector
}
```

```python
import io
from latticefields.inputparser import InputParser
from latticefields.parampack import KeyType

text = "GroScale = 10.0\nAtomdef = { atomname = OW params = [ 0.65 0.32 ] }\n"
pack = InputParser().parse_stream(io.StringIO(text), "example")

pack.read_number("GroScale", KeyType.OPTIONAL, float)        # 10.0
atomdef = pack.find_required_parameter_pack("Atomdef")
atomdef.read_string("atomname", KeyType.REQUIRED)            # "OW"
atomdef.read_vector("params", KeyType.REQUIRED, float)       # [0.65, 0.32]
```

`InputParser().parse_file(path)` does the same for a file and names the pack
after the path. A `ParameterPack` may hold several entries under one key:
`find_values`, `find_vectors` and `find_parameter_packs` return them all,
while `find_value`, `find_vector`, `find_parameter_pack` and the `read_*`
methods expect at most one and return `None` for an absent optional key.
A missing required key raises `KeyNotFoundError`; a duplicated unique key
raises `DuplicateKeyError`. `format()` returns a readable dump of the pack.

Malformed files raise a `ParseError` subclass: `IncompleteEntryError`,
`MissingDelimiterError`, `MissingBracketError` or `MissingBraceError`.

## What this package does not do

It installs no command-line programs. It does not generate potential fields
on a lattice, has no shaped (box, cylinder, ellipsoid) potentials, no
N-dimensional matrix type or finite-difference derivatives, and does not
read or write binary trajectory or field frames, nor convert them to XYZ.
The pieces above are the building blocks such tools would use.