# marica

A library for reading 3D model data and working with transforms:

- **ASE text** (`marica.ase_tokenizer`, `marica.ase_node`, `marica.ase_rules`,
  `marica.ase_reader`): splits ASCII Scene Export text into tokens and parses
  it into a tree of `ReaderNode` objects. A table of per-key rules drives the
  parse, and you can extend it.
- **PSK meshes** (`marica.model`): `Model.read_psk` reads vertices, faces,
  materials, bones and vertex/bone influence links.
- **Wireframes** (`marica.wireframe_model`): `WireframeModel.from_model` merges
  vertices that share a position and keeps each triangle edge once.
- **DDS textures** (`marica.dds_info`): `DDSInfo.load` reads the size, mip map
  count, DXT1/DXT3/DXT5 compression and raw payload of a DDS file.
- **Transforms, bones and scene nodes** (`marica.transform`, `marica.skeletal`,
  `marica.scene_node`): numpy 4x4 matrices built from location, `Quaternion`
  rotation and per-axis scale. They compose through parent/child hierarchies.
- **Cameras and colours** (`marica.camera_manager`, `marica.color`): a
  `CameraManager` keeps cameras by alias and tracks the active one. A `Color`
  holds RGBA channels.

The package depends on numpy. The tests use pytest and are installed with the
`test` extra.

## Parsing ASE text

```python
from marica.ase_reader import parse_ase

text = '*COMMENT "hello"\n*SCENE {\n *SCENE_FIRSTFRAME 0\n}\n'
root = parse_ase(text)
root.get_child("COMMENT").value                               # "hello"
root.get_child("SCENE").get_child("SCENE_FIRSTFRAME").value   # 0
```

`load_ase(path)` reads a file and parses it the same way. Both functions also
accept an `Analyzer`. When none is given they use `default_analyzer()`, which
has rules for:

- the common block keys, such as `SCENE`, `MATERIAL_LIST`, `GEOMOBJECT` and
  `MESH`;
- integer, float, string and vector keys;
- the indexed mesh lists `MESH_VERTEX_LIST`, `MESH_TVERTLIST`,
  `MESH_FACE_LIST` and `MESH_TFACELIST`.

Keys that have no rule are skipped together with their blocks.

`ReaderNode.get_child(key)` behaves as follows:

- If one child is stored under `key`, it returns that child.
- If several are stored under `key`, it returns an `ARRAY` node holding all of them.
- If nothing is stored under `key`, it returns `None`.

Use `len(node)` and `node.get_element(i)` to walk the elements of an array node.

To handle a key yourself, register a rule with `Analyzer.add_rule(key, rule)`.
The rule can be an `IntRule`, `FloatRule`, `StringRule`, `DictRule`, `SetRule`,
`ValueRule`, or a `LambdaRule` that wraps a function taking the `Tokenizer`.
If the key already has a rule, that rule is kept.

## Meshes and wireframes

```python
from marica.model import Model
from marica.wireframe_model import WireframeModel

model = Model.read_psk("car.psk")
wire = WireframeModel.from_model(model)
print(len(wire.vertices), len(wire.edges))
```

How `read_psk` handles problem files:

- A file that cannot be opened gives an empty `Model`.
- A truncated file raises `ValueError`.
- An out-of-range index in the file raises `ValueError`.

## DDS textures

```python
from marica.dds_info import DDSInfo

info = DDSInfo.load("common.dds")
print(info.width, info.height, info.mip_map_count, info.compress_type)
```

How `DDSInfo.load` handles problem files:

- A file that cannot be read gives an empty `DDSInfo`.
- A file without the `DDS ` magic also gives an empty `DDSInfo`.
- A truncated header raises `ValueError`.

## Scene graph and skeleton

```python
from marica.scene_node import SceneNode

parent, child = SceneNode(), SceneNode()
parent.location = (1.0, 0.0, 0.0)
parent.add_child(child)
child.location = (0.0, 2.0, 0.0)
print(child.global_location())   # [1. 2. 0.]
```

Bones are kept by name in a `Skeletal`:

- `add_bone` raises `ValueError` for a name that is already used.
- `Bone.global_origin_matrix()` combines a bone's rest transform with those of
  its ancestors.

## What this package does not do

This package only reads and holds data. It does not provide:

- rendering, shaders, GPU buffers or textures on a graphics card;
- physics or sound;
- a viewer or any other command.

ASE text is parsed into a `ReaderNode` tree only. It is not converted into
`Model` objects. Ordinary image files (PNG, JPEG) are not loaded.