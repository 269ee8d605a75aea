"""ASE and PSK model readers, wireframe edges, DDS headers, bones, scene graph transforms, cameras and colours."""

__version__ = "0.1.0"