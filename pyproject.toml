[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marica"
version = "0.1.0"
description = "ASE text parsing, PSK mesh reading, wireframe edges, DDS headers, skeletal bones and scene graph transforms"
requires-python = ">=3.10"
keywords = ["ase", "psk", "dds", "3d", "mesh", "skeleton", "scene-graph", "wireframe"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: File Formats",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["marica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
