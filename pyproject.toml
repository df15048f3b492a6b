[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshforge"
version = "0.1.0"
description = "Generate 3D meshes from primitives, composable transforms and plugins."
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "mesh", "geometry", "modeling", "transform", "procedural"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
