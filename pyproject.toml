[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mallas3d"
version = "0.1.0"
description = "Indexed triangle meshes, ASCII PLY reading, surfaces of revolution and a windowing-free viewer scene model"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "ply", "3d", "revolution", "geometry", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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
packages = ["mallas3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
