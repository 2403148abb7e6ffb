[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quark"
version = "0.1.0"
description = "Game engine building blocks: animation, culling, struct reflection, arenas, assets, text, files, input and material batches"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "animation", "arena", "frustum", "input", "assets", "materials"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["quark"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
