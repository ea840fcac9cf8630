[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "framekit"
version = "0.1.0"
description = "A small 2D game framework on pygame: layered scenes, components, box colliders, sprite animation and a frame loop"
requires-python = ">=3.10"
keywords = ["game", "2d", "framework", "pygame", "collision", "animation", "scene"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
framekit = "framekit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["framekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
