[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retro-image"
version = "1.0.0"
description = "Small RGBA bitmap and colour library for 2D game development"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["image", "bitmap", "rgba", "color", "game", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["retro_image"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
