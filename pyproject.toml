[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textart"
version = "0.1.0"
description = "A terminal editor for text art with drawing tools, undo/redo and frame animation"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii-art", "text-art", "terminal", "animation", "drawing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Artistic Software",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
textart = "textart.app:main"

[tool.hatch.build.targets.wheel]
packages = ["textart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
