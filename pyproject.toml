[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katvan"
version = "0.10.0"
description = "Core logic of a bidirectional-text-friendly Typst editor shell: settings, recent files, backups, search, preview state and status text"
requires-python = ">=3.10"
dependencies = []
keywords = ["typst", "editor", "bidi", "search", "backup", "recent-files"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["katvan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
