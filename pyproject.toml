[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gpbot"
version = "0.1.0"
description = "A small Minecraft protocol client library for building headless bots"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "bot", "protocol", "nbt", "varint"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gpbot = "gpbot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gpbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
