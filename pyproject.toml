[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "caspersdk"
version = "1.0.0"
description = "Encoding helpers and core data types for the Casper network: CEP-57 checksummed hex, length-prefixed big integers, URefs, signatures and RPC results."
requires-python = ">=3.10"
dependencies = []
keywords = ["casper", "blockchain", "cep57", "checksum", "uref", "signature", "json-rpc"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["caspersdk"]

[tool.hatch.build.targets.sdist]
include = ["caspersdk", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
