[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "garbled"
version = "0.1.0"
description = "Boolean circuit builder and fixed-width unsigned integers evaluated through circuits, with length-prefixed message framing"
requires-python = ">=3.10"
dependencies = []
keywords = ["boolean circuit", "garbled circuits", "secure computation", "mpc", "fixed-width integers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["garbled"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
