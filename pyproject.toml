[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sandfall"
version = "0.1.0"
description = "A falling-sand pixel sandbox simulation and a skyline rectangle packer"
requires-python = ">=3.10"
dependencies = []
keywords = ["falling-sand", "sandbox", "simulation", "pixels", "rectangle-packing", "skyline"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["sandfall"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
