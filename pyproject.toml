[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hlsflow"
version = "0.1.0"
description = "Behavioural models of small high-level-synthesis designs: RGB to YCoCg conversion and a point-to-point multiplier with its testbench"
requires-python = ">=3.10"
dependencies = []
keywords = ["hls", "eda", "ycocg", "dsc", "testbench", "simulation"]
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
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hlsflow-tb = "hlsflow.testbench:main"

[tool.hatch.build.targets.wheel]
packages = ["hlsflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
