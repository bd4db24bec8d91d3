[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hpcmat"
version = "0.1.0"
description = "Typed matrices and interleaved images with helpers for arithmetic, PNM I/O, borders, channels, PSNR and timing"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["matrix", "image", "pnm", "ppm", "pgm", "psnr", "benchmark", "timing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hpcmat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
