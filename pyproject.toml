[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tobkit"
version = "0.5.2"
description = "A small widget toolkit for 15-bit colour framebuffers: buttons, lists, file selectors, tabs and an on-screen keyboard."
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "widgets", "framebuffer", "rgb15", "toolkit", "touchscreen"]
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
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tobkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
