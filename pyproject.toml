[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "y11"
version = "0.1.0"
description = "A small retained-mode widget toolkit with flexbox-like layouts, keyframe animations and an event loop"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["gui", "widgets", "layout", "animation", "event-loop", "pygame"]
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
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
y11-demo = "y11.app:main"

[tool.hatch.build.targets.wheel]
packages = ["y11"]

[tool.pytest.ini_options]
addopts = "-ra"
