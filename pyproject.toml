[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures: binary search trees, linked lists, stacks and queues"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "binary search tree", "linked list", "stack", "queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-menu = "structkit.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
