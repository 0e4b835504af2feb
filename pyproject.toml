[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rankvector"
version = "0.1.0"
description = "A vector of integers addressed by rank, stored in a size-augmented AVL tree, with an interactive command shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "tree", "vector", "rank", "order-statistic", "data-structure"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
rankvector = "rankvector.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rankvector"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
