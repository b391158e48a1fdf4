[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oasmodel"
version = "0.1.0"
description = "Typed data model for OpenAPI 3.0 documents, with parsing from and serialisation to plain dictionaries."
requires-python = ">=3.10"
dependencies = []
keywords = ["openapi", "oas", "swagger", "api", "schema", "specification"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pyyaml",
]

[tool.hatch.build.targets.wheel]
packages = ["oasmodel"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
