[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "typelogic"
version = "0.1.0"
description = "Type-Logical Grammar: logical types, lexicons, natural deduction proofs and proof nets"
requires-python = ">=3.10"
dependencies = []
keywords = ["type-logical grammar", "lambek calculus", "parsing", "linguistics", "proof nets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["typelogic*"]

[tool.pytest.ini_options]
addopts = "-ra"
