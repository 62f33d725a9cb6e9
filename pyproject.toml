[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kangmath"
version = "2.2.0"
description = "Fixed-width big integers, prime-field arithmetic, projective points and a Mersenne Twister generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "finite-field", "montgomery", "tonelli-shanks", "elliptic-curve", "mersenne-twister"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["kangmath"]

[tool.hatch.build.targets.sdist]
include = ["kangmath", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["kangmath"]
