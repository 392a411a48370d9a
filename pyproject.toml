[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algo"
version = "0.1.0"
description = "Small classic algorithms: base conversion, arithmetic, list searches, FizzBuzz, Big O examples and simple sorts."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "bubble sort",
    "insertion sort",
    "base conversion",
    "gcd",
    "fibonacci",
    "big o",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algo-gcd = "algo.gcd_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algo"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
