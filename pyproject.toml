[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numkit"
version = "0.1.0"
description = "Small numeric command-line tools: rate lookup and conversion, RPN evaluation, merge-insertion sorting"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpn", "calculator", "exchange-rate", "ford-johnson", "merge-insertion", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numkit-btc = "numkit.exchange:main"
numkit-rpn = "numkit.rpn:main"
numkit-pmerge = "numkit.pmerge:main"

[tool.hatch.build.targets.wheel]
packages = ["numkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
