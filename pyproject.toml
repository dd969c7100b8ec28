[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "infixcalc"
version = "1.0.0"
description = "An infix expression calculator with powers, remainders, factorials and a keypad model"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "infix", "postfix", "shunting-yard", "expression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
infixcalc = "infixcalc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["infixcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
