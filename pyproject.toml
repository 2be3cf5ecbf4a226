[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvkit"
version = "0.1.0"
description = "Sv39 paging arithmetic, an ELF header codec, a shell parser, a small grep, a printf, a free-list allocator and a Park-Miller generator in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "risc-v",
    "sv39",
    "page-table",
    "elf",
    "shell",
    "parser",
    "grep",
    "malloc",
    "prng",
    "teaching",
]
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
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rvkit-grep = "rvkit.grep:main"

[tool.hatch.build.targets.wheel]
packages = ["rvkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
