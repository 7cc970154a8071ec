[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xv6util"
version = "0.1.0"
description = "Small Unix-style userland tools (grep, wc, cat, ls, find and more), a shell command parser, a printf formatter, a free-list allocator and kernel format helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unix",
    "userland",
    "grep",
    "wc",
    "shell",
    "parser",
    "printf",
    "malloc",
    "elf",
    "virtio",
    "risc-v",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv6-grep = "xv6util.grep:main"
xv6-wc = "xv6util.wc:main"
xv6-cat = "xv6util.cat:main"
xv6-echo = "xv6util.echo:main"
xv6-primes = "xv6util.primes:main"
xv6-pingpong = "xv6util.pingpong:main"
xv6-stressfs = "xv6util.stressfs:main"
xv6-ls = "xv6util.ls:main"
xv6-find = "xv6util.find:main"
xv6-ln = "xv6util.fsutils:ln_main"
xv6-mkdir = "xv6util.fsutils:mkdir_main"
xv6-rm = "xv6util.fsutils:rm_main"
xv6-kill = "xv6util.procutils:kill_main"
xv6-sleep = "xv6util.procutils:sleep_main"

[tool.hatch.build.targets.wheel]
packages = ["xv6util"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
