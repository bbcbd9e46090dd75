[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpsolutions"
version = "0.1.0"
description = "Competitive programming solutions and helpers: meet-in-the-middle subset sums, grid and union-find problems, and many short contest problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "codeforces", "puzzles", "union-find"]
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
cpsolutions-mitm = "cpsolutions.meet_in_middle:main"

[tool.hatch.build.targets.wheel]
packages = ["cpsolutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
