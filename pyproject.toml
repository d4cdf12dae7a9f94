[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cotigraphy"
version = "1.0.0"
description = "Turn a GitHub contribution calendar into an animated WebP of a worm eating its way through your contributions."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "github",
    "contributions",
    "contribution-calendar",
    "animation",
    "webp",
    "worm",
]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cotigraphy = "cotigraphy.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cotigraphy"]

[tool.hatch.build.targets.sdist]
include = [
    "cotigraphy",
    "tests",
]

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
