[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nairal"
version = "0.1.0"
description = "A dodge-the-obstacles arcade game built on a small entity-component-system core"
requires-python = ">=3.10"
keywords = ["game", "arcade", "ecs", "entity-component-system", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nairal = "nairal.game:main"

[tool.hatch.build.targets.wheel]
packages = ["nairal"]

[tool.pytest.ini_options]
addopts = "-ra"
