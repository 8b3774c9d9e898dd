[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poser"
version = "0.1.0"
description = "Mutable strings, placeholder formatting, console output, file opening, system and threading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "formatting", "text", "utilities", "threads", "spinlock"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
poser-demo = "poser.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["poser"]

[tool.pytest.ini_options]
addopts = "-ra"
