[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "virtualpiano"
version = "0.1.0"
description = "A small on-screen piano played from the keyboard or mouse, with built-in songs"
requires-python = ">=3.10"
keywords = ["piano", "music", "pygame", "keyboard", "songs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
virtualpiano = "virtualpiano.app:main"

[tool.hatch.build.targets.wheel]
packages = ["virtualpiano"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
