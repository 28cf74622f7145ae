[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyline"
version = "0.1.0"
description = "Build 3D printable STL models and text previews of GitHub contribution history"
requires-python = ">=3.10"
dependencies = []
keywords = ["github", "contributions", "stl", "3d-printing", "skyline", "ascii-art"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skyline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
