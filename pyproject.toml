[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patterndemos"
version = "0.1.0"
description = "Small runnable demonstrations of the Model-View-Controller and layered architecture patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["design patterns", "mvc", "observer", "layers", "architecture", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patterndemos-voting = "patterndemos.voting:main"
patterndemos-layers = "patterndemos.layered_client:main"

[tool.hatch.build.targets.wheel]
packages = ["patterndemos"]

[tool.pytest.ini_options]
addopts = "-ra"
