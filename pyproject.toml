[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "streamecs"
version = "0.0.0"
description = "Building blocks for an entity-component-system: generational entity keys, type-keyed resource registries, resource bundles and dependency containers."
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "gamedev", "resources", "generational-index"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["streamecs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
