[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kicache"
version = "0.1.0"
description = "HTTP service that looks up Dragon Ball characters, caching results in Redis"
requires-python = ">=3.10"
keywords = ["dragon ball", "redis", "cache", "rest", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "redis",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
kicache = "kicache.main:main"

[tool.hatch.build.targets.wheel]
packages = ["kicache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
