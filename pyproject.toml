[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dodge"
version = "0.1.0"
description = "A minimal static site generator for Markdown blogs, with themed pages, an RSS feed and a development server"
requires-python = ">=3.11"
keywords = ["static site generator", "markdown", "blog", "rss"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "markdown-it-py",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dodge = "dodge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dodge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
