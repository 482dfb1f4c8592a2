[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tddkata"
version = "0.1.0"
description = "Small worked katas and a poker league tracker with a command line game and a web server"
requires-python = ">=3.10"
keywords = ["kata", "poker", "league", "roman numerals", "svg", "clock", "blog"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Education",
]
dependencies = [
    "aiohttp",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "hypothesis",
]

[project.scripts]
tddkata-hello = "tddkata.hello:main"
tddkata-countdown = "tddkata.countdown:main"
tddkata-clockface = "tddkata.clockface:main"
tddkata-greeter = "tddkata.greeter:main"
tddkata-posts = "tddkata.blog.posts:main"
poker-cli = "tddkata.poker.commands:cli_main"
poker-webserver = "tddkata.poker.commands:webserver_main"

[tool.hatch.build.targets.wheel]
packages = ["tddkata"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
