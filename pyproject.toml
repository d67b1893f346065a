[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolshelf"
version = "1.0.0"
description = "Small tools: regex find and replace in files, shape and string helpers, AES encryption, RGBA grayscale, line charts, HTTP fetching and tiny TCP/HTTP servers."
requires-python = ">=3.10"
keywords = [
    "find-replace",
    "regex",
    "cli",
    "aes",
    "grayscale",
    "chart",
    "tcp-server",
    "http-server",
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
    "Topic :: Utilities",
    "Topic :: Text Processing :: Filters",
]
dependencies = [
    "cryptography",
    "matplotlib",
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[project.scripts]
toolshelf-text = "toolshelf.cli:main"
toolshelf-fetch = "toolshelf.fetch:main"
toolshelf-sensors = "toolshelf.sensors:main"
toolshelf-serve = "toolshelf.webservers:main"

[tool.hatch.build.targets.wheel]
packages = ["toolshelf"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
