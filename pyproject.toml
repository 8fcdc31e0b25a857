[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tweetapi"
version = "0.1.0"
description = "Data models, request options and stream handling for the Twitter v2 API"
requires-python = ">=3.11"
dependencies = []
keywords = ["twitter", "api", "tweets", "stream", "v2"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tweetapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
