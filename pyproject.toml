[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "siegekit"
version = "0.1.0"
description = "Building blocks for HTTP load testing: response header parsing, URL path escaping, text helpers, a run timer and an MD5 digest"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "load-testing", "benchmark", "headers", "url-escaping", "md5"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Testing :: Traffic Generation",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["siegekit"]

[tool.pytest.ini_options]
addopts = "-ra"
