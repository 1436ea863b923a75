[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spinup_s3"
version = "0.1.0"
description = "CloudFront website distributions, service configuration and Cyberduck bookmarks for S3-backed sites"
requires-python = ">=3.10"
keywords = ["s3", "cloudfront", "website", "cyberduck", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spinup_s3"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
