[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "followers-service"
version = "0.1.0"
description = "HTTP service that records follow relationships between users and lists followers and followings"
requires-python = ">=3.10"
keywords = ["followers", "social", "http", "flask", "sqlalchemy", "postgres"]
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
    "sqlalchemy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
followers-service = "followers_service.main:main"

[tool.hatch.build.targets.wheel]
packages = ["followers_service"]

[tool.pytest.ini_options]
addopts = "-ra"
