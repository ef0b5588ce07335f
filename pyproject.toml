[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "udeastay"
version = "0.1.0"
description = "Lodging booking records: hosts, guests, lodgings and reservations loaded from pipe-separated files, with login by document and password."
requires-python = ">=3.10"
dependencies = []
keywords = ["lodging", "booking", "reservations", "hosts", "guests"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
udeastay = "udeastay.system:main"

[tool.hatch.build.targets.wheel]
packages = ["udeastay"]

[tool.pytest.ini_options]
addopts = "-ra"
