[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studykit"
version = "0.1.0"
description = "Small study programs: a library record keeper, school records and validators, a system monitor, a work-queue demo and assorted teaching helpers."
requires-python = ">=3.10"
keywords = ["education", "examples", "library-management", "school-records", "system-monitor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
studykit-library = "studykit.library.menu:main"
studykit-monitor = "studykit.system.runner:main"
studykit-crawler = "studykit.crawler:main"

[tool.hatch.build.targets.wheel]
packages = ["studykit"]

[tool.pytest.ini_options]
addopts = "-ra"
