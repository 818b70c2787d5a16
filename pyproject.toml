[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barstatus"
version = "0.1.0"
description = "A small status line generator for window manager bars and terminals"
requires-python = ">=3.10"
keywords = ["status", "statusbar", "monitoring", "x11", "window-manager"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
barstatus = "barstatus.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["barstatus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
