[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyprdash"
version = "0.1.0"
description = "A small application launcher dashboard that lists desktop entries with their theme icons"
requires-python = ">=3.11"
dependencies = []
keywords = ["launcher", "dashboard", "desktop", "xdg", "icons", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hyprdash = "hyprdash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hyprdash"]

[tool.pytest.ini_options]
addopts = "-ra"
