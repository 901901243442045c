[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "widgetdemos"
version = "0.1.0"
description = "Small Tkinter widget demos: browser-style tabs, a filtered tree, a search-and-jump tree and a two-level combo box"
requires-python = ">=3.10"
dependencies = []
keywords = ["tkinter", "widgets", "tabs", "tree", "search", "combobox", "gui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Widget Sets",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
widgetdemos-tabs = "widgetdemos.tabs:main"
widgetdemos-treefilter = "widgetdemos.treefilter:main"
widgetdemos-searchjump = "widgetdemos.searchjump:main"
widgetdemos-combo = "widgetdemos.combo:main"

[tool.hatch.build.targets.wheel]
packages = ["widgetdemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
