[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sheetgrid"
version = "0.1.0"
description = "Worksheet model for SpreadsheetML (.xlsx) files: cells, formulas, shared strings, rows, columns, merges and worksheet XML output."
requires-python = ">=3.10"
dependencies = []
keywords = ["xlsx", "spreadsheet", "excel", "spreadsheetml", "worksheet", "ooxml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Spreadsheet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sheetgrid"]

[tool.pytest.ini_options]
addopts = "-ra"
