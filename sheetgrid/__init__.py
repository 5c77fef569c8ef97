"""Worksheet model for SpreadsheetML workbooks: cells, formulas, rows, columns and worksheet XML output."""

__version__ = "0.1.0"