"""Investigator Sheet: Call of Cthulhu character sheets backed by a spreadsheet."""
