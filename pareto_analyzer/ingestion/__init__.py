"""
Ingestion layer — document sources and the tabular text parser.

Submodules:
  sheet_source — resolve a spreadsheet URL / file path into document text
  tabular      — parse comma-delimited text into ordered ``Record`` dicts
"""
