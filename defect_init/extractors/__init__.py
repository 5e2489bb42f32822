"""
Extractors for input sources.

Only spreadsheet exports are supported; see ``defect_init.extractors.spreadsheet``.
"""
