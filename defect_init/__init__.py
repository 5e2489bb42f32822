"""
defect_init: scaffold a defect work-item folder and its markdown document.
"""

__version__ = "0.3.0"
