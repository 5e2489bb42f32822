"""
Document templating: composing the defect document and writing it to disk.
"""

from defect_init.template.composer import DocumentComposer, render_document
from defect_init.template.writer import DefectTarget, create_target, resolve_target, write_document

__all__ = [
    "DocumentComposer",
    "render_document",
    "DefectTarget",
    "create_target",
    "resolve_target",
    "write_document",
]
