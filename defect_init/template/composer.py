"""
文档组装模块 (Document Composer Module)
======================================

按固定段落模板生成缺陷文档文本。两种模式:
- 空白模式（无 FieldMapping）：仅输出标题与段落标题
- 填充模式（有 FieldMapping）：将表格字段写入 Summary、Details、Description、Comments 段
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple, Union

from defect_init.ir import CanonicalField, Document, DocumentSection, FieldMapping, SchemaRevision

SUMMARY = "Summary"
DETAILS = "Details"
DESCRIPTION = "Description"
REPRODUCTION_STEPS = "Reproduction Steps"
COMMENTS = "Comments"
DEVELOPER_ANALYSIS = "Developer Analysis"
SCREENSHOTS = "Screenshots"

# Description 仅在填充模式下出现
SECTION_ORDER: Dict[SchemaRevision, Tuple[str, ...]] = {
    SchemaRevision.CLASSIC: (
        SUMMARY, DETAILS, DESCRIPTION, REPRODUCTION_STEPS, COMMENTS, SCREENSHOTS,
    ),
    SchemaRevision.REVISED: (
        SUMMARY, DETAILS, DESCRIPTION, REPRODUCTION_STEPS, COMMENTS, DEVELOPER_ANALYSIS, SCREENSHOTS,
    ),
}

# Details 段的列表项：(字段, 标签)，顺序固定
DETAIL_BULLETS: Tuple[Tuple[CanonicalField, str], ...] = (
    (CanonicalField.DETECTED_IN_RELEASE, "Detected In"),
    (CanonicalField.CREATION_DATE, "Creation Date"),
    (CanonicalField.CREATOR_FULL_NAME, "Creator Full Name"),
    (CanonicalField.ENVIRONMENT, "Environment"),
    (CanonicalField.CUSTOMER_DESIRED_RELEASE, "Customer Desired Release"),
)

REPRODUCTION_STEPS_PLACEHOLDER = "**TODO**: Pull Reproduction Steps from the Description section"

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class DocumentComposer:
    """
    缺陷文档组装器。

    无状态：同一实例可重复调用 compose()。
    """

    def __init__(self, revision: Union[SchemaRevision, str] = SchemaRevision.REVISED):
        self.revision = SchemaRevision(revision)

    def compose(self, title: str, mapping: Optional[FieldMapping] = None) -> Document:
        """
        组装文档。

        参数:
            title: 一级标题文本
            mapping: 表格字段映射；为 None 时使用空白模式

        返回:
            段落顺序固定的 Document
        """
        populated = mapping is not None
        sections: List[DocumentSection] = []
        for name in SECTION_ORDER[self.revision]:
            if name == DESCRIPTION and not populated:
                continue
            lines = self._section_lines(name, mapping) if populated else []
            sections.append(DocumentSection(name=name, lines=lines))
        return Document(title=title, sections=sections)

    def render(self, title: str, mapping: Optional[FieldMapping] = None) -> str:
        return self.compose(title, mapping).render()

    # ------------------------------------------------------------------

    def _section_lines(self, name: str, mapping: FieldMapping) -> List[str]:
        if name == SUMMARY:
            return _text_lines(mapping.get(CanonicalField.SUMMARY))
        if name == DETAILS:
            return [
                f"* {label}: {mapping[field]}"
                for field, label in DETAIL_BULLETS
                if mapping.get(field)
            ]
        if name == DESCRIPTION:
            description = mapping.get(CanonicalField.DESCRIPTION)
            if self.revision is SchemaRevision.REVISED:
                return _bullet_lines(description)
            return _text_lines(description)
        if name == REPRODUCTION_STEPS:
            return [REPRODUCTION_STEPS_PLACEHOLDER]
        if name == COMMENTS:
            return _text_lines(mapping.get(CanonicalField.COMMENTS))
        # Developer Analysis / Screenshots are always left for the developer.
        return []


def _text_lines(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [value]


def _bullet_lines(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return ["* " + line for line in LINE_BREAK_RE.split(value) if line.strip()]


def render_document(
    title: str,
    mapping: Optional[FieldMapping] = None,
    revision: Union[SchemaRevision, str] = SchemaRevision.REVISED,
) -> str:
    """组装并渲染文档文本的便捷函数。"""
    return DocumentComposer(revision).render(title, mapping)
