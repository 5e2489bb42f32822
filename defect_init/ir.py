"""
中间表示模块 (Intermediate Representation Module)
================================================

定义提取与生成流程中的核心数据结构：RawRow、FieldMapping、Document 等。
"""

from enum import Enum
from typing import Dict, List, Sequence, Tuple

from pydantic import BaseModel


class CanonicalField(str, Enum):
    """
    缺陷文档中可填充的固定字段。

    取值即字段键名；作为 str 子类，可直接与普通字符串比较。
    """
    TITLE = "Title"
    SUMMARY = "Summary"
    DETECTED_IN_RELEASE = "DetectedInRelease"
    CREATION_DATE = "CreationDate"
    CREATOR_FULL_NAME = "CreatorFullName"
    ENVIRONMENT = "Environment"
    CUSTOMER_DESIRED_RELEASE = "CustomerDesiredRelease"
    DESCRIPTION = "Description"
    COMMENTS = "Comments"


class SchemaRevision(str, Enum):
    """
    文档模板版本。

    CLASSIC: 无 Developer Analysis 段，Description 原样单行输出
    REVISED: 增加 Developer Analysis 段，Description 按行拆分为列表
    """
    CLASSIC = "classic"
    REVISED = "revised"


# 字段键 → 清洗后的文本；仅包含表格中实际出现的字段。
# 缺失的键表示“未提供”，与“提供了空字符串”不同。
FieldMapping = Dict[CanonicalField, str]


class RawRow(BaseModel):
    """
    表格首行（表头）与首条数据行按列配对后的结果。

    属性:
        cells: (表头, 值) 对的有序列表；表头可能重复
    """
    cells: List[Tuple[str, str]]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "RawRow":
        """
        由解码后的行构建 RawRow。

        rows[0] 视为表头，rows[1] 视为唯一的数据行，其余行忽略。
        数据行比表头短时以空字符串补齐。
        """
        if not rows:
            return cls(cells=[])
        headers = [str(h) for h in rows[0]]
        values = [str(v) for v in rows[1]] if len(rows) > 1 else []
        values = values + [""] * (len(headers) - len(values))
        return cls(cells=list(zip(headers, values)))

    @property
    def headers(self) -> List[str]:
        return [header for header, _ in self.cells]

    def __len__(self) -> int:
        return len(self.cells)


class DocumentSection(BaseModel):
    """
    文档中的一个二级标题段落。

    属性:
        name: 段落名称（如 "Summary"）
        lines: 段落正文行，可为空
    """
    name: str
    lines: List[str] = []

    @property
    def heading(self) -> str:
        return "## " + self.name

    def render(self) -> str:
        return "\n".join([self.heading] + list(self.lines))


class Document(BaseModel):
    """
    完整的缺陷文档：一级标题 + 固定顺序的段落。
    """
    title: str
    sections: List[DocumentSection]

    @property
    def section_names(self) -> List[str]:
        return [section.name for section in self.sections]

    def get_section(self, name: str) -> DocumentSection:
        for section in self.sections:
            if section.name == name:
                return section
        raise KeyError(name)

    def render(self) -> str:
        """
        渲染为 Markdown 文本。

        每个块（标题行 + 正文行）之间以一个空行分隔，文本以单个换行结尾。
        """
        blocks = ["# " + self.title] + [section.render() for section in self.sections]
        return "\n\n".join(blocks) + "\n"
