"""
流水线模块 (Pipeline Module)
===========================

串联标题解析 → 表格提取 → 目标创建 → 文档组装 → 写入。

两条路径:
- 纯标题：create_bare_defect()
- 表格导出：create_defect_from_spreadsheet()
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence, Union

from defect_init.errors import UsageError
from defect_init.extractors.spreadsheet import (
    DEFAULT_TITLE_PREFIX,
    FieldExtractor,
    SpreadsheetReader,
    is_spreadsheet_path,
    require_title,
)
from defect_init.ir import CanonicalField, FieldMapping, SchemaRevision
from defect_init.logger import get_logger
from defect_init.template.composer import DocumentComposer
from defect_init.template.writer import DefectTarget, create_target, resolve_target, write_document

logger = get_logger(__name__)

PathLike = Union[str, Path]

TITLE_PROMPT = "Enter Defect Title: "
MAX_TITLE_WORDS = 2


@dataclass(frozen=True)
class Invocation:
    """
    一次调用的输入来源。

    属性:
        title: 直接给出的标题（交互输入或命令行参数）
        spreadsheet: 表格导出文件路径；与 title 二选一
    """
    title: Optional[str] = None
    spreadsheet: Optional[Path] = None

    @property
    def mode(self) -> str:
        return "spreadsheet" if self.spreadsheet is not None else "bare"


@dataclass(frozen=True)
class CreationResult:
    """一次调用的结果：标题、目标路径、是否写入了内容。"""
    title: str
    target: DefectTarget
    written: bool
    mode: str
    fields: Optional[FieldMapping] = None


def resolve_invocation(
    args: Sequence[str],
    prompt: Optional[Callable[[str], str]] = None,
) -> Invocation:
    """
    根据命令行参数确定标题来源。

    - 0 个参数：交互式输入标题
    - 1 个表格路径参数：表格模式
    - 1 个参数：参数即标题
    - 2 个参数：以空格拼接为标题
    - 更多参数：UsageError

    抛出:
        UsageError: 参数过多或标题为空时
    """
    args = list(args)
    if len(args) > MAX_TITLE_WORDS:
        raise UsageError(
            f"Expected at most {MAX_TITLE_WORDS} arguments, got {len(args)}",
            {"args": args},
        )
    if len(args) == 1 and is_spreadsheet_path(args[0]):
        return Invocation(spreadsheet=Path(args[0]).expanduser())
    if args:
        title = " ".join(args)
    else:
        try:
            title = (prompt or input)(TITLE_PROMPT)
        except EOFError:
            title = ""
    title = (title or "").strip()
    if not title:
        raise UsageError("Defect title must not be empty")
    return Invocation(title=title)


def create_bare_defect(
    title: str,
    base_dir: PathLike,
    extension: str = ".md",
    revision: Union[SchemaRevision, str] = SchemaRevision.REVISED,
) -> CreationResult:
    """
    创建仅含段落骨架的缺陷文档。

    抛出:
        UsageError: 标题不可用作文件夹名时
        TargetAlreadyExists: 文件夹或文档已存在时
    """
    target = create_target(resolve_target(base_dir, title, extension))
    written = write_document(target.document, DocumentComposer(revision).render(title))
    return CreationResult(title=title, target=target, written=written, mode="bare")


def create_defect_from_spreadsheet(
    spreadsheet: PathLike,
    base_dir: PathLike,
    extension: str = ".md",
    revision: Union[SchemaRevision, str] = SchemaRevision.REVISED,
    header_aliases: Optional[Mapping[CanonicalField, Sequence[str]]] = None,
    title_prefix: str = DEFAULT_TITLE_PREFIX,
    reader: Optional[SpreadsheetReader] = None,
) -> CreationResult:
    """
    从表格导出的首条记录创建并填充缺陷文档。

    抛出:
        DecodeError: 表格无法读取时
        MissingRequiredField: 表格缺少 Item ID 列时
        TargetAlreadyExists: 文件夹或文档已存在时
    """
    reader = reader or SpreadsheetReader()
    raw_row = reader.read_raw_row(spreadsheet)
    fields = FieldExtractor(header_aliases, title_prefix).extract(raw_row)
    title = require_title(fields, raw_row)
    logger.info("Spreadsheet %s yields title %r", spreadsheet, title)

    target = create_target(resolve_target(base_dir, title, extension))
    written = write_document(target.document, DocumentComposer(revision).render(title, fields))
    return CreationResult(title=title, target=target, written=written, mode="spreadsheet", fields=fields)


def run(
    invocation: Invocation,
    base_dir: PathLike,
    extension: str = ".md",
    revision: Union[SchemaRevision, str] = SchemaRevision.REVISED,
    header_aliases: Optional[Mapping[CanonicalField, Sequence[str]]] = None,
    title_prefix: str = DEFAULT_TITLE_PREFIX,
) -> CreationResult:
    """按调用模式分派到对应路径。"""
    if invocation.spreadsheet is not None:
        return create_defect_from_spreadsheet(
            invocation.spreadsheet,
            base_dir,
            extension=extension,
            revision=revision,
            header_aliases=header_aliases,
            title_prefix=title_prefix,
        )
    return create_bare_defect(invocation.title or "", base_dir, extension=extension, revision=revision)
