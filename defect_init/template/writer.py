"""
文档写入模块 (Document Writer Module)
====================================

负责缺陷文件夹与文档的定位、创建和一次性写入。
已存在的文件夹或文件不会被修改。
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from defect_init.errors import TargetAlreadyExists, UsageError
from defect_init.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

_FORBIDDEN_TITLE_CHARS = {"/", "\\", os.sep}


@dataclass(frozen=True)
class DefectTarget:
    """
    缺陷产物在磁盘上的位置。

    属性:
        folder: 以标题命名的文件夹（保留空格）
        document: 文件夹内的文档（标题去空格 + 扩展名）
    """
    folder: Path
    document: Path

    def exists(self) -> bool:
        return self.folder.exists() or self.document.exists()


def document_filename(title: str, extension: str = ".md") -> str:
    """标题去除空格后加扩展名，如 "Defect 200" → "Defect200.md"。"""
    return title.replace(" ", "") + extension


def resolve_target(base_dir: PathLike, title: str, extension: str = ".md") -> DefectTarget:
    """
    根据根目录与标题计算目标路径，不访问磁盘。

    抛出:
        UsageError: 标题为空或包含路径分隔符时
    """
    if not title or not title.strip():
        raise UsageError("Defect title must not be empty")
    if any(ch in title for ch in _FORBIDDEN_TITLE_CHARS) or title.strip() in {".", ".."}:
        raise UsageError(f"Defect title cannot be used as a folder name: {title!r}")
    folder = Path(base_dir) / title
    return DefectTarget(folder=folder, document=folder / document_filename(title, extension))


def create_target(target: DefectTarget) -> DefectTarget:
    """
    创建文件夹与空文档。

    文件夹或文档任一已存在时抛出 TargetAlreadyExists，且不做任何修改。
    """
    if target.exists():
        raise TargetAlreadyExists(str(target.folder), str(target.document))
    target.folder.mkdir(parents=True)
    target.document.touch(exist_ok=False)
    logger.info("Created %s", target.document)
    return target


def write_document(path: PathLike, text: str) -> bool:
    """
    仅在文档缺失或为空时写入文本。

    返回:
        True 表示已写入；False 表示文档已有内容，未做任何修改
    """
    path = Path(path)
    if path.exists() and path.stat().st_size > 0:
        logger.warning("Skipping population of %s: file already has content", path)
        return False
    with path.open("w", encoding="utf-8", newline="\n") as fh:
        fh.write(text)
    logger.info("Wrote %d characters to %s", len(text), path)
    return True
