"""
配置档案加载模块 (Profile Loader Module)
======================================

从 YAML 档案文件加载表头别名配置，用于识别不同导出格式中的列名。

示例档案:
    profile_id: "tracker_v2"
    title_prefix: "Defect "
    header_aliases:
      Summary: ["Short Description"]
      Comments: ["Comments"]
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from defect_init.errors import ProfileError
from defect_init.ir import CanonicalField

# 项目根目录
# defect_init/profile_loader.py → parents[1] 才是仓库根目录
REPO_ROOT = Path(__file__).resolve().parents[1]


def _ensure_dict(value: Any) -> Dict[str, Any]:
    """
    确保返回字典类型，非字典则返回空字典。
    """
    if isinstance(value, dict):
        return value
    return {}


def _ensure_str_list(value: Any) -> List[str]:
    """确保返回字符串列表，过滤空白项与非字符串项；单个字符串视为单元素列表。"""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    out: List[str] = []
    for item in value:
        if isinstance(item, str) and item.strip():
            out.append(item.strip())
    return out


def _canonical_field(name: Any) -> Optional[CanonicalField]:
    if not isinstance(name, str):
        return None
    try:
        return CanonicalField(name.strip())
    except ValueError:
        return None


def empty_profile() -> dict:
    return {"profile_id": None, "title_prefix": None, "header_aliases": {}}


def load_profile(profile_path: Optional[str]) -> dict:
    """
    从 YAML 文件加载表头档案。

    参数:
        profile_path: 档案文件路径，支持相对路径（相对于项目根）；为空时返回空档案

    返回:
        包含 profile_id、title_prefix、header_aliases 的字典；
        header_aliases 的键为 CanonicalField，未知字段名被忽略

    抛出:
        ProfileError: 档案不存在或不是合法 YAML 时
    """
    if not profile_path:
        return empty_profile()

    path = Path(profile_path).expanduser()
    if not path.is_absolute():
        cwd_path = path.resolve()
        path = cwd_path if cwd_path.exists() else (REPO_ROOT / path).resolve()
    if not path.exists():
        raise ProfileError(f"profile not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ProfileError(f"profile is not valid YAML: {path}", {"error": str(exc)}) from exc
    data = _ensure_dict(raw)

    header_aliases: Dict[CanonicalField, List[str]] = {}
    for key, value in _ensure_dict(data.get("header_aliases")).items():
        field = _canonical_field(key)
        headers = _ensure_str_list(value)
        if field is not None and headers:
            header_aliases[field] = headers

    title_prefix = data.get("title_prefix")
    if not isinstance(title_prefix, str):
        title_prefix = None

    return {
        "profile_id": data.get("profile_id"),
        "title_prefix": title_prefix,
        "header_aliases": header_aliases,
    }
