"""
配置模块 (Configuration Module)
==============================

从环境变量和 .env 文件加载应用配置：输出根目录、文档扩展名、模板版本、日志级别等。
"""

import logging

from pydantic_settings import BaseSettings
from pydantic import field_validator
from dotenv import load_dotenv

load_dotenv()

_VALID_REVISIONS = ("classic", "revised")


class Settings(BaseSettings):
    """
    应用配置类，继承自 Pydantic BaseSettings，支持从环境变量自动加载。

    属性:
        DEFECT_BASE_DIR: 新建缺陷文件夹的根目录；为空时使用当前工作目录
        DOCUMENT_EXTENSION: 缺陷文档扩展名
        SCHEMA_REVISION: 文档模板版本（classic / revised）
        TITLE_PREFIX: Item ID 前缀，用于生成标题
        HEADER_PROFILE_PATH: 可选的表头别名 YAML 档案
        LOG_LEVEL: CLI 日志级别
    """
    DEFECT_BASE_DIR: str = ""
    DOCUMENT_EXTENSION: str = ".md"
    SCHEMA_REVISION: str = "revised"
    TITLE_PREFIX: str = "Defect "
    HEADER_PROFILE_PATH: str = ""
    LOG_LEVEL: str = "WARNING"

    @field_validator("DOCUMENT_EXTENSION")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        """确保扩展名以 '.' 开头且非空。"""
        v = (v or "").strip()
        if not v.startswith("."):
            v = "." + v
        if v == ".":
            raise ValueError("DOCUMENT_EXTENSION must not be empty.")
        return v

    @field_validator("SCHEMA_REVISION")
    @classmethod
    def validate_revision(cls, v: str) -> str:
        v = (v or "").strip().lower()
        if v not in _VALID_REVISIONS:
            raise ValueError(
                f"SCHEMA_REVISION must be one of {', '.join(_VALID_REVISIONS)}, got {v!r}."
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = (v or "").strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"LOG_LEVEL is not a valid logging level: {v!r}.")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


# 全局单例，避免重复加载配置
_settings_instance = None


def get_settings() -> Settings:
    """
    获取配置单例。

    首次调用时创建 Settings 实例并缓存，后续调用返回同一实例。
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """清除缓存的配置单例（测试中修改环境变量后使用）。"""
    global _settings_instance
    _settings_instance = None
