"""配置管理"""

import os
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _split_keywords(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Config:
    """es_skill 配置类"""

    # 技能目录，None 表示使用随包分发的内置技能
    skills_dir: Optional[str] = field(default_factory=lambda: os.getenv("ES_SKILL_DIR") or None)

    # 额外的触发关键词，合并到每个技能的 triggers 中
    extra_trigger_keywords: List[str] = field(
        default_factory=lambda: _split_keywords(os.getenv("ES_SKILL_EXTRA_TRIGGERS"))
    )

    # 日志配置
    debug: bool = False
    log_level: str = field(default_factory=lambda: os.getenv("ES_SKILL_LOG_LEVEL", "INFO"))

    # 自定义配置
    custom_config: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Config":
        """从环境变量（含 .env 文件）创建配置"""
        load_dotenv(dotenv_path)
        return cls()

    def get(self, key: str, default: Any = None) -> Any:
        """获取配置值"""
        if hasattr(self, key):
            return getattr(self, key)
        return self.custom_config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """设置配置值"""
        if hasattr(self, key):
            setattr(self, key, value)
        else:
            self.custom_config[key] = value
