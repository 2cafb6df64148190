"""核心模块：配置与异常"""

from .config import Config
from .exceptions import SkillException, NotFoundError, DescriptorError

__all__ = [
    "Config",
    "SkillException",
    "NotFoundError",
    "DescriptorError",
]
