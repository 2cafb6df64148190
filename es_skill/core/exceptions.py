"""异常体系"""

from typing import Iterable, Optional


class SkillException(Exception):
    """es_skill 基础异常类"""
    pass


class NotFoundError(SkillException):
    """请求的文档、技能或工具不存在

    Attributes:
        identifier: 请求的标识符
        available: 当前可用的标识符列表
    """

    def __init__(self, identifier: str, available: Optional[Iterable[str]] = None, kind: str = "document"):
        self.identifier = identifier
        self.available = list(available or [])
        self.kind = kind
        message = f"{kind} '{identifier}' not found"
        if self.available:
            message += f"; available: {', '.join(self.available)}"
        super().__init__(message)


class DescriptorError(SkillException):
    """SKILL.md 中声明的参考文档列表无效（重复 id、文件缺失）"""
    pass
