"""工具响应协议

技能工具统一返回 ToolResponse：text 供模型阅读，data 供宿主程序读取。
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from enum import Enum
import json


class ToolStatus(Enum):
    """工具执行状态"""
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class ToolResponse:
    """工具响应

    示例：
        >>> resp = ToolResponse.success(
        ...     text="<reference-loaded ...>",
        ...     data={"identifier": "vector-search"}
        ... )
        >>> resp = ToolResponse.error(code="NOT_FOUND", message="document 'bogus' not found")
    """

    status: ToolStatus
    text: str
    data: Dict[str, Any] = field(default_factory=dict)
    error_info: Optional[Dict[str, str]] = None
    context: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == ToolStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典（用于序列化）"""
        result = {
            "status": self.status.value,
            "text": self.text,
            "data": self.data,
        }
        if self.error_info:
            result["error"] = self.error_info
        if self.context:
            result["context"] = self.context
        return result

    def to_json(self) -> str:
        """转换为 JSON 字符串"""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    @classmethod
    def success(cls, text: str, data: Optional[Dict[str, Any]] = None) -> 'ToolResponse':
        return cls(status=ToolStatus.SUCCESS, text=text, data=data or {})

    @classmethod
    def error(
        cls,
        code: str,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ) -> 'ToolResponse':
        """快速创建错误响应

        Args:
            code: 错误码（来自 ToolErrorCode）
            message: 错误消息
            context: 上下文信息（输入参数、可选项等）
        """
        return cls(
            status=ToolStatus.ERROR,
            text=message,
            error_info={"code": code, "message": message},
            context=context
        )
