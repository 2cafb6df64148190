"""工具系统"""

from .base import Tool, ToolParameter
from .errors import ToolErrorCode
from .registry import ToolRegistry
from .response import ToolResponse, ToolStatus
from .builtin import SkillTool, ReferenceTool, register_skill_tools

__all__ = [
    "Tool",
    "ToolParameter",
    "ToolErrorCode",
    "ToolRegistry",
    "ToolResponse",
    "ToolStatus",
    "SkillTool",
    "ReferenceTool",
    "register_skill_tools",
]
