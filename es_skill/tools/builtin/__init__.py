"""内置工具"""

from .skill_tool import SkillTool, ReferenceTool, register_skill_tools

__all__ = [
    "SkillTool",
    "ReferenceTool",
    "register_skill_tools",
]
