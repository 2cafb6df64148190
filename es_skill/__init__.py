"""
es_skill - Elasticsearch 领域技能包

随包分发 Elasticsearch 参考文档（映射、查询、集群架构、向量检索、运维排障），
并提供按触发关键词激活、按 identifier 取文档的轻量选择器，供 Agent 宿主按需注入上下文。
"""

from .version import __version__

from .core.config import Config
from .core.exceptions import SkillException, NotFoundError, DescriptorError

from .skills import SkillLoader, SkillSelector, SkillDescriptor, DocumentRef, load_builtin_selector

from .tools import ToolRegistry, ToolResponse, SkillTool, ReferenceTool, register_skill_tools

__all__ = [
    "__version__",
    # 核心组件
    "Config", "SkillException", "NotFoundError", "DescriptorError",
    # 技能
    "SkillLoader", "SkillSelector", "SkillDescriptor", "DocumentRef", "load_builtin_selector",
    # 工具
    "ToolRegistry", "ToolResponse", "SkillTool", "ReferenceTool", "register_skill_tools",
]
