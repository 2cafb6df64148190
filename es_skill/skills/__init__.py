"""Skills 知识外化系统

技能以 SKILL.md（frontmatter + 指令正文）加 references/ 参考文档的形式分发。
启动时只解析元数据，参考文档在被请求时才读取。

使用示例：
    >>> from es_skill.skills import load_builtin_selector
    >>> selector = load_builtin_selector()
    >>> selector.should_activate("how do I design a dense_vector mapping?")
    True
    >>> "HNSW" in selector.get_document("vector-search")
    True
"""

from .descriptor import DocumentRef, SkillDescriptor
from .selector import SkillSelector
from .loader import SkillLoader, load_builtin_selector, BUILTIN_SKILLS_DIR

__all__ = [
    "DocumentRef",
    "SkillDescriptor",
    "SkillSelector",
    "SkillLoader",
    "load_builtin_selector",
    "BUILTIN_SKILLS_DIR",
]
