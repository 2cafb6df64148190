"""Skill 工具

让 Agent 按需加载技能说明与参考文档：
- Skill：加载 SKILL.md 正文，并列出可用的参考文档目录
- SkillReference：按 identifier 加载单个参考文档

两者都以 tool_result 的形式注入内容，不修改 system_prompt。

使用示例：
    >>> from es_skill.skills import SkillLoader
    >>> from es_skill.tools.builtin.skill_tool import SkillTool, ReferenceTool
    >>> loader = SkillLoader()
    >>> SkillTool(skill_loader=loader).run({"skill": "elasticsearch"})
    >>> ReferenceTool(skill_loader=loader).run({"skill": "elasticsearch", "document": "vector-search"})
"""

import logging
from typing import Dict, Any, List

from ...core.exceptions import NotFoundError
from ...skills.loader import SkillLoader
from ...skills.selector import SkillSelector
from ..base import Tool, ToolParameter
from ..errors import ToolErrorCode
from ..registry import ToolRegistry
from ..response import ToolResponse

logger = logging.getLogger(__name__)


def _format_catalog(selector: SkillSelector) -> str:
    lines = [f"  - {ref.identifier}: {ref.title}" for ref in selector.list_documents()]
    if not lines:
        return ""
    return "\n\n**参考文档**（使用 SkillReference 加载）：\n" + "\n".join(lines)


class SkillTool(Tool):
    """技能工具：加载技能指令"""

    def __init__(self, skill_loader: SkillLoader):
        descriptions = skill_loader.get_descriptions()

        super().__init__(
            name="Skill",
            description=f"""加载技能获取领域说明。

可用技能：
{descriptions}

何时使用：
- 任务明确匹配某个技能描述时
- 开始领域特定工作之前

加载后请遵循技能说明，并按需加载参考文档。"""
        )
        self.skill_loader = skill_loader

    def get_parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="skill",
                type="string",
                description="要加载的技能名称",
                required=True
            ),
            ToolParameter(
                name="task",
                type="string",
                description="可选的任务文本，用于报告命中的触发关键词",
                required=False,
                default=""
            )
        ]

    def run(self, parameters: Dict[str, Any]) -> ToolResponse:
        skill_name = parameters.get("skill", "")
        task = parameters.get("task") or ""

        if not skill_name:
            return ToolResponse.error(
                code=ToolErrorCode.INVALID_PARAM,
                message="必须指定技能名称 skill",
                context={"params_input": parameters}
            )

        try:
            selector = self.skill_loader.get_selector(skill_name)
        except NotFoundError as e:
            return ToolResponse.error(
                code=ToolErrorCode.NOT_FOUND,
                message=str(e),
                context={"params_input": parameters, "available_skills": e.available}
            )

        try:
            instructions = selector.descriptor.instructions
        except Exception as e:
            logger.exception("Failed to read instructions for skill '%s'", skill_name)
            return ToolResponse.error(
                code=ToolErrorCode.INTERNAL_ERROR,
                message=f"加载技能失败：{skill_name}：{e}",
                context={"params_input": parameters}
            )

        matched = selector.matched_keywords(task)
        full_content = f"""<skill-loaded name="{selector.name}">
{instructions}
{_format_catalog(selector)}
</skill-loaded>"""

        return ToolResponse.success(
            text=full_content,
            data={
                "name": selector.name,
                "description": selector.descriptor.description,
                "loaded": True,
                "documents": [ref.identifier for ref in selector.list_documents()],
                "matched_keywords": matched,
            }
        )


class ReferenceTool(Tool):
    """参考文档工具：按 identifier 加载文档全文"""

    def __init__(self, skill_loader: SkillLoader):
        super().__init__(
            name="SkillReference",
            description="按 identifier 加载技能的参考文档。先调用 Skill 查看可用的文档 identifier。"
        )
        self.skill_loader = skill_loader

    def get_parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="skill",
                type="string",
                description="文档所属的技能名称",
                required=True
            ),
            ToolParameter(
                name="document",
                type="string",
                description="参考文档 identifier，例如 vector-search",
                required=True
            )
        ]

    def run(self, parameters: Dict[str, Any]) -> ToolResponse:
        skill_name = parameters.get("skill", "")
        identifier = parameters.get("document", "")

        if not skill_name or not identifier:
            return ToolResponse.error(
                code=ToolErrorCode.INVALID_PARAM,
                message="必须同时指定 skill 与 document",
                context={"params_input": parameters}
            )

        try:
            selector = self.skill_loader.get_selector(skill_name)
            ref = selector.get_document_ref(identifier)
            content = ref.content
        except NotFoundError as e:
            return ToolResponse.error(
                code=ToolErrorCode.NOT_FOUND,
                message=str(e),
                context={"params_input": parameters, "available": e.available}
            )
        except Exception as e:
            logger.exception("Failed to read reference '%s' of skill '%s'", identifier, skill_name)
            return ToolResponse.error(
                code=ToolErrorCode.INTERNAL_ERROR,
                message=f"加载参考文档失败：{identifier}：{e}",
                context={"params_input": parameters}
            )

        full_content = f"""<reference-loaded skill="{skill_name}" id="{ref.identifier}">
{content.strip()}
</reference-loaded>"""

        return ToolResponse.success(
            text=full_content,
            data={**ref.metadata(), "skill": skill_name, "length": len(content)}
        )


def register_skill_tools(registry: ToolRegistry, skill_loader: SkillLoader) -> None:
    """向注册中心注册 Skill 与 SkillReference 工具"""
    registry.register(SkillTool(skill_loader=skill_loader))
    registry.register(ReferenceTool(skill_loader=skill_loader))
