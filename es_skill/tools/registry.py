"""工具注册中心"""

import logging
from typing import Any, Dict, List

from ..core.exceptions import NotFoundError
from .base import Tool
from .errors import ToolErrorCode
from .response import ToolResponse

logger = logging.getLogger(__name__)


class ToolRegistry:
    """工具注册中心"""

    def __init__(self):
        self._tools: Dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """注册工具"""
        if tool.name in self._tools:
            logger.warning("Tool '%s' is already registered, replacing it", tool.name)
        self._tools[tool.name] = tool

    def unregister(self, name: str) -> None:
        """注销工具"""
        if name in self._tools:
            del self._tools[name]

    def get(self, name: str) -> Tool:
        """获取工具

        Raises:
            NotFoundError: 工具未注册
        """
        if name not in self._tools:
            raise NotFoundError(name, self.list_tools(), kind="tool")
        return self._tools[name]

    def list_tools(self) -> List[str]:
        """列出所有工具名称"""
        return list(self._tools.keys())

    def execute(self, name: str, parameters: Dict[str, Any]) -> ToolResponse:
        """按名称执行工具，未注册的工具返回 NOT_FOUND 响应"""
        try:
            tool = self.get(name)
        except NotFoundError as e:
            return ToolResponse.error(
                code=ToolErrorCode.NOT_FOUND,
                message=str(e),
                context={"available_tools": e.available},
            )
        return tool.run(parameters)
