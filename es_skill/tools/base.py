"""工具基类"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List

from langchain_core.tools import StructuredTool
from pydantic import Field, create_model

from .response import ToolResponse

# ToolParameter.type 到 Python 类型的映射
_TYPE_MAP = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
}


@dataclass
class ToolParameter:
    """工具参数定义"""
    name: str
    type: str
    description: str
    required: bool = True
    default: Any = None


class Tool(ABC):
    """工具基类"""

    def __init__(self, name: str, description: str):
        """
        初始化工具

        Args:
            name: 工具名称
            description: 工具描述
        """
        self.name = name
        self.description = description

    @abstractmethod
    def get_parameters(self) -> List[ToolParameter]:
        """返回参数定义"""
        pass

    @abstractmethod
    def run(self, parameters: Dict[str, Any]) -> ToolResponse:
        """
        执行工具

        Returns:
            ToolResponse
        """
        pass

    def to_langchain_tool(self) -> StructuredTool:
        """转换为 LangChain 工具，参数模式由 get_parameters() 生成"""
        fields = {}
        for param in self.get_parameters():
            python_type = _TYPE_MAP.get(param.type, str)
            if param.required:
                fields[param.name] = (python_type, Field(..., description=param.description))
            else:
                fields[param.name] = (python_type, Field(default=param.default, description=param.description))
        args_schema = create_model(f"{self.name}Args", **fields)

        def tool_func(**kwargs) -> str:
            return self.run(kwargs).text

        return StructuredTool.from_function(
            func=tool_func,
            name=self.name,
            description=self.description,
            args_schema=args_schema,
        )

    def __str__(self) -> str:
        return f"Tool(name={self.name})"

    def __repr__(self) -> str:
        return self.__str__()
