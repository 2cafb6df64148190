"""工具错误码定义"""


class ToolErrorCode:
    """工具错误码

    Agent 宿主依据错误码区分“参数错误”“资源不存在”和“内部错误”。
    """

    NOT_FOUND = "NOT_FOUND"              # 技能、参考文档或工具不存在
    INVALID_PARAM = "INVALID_PARAM"      # 参数无效或缺失
    INTERNAL_ERROR = "INTERNAL_ERROR"    # 读取文档等内部错误

    @classmethod
    def get_all_codes(cls) -> list[str]:
        """获取所有错误码"""
        return [
            value for name, value in vars(cls).items()
            if not name.startswith('_') and isinstance(value, str)
        ]
