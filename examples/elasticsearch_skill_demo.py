"""Elasticsearch 技能使用示例

演示：
- 根据任务文本判断是否激活技能
- 列出参考文档目录
- 通过工具注册中心按需加载参考文档
"""

from dotenv import load_dotenv

from es_skill import Config, SkillLoader, ToolRegistry, register_skill_tools
from es_skill.utils import setup_logging

load_dotenv()


def demo_selector(loader: SkillLoader):
    """演示技能选择器"""
    print("=" * 60)
    print("示例 1: 激活判断与文档目录")
    print("=" * 60)

    selector = loader.get_selector("elasticsearch")
    for task in ["how do I design a dense_vector mapping?", "write a haiku about autumn"]:
        print(f"  {task!r} -> {selector.should_activate(task)} {selector.matched_keywords(task)}")

    print("\n参考文档:")
    for ref in selector.list_documents():
        print(f"  - {ref.identifier}: {ref.title}")


def demo_tools(loader: SkillLoader):
    """演示工具调用"""
    print("\n" + "=" * 60)
    print("示例 2: 通过工具加载参考文档")
    print("=" * 60)

    registry = ToolRegistry()
    register_skill_tools(registry, loader)

    response = registry.execute("SkillReference", {"skill": "elasticsearch", "document": "vector-search"})
    print(response.text[:400] + "...")

    response = registry.execute("SkillReference", {"skill": "elasticsearch", "document": "bogus"})
    print(f"\n错误响应: {response.error_info}")


if __name__ == "__main__":
    config = Config.from_env()
    setup_logging(config)
    skill_loader = SkillLoader(config=config)

    demo_selector(skill_loader)
    demo_tools(skill_loader)
