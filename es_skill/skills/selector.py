"""技能选择器：判断是否激活，并按 identifier 提供参考文档"""

import logging
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from ..core.exceptions import NotFoundError
from .descriptor import DocumentRef, SkillDescriptor

logger = logging.getLogger(__name__)


def normalize_keywords(keywords: Any) -> FrozenSet[str]:
    """触发关键词统一为小写并去掉空项，单个字符串视为一个关键词"""
    if isinstance(keywords, str):
        keywords = [keywords]
    return frozenset(
        str(keyword).strip().lower()
        for keyword in keywords or []
        if keyword is not None and str(keyword).strip()
    )


class SkillSelector:
    """
    技能选择器

    所有操作都是对不可变描述符的只读访问，可被多个调用方并发使用。

    使用示例：
        >>> selector = SkillSelector(descriptor)
        >>> selector.should_activate("Why is my Elasticsearch cluster yellow?")
        True
        >>> selector.get_document("vector-search")
    """

    def __init__(self, descriptor: SkillDescriptor, extra_keywords: Optional[Iterable[str]] = None):
        self.descriptor = descriptor
        self.trigger_keywords = descriptor.trigger_keywords | normalize_keywords(extra_keywords)
        self._documents: Dict[str, DocumentRef] = {
            ref.identifier: ref for ref in descriptor.reference_documents
        }

    @property
    def name(self) -> str:
        return self.descriptor.name

    def matched_keywords(self, task_text: Optional[str]) -> List[str]:
        """返回任务文本中出现的触发关键词（大小写不敏感的子串匹配）"""
        if not task_text:
            return []
        text = task_text.lower()
        return sorted(keyword for keyword in self.trigger_keywords if keyword in text)

    def should_activate(self, task_text: Optional[str]) -> bool:
        """任务文本包含任一触发关键词时返回 True"""
        matched = self.matched_keywords(task_text)
        if matched:
            logger.debug("Skill '%s' activated by %s", self.name, matched)
        return bool(matched)

    def list_documents(self) -> List[DocumentRef]:
        """按声明顺序返回文档目录（不读取内容）"""
        return list(self.descriptor.reference_documents)

    def get_document_ref(self, identifier: str) -> DocumentRef:
        """
        Raises:
            NotFoundError: identifier 不在目录中
        """
        if identifier not in self._documents:
            raise NotFoundError(identifier, self.descriptor.identifiers)
        return self._documents[identifier]

    def get_document(self, identifier: str) -> str:
        """返回参考文档全文

        Raises:
            NotFoundError: identifier 不在目录中
        """
        return self.get_document_ref(identifier).content

    def __repr__(self) -> str:
        return f"SkillSelector(name={self.name}, documents={len(self._documents)})"
