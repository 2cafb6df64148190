"""技能描述符数据模型

SkillDescriptor 与 DocumentRef 均为不可变对象，由 SkillLoader 在启动时构建。
正文内容按需读取，读取一次后在对象生命周期内缓存。
"""

import logging
import re
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Dict, FrozenSet, Tuple

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(r'^---\s*\n(.*?)\n---\s*\n?(.*)$', re.DOTALL)


@dataclass(frozen=True)
class DocumentRef:
    """参考文档引用，identifier 即其身份"""
    identifier: str
    title: str
    path: Path = field(compare=False)

    @cached_property
    def content(self) -> str:
        """文档全文（首次访问时读取）"""
        logger.debug("Loading reference document %s from %s", self.identifier, self.path)
        return self.path.read_text(encoding='utf-8')

    def metadata(self) -> Dict[str, str]:
        """仅返回元数据，不触发内容读取"""
        return {
            "identifier": self.identifier,
            "title": self.title,
            "path": str(self.path),
        }


@dataclass(frozen=True)
class SkillDescriptor:
    """技能描述符"""
    name: str
    description: str
    trigger_keywords: FrozenSet[str]
    reference_documents: Tuple[DocumentRef, ...]
    path: Path = field(compare=False)
    dir: Path = field(compare=False)

    @cached_property
    def instructions(self) -> str:
        """SKILL.md 中 frontmatter 之后的正文"""
        content = self.path.read_text(encoding='utf-8')
        match = FRONTMATTER_PATTERN.match(content)
        body = match.group(2) if match else content
        return body.strip()

    @property
    def identifiers(self) -> Tuple[str, ...]:
        return tuple(ref.identifier for ref in self.reference_documents)
