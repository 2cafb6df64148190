"""Skills 加载器

渐进式披露：
- Layer 1: SKILL.md frontmatter（启动时加载：name、description、triggers、references）
- Layer 2: SKILL.md 正文（按需加载）
- Layer 3: references/ 下的参考文档（按需加载，按 identifier 寻址）
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..core.config import Config
from ..core.exceptions import DescriptorError, NotFoundError
from .descriptor import DocumentRef, SkillDescriptor, FRONTMATTER_PATTERN
from .selector import SkillSelector, normalize_keywords

logger = logging.getLogger(__name__)

BUILTIN_SKILLS_DIR = Path(__file__).parent / "builtin"
BUILTIN_SKILL_NAME = "elasticsearch"

# 复制副本后缀："x (1)"、"x-copy"、"x_copy"、"x.old"、"x-v2"
COPY_SUFFIX_PATTERN = re.compile(r'(\s*\(\d+\)|[-_]copy|\.old|-v\d+)$', re.IGNORECASE)
HEADING_PATTERN = re.compile(r'^#\s+(.+?)\s*$', re.MULTILINE)


def normalize_identifier(stem: str) -> str:
    """把文件名归一化为文档 identifier，去掉副本后缀"""
    identifier = stem.strip().lower()
    while True:
        stripped = COPY_SUFFIX_PATTERN.sub("", identifier)
        if stripped == identifier:
            break
        identifier = stripped
    return identifier.strip().replace(" ", "-")


def _read_text_or_none(path: Path) -> Optional[str]:
    """读取 UTF-8 文本，无法读取或解码时记录警告并返回 None"""
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", path, e)
        return None


def _read_title(path: Path, fallback: str) -> str:
    text = _read_text_or_none(path)
    if text is None:
        return fallback
    match = HEADING_PATTERN.search(text)
    return match.group(1) if match else fallback


def pick_canonical(first: Path, second: Path) -> Path:
    """在两个重复的参考文档中选出规范版本

    规则依次为：内容为超集者胜；修改时间较新者胜；文件较大者胜。
    """
    first_text = first.read_text(encoding='utf-8').strip()
    second_text = second.read_text(encoding='utf-8').strip()

    if second_text in first_text:
        return first
    if first_text in second_text:
        return second

    first_stat, second_stat = first.stat(), second.stat()
    if first_stat.st_mtime != second_stat.st_mtime:
        return first if first_stat.st_mtime > second_stat.st_mtime else second
    return first if first_stat.st_size >= second_stat.st_size else second


class SkillLoader:
    """
    技能加载器

    特性：
    - 启动时仅解析 frontmatter，构建不可变的 SkillDescriptor
    - 参考文档按需读取并缓存
    - 自动发现 references/ 并合并漂移的重复副本
    - 支持重新扫描

    使用示例：
        >>> loader = SkillLoader()
        >>> selector = loader.get_selector("elasticsearch")
        >>> selector.should_activate("tune my Kibana dashboards")
        True
        >>> selector.get_document("vector-search")
    """

    def __init__(self, skills_dir: Optional[Path] = None, config: Optional[Config] = None):
        """初始化技能加载器

        Args:
            skills_dir: 技能目录路径，默认取 config.skills_dir，再退回内置目录
            config: 配置对象
        """
        self.config = config or Config()
        if skills_dir is None:
            skills_dir = self.config.skills_dir or BUILTIN_SKILLS_DIR
        self.skills_dir = Path(skills_dir)

        self.descriptors: Dict[str, SkillDescriptor] = {}
        self._selectors: Dict[str, SkillSelector] = {}

        self._scan_skills()

    def _scan_skills(self):
        """扫描技能目录，构建描述符"""
        if not self.skills_dir.is_dir():
            logger.warning("Skills directory not found: %s", self.skills_dir)
            return

        for skill_dir in sorted(self.skills_dir.iterdir()):
            if not skill_dir.is_dir():
                continue

            skill_md = skill_dir / "SKILL.md"
            if not skill_md.exists():
                continue

            metadata = self._parse_frontmatter(skill_md)
            if metadata is None:
                logger.warning("Skipping skill without valid frontmatter: %s", skill_md)
                continue

            descriptor = self._build_descriptor(metadata, skill_md, skill_dir)
            if descriptor.name in self.descriptors:
                logger.warning("Duplicate skill name '%s' in %s, keeping the first", descriptor.name, skill_dir)
                continue
            self.descriptors[descriptor.name] = descriptor

        logger.info("Loaded %d skills from %s", len(self.descriptors), self.skills_dir)

    def _parse_frontmatter(self, path: Path) -> Optional[Dict[str, Any]]:
        """解析 YAML frontmatter

        Returns:
            元数据字典；缺少 name/description 或解析失败时返回 None
        """
        content = _read_text_or_none(path)
        if content is None:
            return None

        match = FRONTMATTER_PATTERN.match(content)
        if not match:
            return None

        try:
            metadata = yaml.safe_load(match.group(1)) or {}
        except yaml.YAMLError:
            logger.warning("Invalid YAML frontmatter in %s", path, exc_info=True)
            return None

        if not isinstance(metadata, dict):
            return None
        if "name" not in metadata or "description" not in metadata:
            return None

        return metadata

    def _build_descriptor(self, metadata: Dict[str, Any], skill_md: Path, skill_dir: Path) -> SkillDescriptor:
        name = str(metadata["name"])
        declared = metadata.get("references")
        if declared is not None and not isinstance(declared, list):
            raise DescriptorError(f"Skill '{name}': 'references' must be a list, got {type(declared).__name__}")

        if declared:
            documents = self._declared_documents(name, declared, skill_dir)
        else:
            documents = self._discover_documents(name, skill_dir)

        return SkillDescriptor(
            name=name,
            description=str(metadata["description"] or ""),
            trigger_keywords=normalize_keywords(metadata.get("triggers") or []),
            reference_documents=tuple(documents),
            path=skill_md,
            dir=skill_dir,
        )

    def _declared_documents(self, skill_name: str, declared: List[Any], skill_dir: Path) -> List[DocumentRef]:
        """按 frontmatter 中声明的顺序构建文档列表"""
        documents: List[DocumentRef] = []
        seen = set()

        for entry in declared:
            if isinstance(entry, str):
                entry = {"id": entry}
            if not isinstance(entry, dict) or not entry.get("id"):
                raise DescriptorError(f"Skill '{skill_name}': reference entry without id: {entry!r}")

            identifier = str(entry["id"])
            if identifier in seen:
                raise DescriptorError(f"Skill '{skill_name}': duplicate reference id '{identifier}'")
            seen.add(identifier)

            path = skill_dir / str(entry.get("file") or f"references/{identifier}.md")
            if not path.is_file():
                raise DescriptorError(f"Skill '{skill_name}': reference '{identifier}' file not found: {path}")

            documents.append(DocumentRef(
                identifier=identifier,
                title=str(entry.get("title") or identifier),
                path=path,
            ))

        return documents

    def _discover_documents(self, skill_name: str, skill_dir: Path) -> List[DocumentRef]:
        """扫描 references/ 目录，合并重复副本"""
        references_dir = skill_dir / "references"
        if not references_dir.is_dir():
            return []

        canonical: Dict[str, Path] = {}
        for path in sorted(references_dir.rglob("*.md")):
            if _read_text_or_none(path) is None:
                continue

            identifier = normalize_identifier(path.stem)
            existing = canonical.get(identifier)
            if existing is None:
                canonical[identifier] = path
                continue

            winner = pick_canonical(existing, path)
            dropped = path if winner == existing else existing
            logger.warning(
                "Skill '%s': duplicate reference '%s', using %s and ignoring %s",
                skill_name, identifier, winner.name, dropped.name,
            )
            canonical[identifier] = winner

        return [
            DocumentRef(identifier=identifier, title=_read_title(path, identifier), path=path)
            for identifier, path in sorted(canonical.items())
        ]

    def list_skills(self) -> List[str]:
        """列出所有可用技能"""
        return sorted(self.descriptors)

    def get_descriptor(self, name: str) -> SkillDescriptor:
        """获取技能描述符

        Raises:
            NotFoundError: 技能不存在
        """
        if name not in self.descriptors:
            raise NotFoundError(name, self.list_skills(), kind="skill")
        return self.descriptors[name]

    def get_selector(self, name: str) -> SkillSelector:
        """获取技能选择器（按名称缓存）"""
        if name not in self._selectors:
            self._selectors[name] = SkillSelector(
                self.get_descriptor(name),
                extra_keywords=self.config.extra_trigger_keywords,
            )
        return self._selectors[name]

    def get_descriptions(self) -> str:
        """获取所有技能的元数据描述（用于工具描述）"""
        if not self.descriptors:
            return "(no skills available)"

        return "\n".join(
            f"- {name}: {self.descriptors[name].description}"
            for name in self.list_skills()
        )

    def find_activated(self, task_text: str) -> List[str]:
        """返回与任务文本匹配的技能名称"""
        activated = [name for name in self.list_skills() if self.get_selector(name).should_activate(task_text)]
        if activated:
            logger.debug("Task activated skills: %s", activated)
        return activated

    def reload(self):
        """重新扫描技能目录"""
        self.descriptors.clear()
        self._selectors.clear()
        self._scan_skills()


def load_builtin_selector(config: Optional[Config] = None) -> SkillSelector:
    """加载随包分发的 elasticsearch 技能选择器"""
    loader = SkillLoader(skills_dir=BUILTIN_SKILLS_DIR, config=config)
    return loader.get_selector(BUILTIN_SKILL_NAME)
