"""pytest 共享 fixture：临时技能目录"""

from pathlib import Path
from typing import Callable, Dict, Optional
import shutil
import tempfile

import pytest
import yaml


@pytest.fixture
def temp_skills_dir():
    """创建临时 skills 目录"""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def make_skill(temp_skills_dir) -> Callable[..., Path]:
    """创建技能目录的工厂

    用法：make_skill("demo", triggers=[...], references={"a": "# A\\n..."})
    """

    def _make(
        name: str,
        description: str = "A test skill",
        triggers: Optional[list] = None,
        references: Optional[Dict[str, str]] = None,
        declared: Optional[list] = None,
        body: str = "# Instructions\n\nFollow these steps.\n",
    ) -> Path:
        skill_dir = temp_skills_dir / name
        skill_dir.mkdir()

        metadata = {"name": name, "description": description}
        if triggers is not None:
            metadata["triggers"] = triggers
        if declared is not None:
            metadata["references"] = declared

        (skill_dir / "SKILL.md").write_text(
            f"---\n{yaml.safe_dump(metadata, sort_keys=False)}---\n\n{body}",
            encoding='utf-8'
        )

        if references:
            references_dir = skill_dir / "references"
            references_dir.mkdir()
            for filename, content in references.items():
                (references_dir / filename).write_text(content, encoding='utf-8')

        return skill_dir

    return _make
