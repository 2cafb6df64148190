"""内置 elasticsearch 技能测试"""

import pytest

from es_skill import NotFoundError, load_builtin_selector
from es_skill.core.config import Config
from es_skill.skills import SkillLoader, BUILTIN_SKILLS_DIR


@pytest.fixture(scope="module")
def selector():
    return load_builtin_selector(Config(extra_trigger_keywords=[]))


def test_builtin_loader_default_dir(monkeypatch):
    monkeypatch.delenv("ES_SKILL_DIR", raising=False)

    loader = SkillLoader()

    assert loader.skills_dir == BUILTIN_SKILLS_DIR
    assert "elasticsearch" in loader.list_skills()


def test_catalog_order(selector):
    assert [ref.identifier for ref in selector.list_documents()] == [
        "mappings",
        "query-dsl",
        "cluster-architecture",
        "vector-search",
        "troubleshooting",
    ]


@pytest.mark.parametrize("text", [
    "how do I design a dense_vector mapping?",
    "Our Elasticsearch cluster went red overnight",
    "kibana dashboard loads slowly",
    "migrating from OpenSearch",
    "Lucene segment merges",
    "best practices for vector search",
])
def test_activates_on_domain_tasks(selector, text):
    assert selector.should_activate(text) is True


@pytest.mark.parametrize("text", [
    "write a haiku about autumn",
    "fix my CSS grid layout",
    "what is the capital of France?",
])
def test_ignores_unrelated_tasks(selector, text):
    assert selector.should_activate(text) is False


def test_every_document_has_content(selector):
    for ref in selector.list_documents():
        content = selector.get_document(ref.identifier)
        assert content.strip()
        assert content.lstrip().startswith("# ")


def test_vector_search_mentions_hnsw(selector):
    assert "HNSW" in selector.get_document("vector-search")


def test_bogus_document(selector):
    with pytest.raises(NotFoundError):
        selector.get_document("bogus")


def test_instructions(selector):
    instructions = selector.descriptor.instructions

    assert instructions.startswith("# Elasticsearch skill")
    assert "---" not in instructions.splitlines()[0]
