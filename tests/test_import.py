"""测试包与主要导出能否正常导入"""


def test_import_version():
    from es_skill.version import __version__
    assert __version__ and isinstance(__version__, str)


def test_import_core():
    from es_skill.core.config import Config
    from es_skill.core.exceptions import SkillException, NotFoundError, DescriptorError
    assert issubclass(NotFoundError, SkillException)
    assert issubclass(DescriptorError, SkillException)
    assert Config is not None


def test_import_top_level():
    import es_skill
    for name in es_skill.__all__:
        assert hasattr(es_skill, name), name
