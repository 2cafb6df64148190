"""配置与日志测试"""

import logging

from es_skill.core.config import Config
from es_skill.utils import setup_logging


class TestConfig:
    """测试 Config"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ES_SKILL_DIR", raising=False)
        monkeypatch.delenv("ES_SKILL_EXTRA_TRIGGERS", raising=False)
        monkeypatch.delenv("ES_SKILL_LOG_LEVEL", raising=False)

        config = Config()

        assert config.skills_dir is None
        assert config.extra_trigger_keywords == []
        assert config.log_level == "INFO"
        assert config.debug is False

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ES_SKILL_DIR", str(tmp_path))
        monkeypatch.setenv("ES_SKILL_EXTRA_TRIGGERS", "elk, , beats ")

        config = Config()

        assert config.skills_dir == str(tmp_path)
        assert config.extra_trigger_keywords == ["elk", "beats"]

    def test_from_env_reads_dotenv(self, monkeypatch, tmp_path):
        # setenv 记录原始状态，测试结束时清除 load_dotenv 写入的值
        monkeypatch.setenv("ES_SKILL_LOG_LEVEL", "placeholder")
        monkeypatch.delenv("ES_SKILL_LOG_LEVEL")
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("ES_SKILL_LOG_LEVEL=DEBUG\n", encoding='utf-8')

        config = Config.from_env(dotenv_path=str(dotenv_file))

        assert config.log_level == "DEBUG"

    def test_get_and_set(self):
        config = Config()

        config.set("debug", True)
        config.set("owner", "search-team")

        assert config.get("debug") is True
        assert config.get("owner") == "search-team"
        assert config.get("missing", "fallback") == "fallback"


class TestSetupLogging:
    """测试 setup_logging"""

    def test_level_from_config(self):
        logger = setup_logging(Config(log_level="warning"))

        assert logger.name == "es_skill"
        assert logger.level == logging.WARNING

    def test_debug_overrides_level(self):
        logger = setup_logging(Config(log_level="ERROR", debug=True))

        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logging(Config(log_level="chatty"))

        assert logger.level == logging.INFO

    def test_handler_added_once(self):
        setup_logging(Config())
        setup_logging(Config())

        assert len(logging.getLogger("es_skill").handlers) == 1
