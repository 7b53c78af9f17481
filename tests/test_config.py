"""Tests for wren.config — ComposerConfig frozen dataclass."""

import logging
from pathlib import Path

import pytest

from wren.compose.assembler import PageComposer
from wren.config import DEFAULT_TEMPLATE_DIR, ComposerConfig
from wren.errors import ConfigurationError
from wren.memory import MemoryStore


class TestComposerConfig:
    def test_defaults(self) -> None:
        cfg = ComposerConfig()

        assert cfg.template_dir == DEFAULT_TEMPLATE_DIR
        assert cfg.setup_head_template == "AuthLayout.head.html"
        assert cfg.setup_body_template == "AuthLayout.body.html"
        assert cfg.strict_paths is False
        assert cfg.fetch_timeout is None
        assert cfg.log_level == "warning"

    def test_override(self) -> None:
        cfg = ComposerConfig(strict_paths=True, fetch_timeout=2.5, template_dir="views")

        assert cfg.strict_paths is True
        assert cfg.fetch_timeout == 2.5
        assert cfg.template_dir == "views"

    def test_frozen(self) -> None:
        cfg = ComposerConfig()

        with pytest.raises(AttributeError):
            cfg.strict_paths = True  # type: ignore[misc]

    def test_template_dir_as_path(self) -> None:
        cfg = ComposerConfig(template_dir=Path("views"))
        assert cfg.template_dir == Path("views")

    def test_logging_level(self) -> None:
        assert ComposerConfig(log_level="debug").logging_level == logging.DEBUG
        assert ComposerConfig(log_level="ERROR").logging_level == logging.ERROR


class TestValidate:
    def test_defaults_are_valid(self) -> None:
        ComposerConfig().validate()

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_non_positive_timeout(self, timeout: float) -> None:
        with pytest.raises(ConfigurationError, match="fetch_timeout"):
            ComposerConfig(fetch_timeout=timeout).validate()

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="log_level"):
            ComposerConfig(log_level="loud").validate()

    def test_empty_template_name(self) -> None:
        with pytest.raises(ConfigurationError):
            ComposerConfig(setup_body_template="").validate()

    def test_composer_validates_on_creation(self) -> None:
        with pytest.raises(ConfigurationError):
            PageComposer(MemoryStore().services(), ComposerConfig(fetch_timeout=0))
