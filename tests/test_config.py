"""Tests for businessprocess.config — RendererConfig frozen dataclass."""

import pytest

from businessprocess.config import RendererConfig
from businessprocess.errors import ConfigurationError


class TestRendererConfig:
    def test_defaults(self) -> None:
        cfg = RendererConfig()

        assert cfg.action_params == (
            "deletenode",
            "deleteparent",
            "editnode",
            "simulationnode",
            "view",
        )
        assert cfg.navigation_params == ("node", "path", "view")
        assert cfg.quiet_states == ("OK", "UP")
        assert cfg.datetime_format == "%Y-%m-%d %H:%M:%S"
        assert cfg.template_dirs == ()
        assert cfg.autoescape is True
        assert cfg.debug is False

    def test_override(self) -> None:
        cfg = RendererConfig(quiet_states=("OK",), debug=True)

        assert cfg.quiet_states == ("OK",)
        assert cfg.debug is True

    def test_frozen(self) -> None:
        cfg = RendererConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_empty_datetime_format_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            RendererConfig(datetime_format="")

    def test_empty_param_name_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            RendererConfig(action_params=("editnode", ""))
