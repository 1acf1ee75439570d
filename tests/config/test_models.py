"""Tests for config models — defaults and sparse overrides."""

import pytest
from pydantic import ValidationError

from lintkit.config.models import LintkitConfig, OutputConfig, WikifmtConfig


class TestLintkitConfig:
    def test_full_defaults(self) -> None:
        cfg = LintkitConfig()
        assert cfg.wikifmt.driver_name == "lintkit-wikifmt"
        assert cfg.wikifmt.skip_dirs == []
        assert cfg.output.format == "sarif"

    def test_sparse_override(self) -> None:
        cfg = LintkitConfig.model_validate({"wikifmt": {"skip_dirs": [".git"]}})
        assert cfg.wikifmt.skip_dirs == [".git"]
        assert cfg.wikifmt.driver_name == "lintkit-wikifmt"
        assert cfg.output == OutputConfig()

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(format="xml")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        cfg = WikifmtConfig()
        with pytest.raises(ValidationError):
            cfg.driver_name = "other"  # type: ignore[misc]
