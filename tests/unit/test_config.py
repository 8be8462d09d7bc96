"""
配置加载单元测试

每个模块完成后必须运行：pytest tests/unit/test_config.py -v
"""

from pathlib import Path

import pytest

from asciimage.config import RuntimeConfig, reload_config
from asciimage.parsing import ImageParser


class TestRuntimeConfig:
    """运行期配置测试"""

    def test_default_config(self, runtime_config: RuntimeConfig):
        """测试默认配置"""
        assert runtime_config.defaults.fill == "black"
        assert runtime_config.defaults.stroke_width == 1.0
        assert runtime_config.defaults.open_path is False
        assert runtime_config.logging.log_level == "INFO"

    def test_style_defaults(self, runtime_config: RuntimeConfig):
        assert set(runtime_config.style_defaults()) == {
            "fill",
            "stroke",
            "stroke_width",
            "open_path",
            "aliased",
        }

    def test_from_yaml_missing(self, temp_dir: Path):
        """测试配置文件不存在时使用默认值"""
        config = RuntimeConfig.from_yaml(temp_dir / "missing.yaml")
        assert config.defaults.fill == "black"

    def test_from_yaml(self, temp_dir: Path):
        """测试从YAML加载"""
        path = temp_dir / "asciimage.yaml"
        path.write_text(
            "asciimage_options:\n"
            "  defaults:\n"
            "    fill: red\n"
            "    stroke_width:\n"
            "      default: 2.5\n"
            "  logging:\n"
            "    log_level: DEBUG\n",
            encoding="utf-8",
        )
        config = RuntimeConfig.from_yaml(path)
        assert config.defaults.fill == "red"
        assert config.defaults.stroke_width == 2.5
        assert config.defaults.stroke == "black"
        assert config.logging.log_level == "DEBUG"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        """测试环境变量覆盖"""
        monkeypatch.setenv("ASCIIMAGE_DEFAULTS__FILL", "green")
        assert RuntimeConfig().defaults.fill == "green"

    def test_reload_config(self, temp_dir: Path):
        path = temp_dir / "custom.yaml"
        path.write_text("asciimage_options:\n  defaults:\n    stroke: blue\n", encoding="utf-8")
        config = reload_config(path)
        assert config.defaults.stroke == "blue"

    def test_parser_uses_config_defaults(self, temp_dir: Path):
        """测试解析结果使用配置的样式默认值"""
        path = temp_dir / "asciimage.yaml"
        path.write_text("asciimage_options:\n  defaults:\n    fill: white\n", encoding="utf-8")
        image = ImageParser(config=RuntimeConfig.from_yaml(path)).parse(["1"])
        assert image.effective(0)["fill"] == "white"

    def test_parser_ignores_working_dir_config(
        self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
    ):
        """测试未指定配置时解析不读取当前目录的 asciimage.yaml"""
        (temp_dir / "asciimage.yaml").write_text(
            "asciimage_options:\n  defaults:\n    fill: white\n", encoding="utf-8"
        )
        monkeypatch.chdir(temp_dir)
        image = ImageParser().parse(["1"])
        assert image.effective(0)["fill"] == "black"
