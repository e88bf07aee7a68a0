"""Tests for ScanConfig and config file loading."""

import json
from pathlib import Path

import pytest

from stylesweep.config import (
    CONFIG_FILENAME,
    ConfigError,
    ScanConfig,
    config_from_dict,
    find_config,
    load_config,
)


class TestScanConfig:
    def test_defaults(self) -> None:
        config = ScanConfig()
        assert config.holder == "StyleSheet"
        assert config.method == "create"
        assert config.identifier == "styles"
        assert config.extensions == (".tsx", ".ts", ".jsx", ".js")

    @pytest.mark.parametrize(
        "path,ignored",
        [
            ("src/App.tsx", False),
            ("node_modules/react-native/index.js", True),
            ("src/App.test.tsx", True),
            ("src/testing/App.tsx", False),
        ],
    )
    def test_should_ignore(self, path: str, ignored: bool) -> None:
        assert ScanConfig().should_ignore(path) is ignored

    def test_accepts(self) -> None:
        config = ScanConfig()
        assert config.accepts("a.tsx")
        assert config.accepts(Path("dir/b.js"))
        assert not config.accepts("c.css")

    def test_replace(self) -> None:
        config = ScanConfig().replace(identifier="css")
        assert config.identifier == "css"
        assert config.holder == "StyleSheet"


class TestConfigFromDict:
    def test_empty(self) -> None:
        assert config_from_dict({}) == ScanConfig()

    def test_values(self) -> None:
        config = config_from_dict(
            {
                "identifier": "s",
                "extensions": [".tsx"],
                "ignore_patterns": ["build/"],
                "settle_delay": 1,
            }
        )
        assert config.identifier == "s"
        assert config.extensions == (".tsx",)
        assert config.ignore_patterns == ("build/",)
        assert config.settle_delay == 1.0

    def test_single_string_for_list(self) -> None:
        assert config_from_dict({"extensions": ".ts"}).extensions == (".ts",)

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="colour"):
            config_from_dict({"colour": "red"})

    def test_wrong_type_for_string(self) -> None:
        with pytest.raises(ConfigError, match="identifier"):
            config_from_dict({"identifier": 3})

    def test_wrong_type_for_number(self) -> None:
        with pytest.raises(ConfigError, match="poll_interval"):
            config_from_dict({"poll_interval": "fast"})

    def test_bool_is_not_a_number(self) -> None:
        with pytest.raises(ConfigError):
            config_from_dict({"settle_delay": True})

    def test_wrong_type_for_list(self) -> None:
        with pytest.raises(ConfigError, match="extensions"):
            config_from_dict({"extensions": 3})

    def test_invalid_regex(self) -> None:
        with pytest.raises(ConfigError, match="Invalid ignore pattern"):
            config_from_dict({"ignore_patterns": ["("]})


class TestLoadConfig:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text(json.dumps({"holder": "Sheet", "method": "make"}))
        config = load_config(path)
        assert (config.holder, config.method) == ("Sheet", "make")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Cannot read config"):
            load_config(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.json")


class TestFindConfig:
    def test_found_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("{}")
        nested = tmp_path / "src" / "components"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_start_may_be_a_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("{}")
        source = tmp_path / "App.tsx"
        source.write_text("")
        assert find_config(source) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("{}")
        inner = tmp_path / "app"
        inner.mkdir()
        (inner / CONFIG_FILENAME).write_text("{}")
        assert find_config(inner) == (inner / CONFIG_FILENAME).resolve()
