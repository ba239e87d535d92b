"""Configuration precedence and validation."""

from pathlib import Path

import pytest

from mirror.config import MirrorConfig, find_config_file, load_config
from mirror.errors import ConfigError
from mirror.llm import DEFAULT_BASE_URL, DEFAULT_MODEL


def test_defaults_without_file_or_environment(tmp_path: Path) -> None:
    config = load_config(start=tmp_path, env={})

    assert config == MirrorConfig()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.model == DEFAULT_MODEL
    assert config.source is None


def test_mirror_toml_is_discovered(tmp_path: Path) -> None:
    (tmp_path / "mirror.toml").write_text(
        'model = "meta-llama-3-8b-instruct"\ntimeout = 15\nlanguage = "Python"\n',
        encoding="utf-8",
    )

    config = load_config(start=tmp_path, env={})

    assert config.model == "meta-llama-3-8b-instruct"
    assert config.timeout == 15.0
    assert config.language == "Python"
    assert config.source == tmp_path / "mirror.toml"


def test_pyproject_tool_table_is_used(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.mirror]\nmax_retries = 5\n',
        encoding="utf-8",
    )

    assert find_config_file(tmp_path) == tmp_path / "pyproject.toml"
    assert load_config(start=tmp_path, env={}).max_retries == 5


def test_pyproject_without_tool_table_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert find_config_file(tmp_path) is None


def test_environment_beats_file_and_overrides_beat_environment(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.toml"
    config_file.write_text('model = "from-file"\nbase_url = "http://file/v1"\n', encoding="utf-8")
    env = {"MIRROR_MODEL": "from-env", "MIRROR_TIMEOUT": "5", "MIRROR_LOG_LEVEL": "DEBUG"}

    config = load_config(path=config_file, env=env, overrides={"model": "from-flag", "language": None})

    assert config.model == "from-flag"
    assert config.base_url == "http://file/v1"
    assert config.timeout == 5.0
    assert config.log_level == "debug"
    assert config.language == "JavaScript"


def test_llm_config_carries_transport_settings() -> None:
    config = MirrorConfig(base_url="http://host/v1", timeout=3, max_retries=1)
    assert config.llm_config() == {
        "base_url": "http://host/v1",
        "timeout": 3,
        "max_retries": 1,
        "retry_base_delay": 0.5,
        "retry_max_delay": 5.0,
    }


@pytest.mark.parametrize(
    "content, message",
    [
        ('temperature = 0.2\n', "Unknown configuration key 'temperature'"),
        ('timeout = "soon"\n', "Invalid value for 'timeout'"),
        ('max_retries = -1\n', "must not be negative"),
        ('log_level = "loud"\n', "Invalid log level 'loud'"),
        ('model = \n', "Invalid TOML"),
    ],
)
def test_invalid_file_values(tmp_path: Path, content: str, message: str) -> None:
    config_file = tmp_path / "mirror.toml"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(start=tmp_path, env={})


def test_invalid_environment_value() -> None:
    with pytest.raises(ConfigError, match="environment"):
        load_config(start=Path("/nonexistent"), env={"MIRROR_MAX_RETRIES": "many"})


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as info:
        load_config(path=tmp_path / "absent.toml", env={})
    assert info.value.path == str(tmp_path / "absent.toml")
