import pytest
from pydantic import ValidationError

from kol_helper.config_validator import ConfigModel


def test_defaults():
    config = ConfigModel()
    assert config.account_id is None
    assert config.timezone == "UTC"
    assert config.redis.enabled is False
    assert config.logging_switches.cmd_sent is True


def test_nested_values():
    config = ConfigModel(**{
        "account_id": "12345",
        "redis": {"enabled": True, "host": "redis.local", "port": 6380},
        "log_rotation": {"max_bytes": 1024, "backup_count": 1},
    })
    assert config.redis.host == "redis.local"
    assert config.redis.port == 6380
    assert config.log_rotation.max_bytes == 1024


def test_invalid_rotation_is_rejected():
    with pytest.raises(ValidationError):
        ConfigModel(log_rotation={"max_bytes": 0, "backup_count": 1})
