"""Settings layering (defaults, env, file, overrides) and formatter building."""

from __future__ import annotations

import json

import pytest
import yaml

from gerrors.base.core import Code, Mapper, TemplateConfigError, get_default_mapping
from gerrors.base.loggers import LoggingAdapter
from gerrors.config import (
    FormatterSettings,
    formatter_from_settings,
    get_formatter_settings,
    load_config_file,
)
from gerrors.config.defaults import DEFAULT_MISSING_VALUE, DEFAULT_TEMPLATE
from gerrors.config.env import is_truthy, parse_labels, read_env_settings
from gerrors.tests.utils import ErrorOnlyLogger


def test_settings_defaults():
    s = FormatterSettings()
    assert s.template == DEFAULT_TEMPLATE  # nosec B101 - assert is appropriate in unit tests
    assert s.missing_value == DEFAULT_MISSING_VALUE  # nosec B101
    assert s.replace_missing_value is True  # nosec B101
    assert s.labels == {} and s.domain == "" and s.log_level is None  # nosec B101


def test_settings_normalize_log_level():
    assert FormatterSettings(log_level=" debug ").log_level == "DEBUG"  # nosec B101
    assert FormatterSettings(log_level="  ").log_level is None  # nosec B101


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), (" on ", True), ("0", False), (None, False)])
def test_is_truthy(raw, expected):
    assert is_truthy(raw) is expected  # nosec B101


def test_parse_labels():
    assert parse_labels("service=billing, region = eu ,broken,=x") == {"service": "billing", "region": "eu"}  # nosec B101
    assert parse_labels("") == {}  # nosec B101


def test_read_env_settings_only_reports_set_variables():
    env = {
        "GERRORS_TEMPLATE": "{identifier}: {message}",
        "GERRORS_DISABLE_MISSING_VALUE": "yes",
        "GERRORS_LABELS": "service=billing",
        "GERRORS_DOMAIN": "",
    }
    assert read_env_settings(env) == {  # nosec B101
        "template": "{identifier}: {message}",
        "replace_missing_value": False,
        "labels": {"service": "billing"},
    }


def test_load_config_file_yaml_section(tmp_path):
    path = tmp_path / "gerrors.yaml"
    path.write_text(yaml.safe_dump({"gerrors": {"domain": "a.example.com", "labels": {"team": "core"}}}))
    assert load_config_file(str(path)) == {"domain": "a.example.com", "labels": {"team": "core"}}  # nosec B101


def test_load_config_file_json_top_level(tmp_path):
    path = tmp_path / "gerrors.json"
    path.write_text(json.dumps({"missing_value": "?"}))
    assert load_config_file(str(path)) == {"missing_value": "?"}  # nosec B101
    assert load_config_file(str(tmp_path / "absent.json")) == {}  # nosec B101
    assert load_config_file(None) == {}  # nosec B101


def test_get_formatter_settings_layering(monkeypatch, tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("domain: file.example.com\nmissing_value: FILE\n")
    monkeypatch.setenv("GERRORS_DOMAIN", "env.example.com")
    monkeypatch.setenv("GERRORS_MISSING_VALUE", "ENV")
    monkeypatch.setenv("GERRORS_LABELS", "service=billing")
    monkeypatch.setenv("GERRORS_CONFIG_FILE", str(path))
    s = get_formatter_settings({"missing_value": "OVERRIDE", "domain": None})
    assert s.domain == "file.example.com"  # nosec B101 - file beats env
    assert s.missing_value == "OVERRIDE"  # nosec B101 - overrides beat file
    assert s.labels == {"service": "billing"}  # nosec B101


def test_formatter_from_settings():
    s = FormatterSettings(
        template="{identifier}|{message}",
        replace_missing_value=False,
        labels={"service": "billing", "version": 2},
        domain="billing.example.com",
    )
    f = formatter_from_settings(s)
    assert f.template_text == "{identifier}|{message}"  # nosec B101
    assert f.missing_value_replacement is None  # nosec B101
    assert f.labels_map() == {"service": "billing", "version": "2"}  # nosec B101
    assert f.domain == "billing.example.com"  # nosec B101
    assert f.logger is None  # nosec B101
    assert str(f.new(None, Code.STORAGE, "dangling")) == "storage|unable to perform storage-related operation"  # nosec B101


def test_formatter_from_settings_uses_environment(monkeypatch):
    monkeypatch.setenv("GERRORS_MISSING_VALUE", "N/A")
    monkeypatch.setenv("GERRORS_LABELS", "region")
    f = formatter_from_settings()
    assert f.missing_value_replacement == "N/A"  # nosec B101
    assert f.labels_map() == {}  # nosec B101 - "region" has no "=" and is skipped


def test_formatter_from_settings_code_parts():
    mapper = Mapper(Code.UNKNOWN, get_default_mapping())
    logger = ErrorOnlyLogger()
    f = formatter_from_settings(FormatterSettings(), lookuper=mapper, logger=logger)
    assert f.lookuper is mapper and f.logger is logger  # nosec B101


def test_formatter_from_settings_log_level_attaches_shared_logger():
    f = formatter_from_settings(FormatterSettings(log_level="warning"))
    assert isinstance(f.logger, LoggingAdapter)  # nosec B101
    assert f.logger.logger.name == "gerrors"  # nosec B101


def test_formatter_from_settings_rejects_bad_template():
    with pytest.raises(TemplateConfigError):
        formatter_from_settings(FormatterSettings(template="{0}"))
