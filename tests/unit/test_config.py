"""
Configuration Module Unit Tests
"""

import json
from pathlib import Path
import pytest

from supersaver_pos.config import (
    PosConfig,
    DiscountPolicy,
    MalformedRowPolicy,
    ConfigLoader,
    ConfigValidator,
    ConfigDefaults,
)
from supersaver_pos.exceptions import ConfigError, ValidationError


class TestConfigValidator:
    """Tests for ConfigValidator"""

    @pytest.fixture
    def validator(self) -> ConfigValidator:
        return ConfigValidator()

    @pytest.fixture
    def valid_config(self) -> dict:
        return {
            "catalog_path": "items.csv",
            "receipts_dir": "./receipts",
            "pending_id_start": 1001,
            "discount_policy": "reject",
            "max_discount": 75,
            "malformed_row_policy": "skip",
            "log_level": "INFO",
        }

    def test_validate_valid_config(self, validator: ConfigValidator, valid_config: dict):
        """Should pass with valid configuration"""
        result = validator.validate(valid_config)
        assert result.valid is True
        assert len(result.errors) == 0

    def test_validate_empty_config(self, validator: ConfigValidator):
        """Should pass with no settings, every field has a default"""
        assert validator.validate({}).valid is True

    def test_validate_empty_catalog_path(self, validator: ConfigValidator, valid_config: dict):
        """Should fail when catalog_path is blank"""
        valid_config["catalog_path"] = "   "
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(
            e.field == "catalog_path" and "empty" in e.message
            for e in result.errors
        )

    def test_validate_prefix_with_separator(self, validator: ConfigValidator, valid_config: dict):
        """Should fail when a file prefix contains a path separator"""
        valid_config["receipt_prefix"] = "bills/Bill_"
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "receipt_prefix" for e in result.errors)

    def test_validate_report_prefix_shadows_receipts(self, validator: ConfigValidator, valid_config: dict):
        """Should fail when reports would be picked up as receipts"""
        valid_config["receipt_prefix"] = "Bill_"
        valid_config["report_prefix"] = "Bill_Report_"
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "report_prefix" for e in result.errors)

    def test_validate_pending_id_start(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with a non-positive pending id start"""
        valid_config["pending_id_start"] = 0
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "pending_id_start" for e in result.errors)

    def test_validate_max_discount_range(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with max_discount above 100"""
        valid_config["max_discount"] = 120
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(
            e.field == "max_discount" and "between 0 and 100" in e.message
            for e in result.errors
        )

    def test_validate_invalid_discount_policy(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with an unknown discount policy"""
        valid_config["discount_policy"] = "round"
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "discount_policy" for e in result.errors)

    def test_validate_policy_enum_values(self, validator: ConfigValidator, valid_config: dict):
        """Should accept enum members as well as their values"""
        valid_config["discount_policy"] = DiscountPolicy.CLAMP
        valid_config["malformed_row_policy"] = MalformedRowPolicy.ABORT
        assert validator.validate(valid_config).valid is True

    def test_validate_invalid_log_level(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with an unknown logging level"""
        valid_config["log_level"] = "LOUD"
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "log_level" for e in result.errors)

    def test_validate_or_raise_invalid(self, validator: ConfigValidator, valid_config: dict):
        """Should raise ValidationError with invalid configuration"""
        valid_config["max_discount"] = -5
        with pytest.raises(ValidationError):
            validator.validate_or_raise(valid_config)


class TestConfigLoader:
    """Tests for ConfigLoader"""

    @pytest.fixture
    def loader(self) -> ConfigLoader:
        return ConfigLoader()

    def test_from_dict(self, loader: ConfigLoader):
        """Should keep given overrides and drop unset ones"""
        config = {"catalog_path": "items.csv", "receipts_dir": None}
        result = loader.from_dict(config)
        assert result == {"catalog_path": "items.csv"}
        assert result is not config

    def test_from_dict_unknown_option(self, loader: ConfigLoader):
        """Should refuse keys that are not configuration fields"""
        with pytest.raises(ConfigError) as exc_info:
            loader.from_dict({"catalogue_path": "items.csv"})

        assert exc_info.value.code == "CONFIG_UNKNOWN_OPTION"
        assert "catalogue_path" in str(exc_info.value)

    def test_load_rejects_unknown_override(self, loader: ConfigLoader):
        """Should pass overrides through from_dict"""
        with pytest.raises(ConfigError):
            loader.load(env=False, config={"store": "Branch 7"})

    def test_from_environment(self, loader: ConfigLoader, monkeypatch):
        """Should load configuration from environment variables"""
        monkeypatch.setenv("POS_CATALOG_PATH", "/data/items.csv")
        monkeypatch.setenv("POS_PENDING_ID_START", "5001")
        monkeypatch.setenv("POS_MAX_DISCOUNT", "50")
        monkeypatch.setenv("POS_DISCOUNT_POLICY", "CLAMP")
        monkeypatch.setenv("POS_MALFORMED_ROW_POLICY", "abort")
        monkeypatch.setenv("POS_LOG_LEVEL", "debug")

        result = loader.from_environment()

        assert result["catalog_path"] == "/data/items.csv"
        assert result["pending_id_start"] == 5001
        assert result["max_discount"] == 50.0
        assert result["discount_policy"] == DiscountPolicy.CLAMP
        assert result["malformed_row_policy"] == MalformedRowPolicy.ABORT
        assert result["log_level"] == "DEBUG"

    def test_from_environment_ignores_empty(self, loader: ConfigLoader, monkeypatch):
        """Should skip empty environment variables"""
        monkeypatch.setenv("POS_RECEIPTS_DIR", "")
        assert "receipts_dir" not in loader.from_environment()

    def test_merge(self, loader: ConfigLoader):
        """Should merge multiple configurations with priority"""
        base = {"catalog_path": "base.csv", "receipts_dir": "./base"}
        override = {"catalog_path": "override.csv", "pending_id_start": 2001}

        result = loader.merge(base, override)

        assert result["catalog_path"] == "override.csv"
        assert result["receipts_dir"] == "./base"
        assert result["pending_id_start"] == 2001

    def test_merge_filters_none(self, loader: ConfigLoader):
        """Should not include None values from overrides"""
        base = {"catalog_path": "base.csv", "log_level": "INFO"}
        override = {"catalog_path": None, "log_level": "DEBUG"}

        result = loader.merge(base, override)

        assert result["catalog_path"] == "base.csv"
        assert result["log_level"] == "DEBUG"

    def test_resolve_applies_defaults(self, loader: ConfigLoader):
        """Should apply default values"""
        result = loader.resolve({})

        assert result.catalog_path == ConfigDefaults.CATALOG_PATH
        assert result.store_name == ConfigDefaults.STORE_NAME
        assert result.currency_marker == "Rs."
        assert result.receipt_prefix == "Bill_"
        assert result.report_prefix == "Revenue_Report_"
        assert result.pending_id_start == 1001
        assert result.discount_policy == DiscountPolicy.REJECT
        assert result.max_discount == 75.0
        assert result.malformed_row_policy == MalformedRowPolicy.SKIP

    def test_resolve_invalid_raises(self, loader: ConfigLoader):
        """Should raise ValidationError before building the model"""
        with pytest.raises(ValidationError):
            loader.resolve({"pending_id_start": -1})

    def test_from_file(self, loader: ConfigLoader, tmp_path: Path):
        """Should load configuration from JSON file"""
        config_path = tmp_path / "pos.json"
        config_path.write_text(json.dumps({"store_name": "Branch Store"}))

        result = loader.from_file(config_path)

        assert result["store_name"] == "Branch Store"

    def test_from_file_resolves_relative_paths(self, loader: ConfigLoader, tmp_path: Path):
        """Should resolve relative paths against the config file directory"""
        config_path = tmp_path / "conf" / "pos.json"
        config_path.parent.mkdir()
        config_path.write_text(json.dumps({
            "catalog_path": "items.csv",
            "receipts_dir": "/var/pos/receipts",
        }))

        result = loader.from_file(config_path)

        assert result["catalog_path"] == str(config_path.parent.resolve() / "items.csv")
        assert result["receipts_dir"] == "/var/pos/receipts"

    def test_from_file_not_found(self, loader: ConfigLoader):
        """Should raise error for missing file"""
        with pytest.raises(ConfigError) as exc_info:
            loader.from_file("/nonexistent/path.json")

        assert exc_info.value.code == "CONFIG_FILE_NOT_FOUND"

    def test_from_file_invalid_json(self, loader: ConfigLoader, tmp_path: Path):
        """Should raise error for invalid JSON"""
        config_path = tmp_path / "pos.json"
        config_path.write_text("{not json")

        with pytest.raises(ConfigError) as exc_info:
            loader.from_file(config_path)

        assert exc_info.value.code == "CONFIG_PARSE_ERROR"

    def test_from_file_is_directory(self, loader: ConfigLoader, tmp_path: Path):
        """Should wrap read failures in ConfigError"""
        with pytest.raises(ConfigError) as exc_info:
            loader.from_file(tmp_path)

        assert exc_info.value.code == "CONFIG_READ_ERROR"
        assert exc_info.value.cause is not None

    def test_load_priority(self, loader: ConfigLoader, tmp_path: Path, monkeypatch):
        """Should apply programmatic over environment over file"""
        config_path = tmp_path / "pos.json"
        config_path.write_text(json.dumps({
            "store_name": "From File",
            "currency_marker": "LKR ",
            "log_level": "ERROR",
        }))
        monkeypatch.setenv("POS_STORE_NAME", "From Env")
        monkeypatch.setenv("POS_LOG_LEVEL", "INFO")

        result = loader.load(file=config_path, config={"log_level": "DEBUG"})

        assert result.currency_marker == "LKR"
        assert result.store_name == "From Env"
        assert result.log_level == "DEBUG"

    def test_load_without_env(self, loader: ConfigLoader, monkeypatch):
        """Should ignore environment when env=False"""
        monkeypatch.setenv("POS_STORE_NAME", "From Env")
        result = loader.load(env=False)
        assert result.store_name == ConfigDefaults.STORE_NAME

    def test_create_template(self, loader: ConfigLoader, tmp_path: Path):
        """Should create template configuration file"""
        template_path = tmp_path / "config" / "template.json"
        loader.create_template(template_path)

        assert template_path.exists()

        with open(template_path) as f:
            template = json.load(f)

        assert template["pending_id_start"] == 1001
        assert template["discount_policy"] == "reject"

        # the template loads as-is
        assert loader.load(file=template_path, env=False).max_discount == 75.0


class TestPosConfig:
    """Tests for PosConfig Pydantic model"""

    def test_create_default_config(self):
        """Should create config with defaults"""
        config = PosConfig()
        assert config.catalog_path == "items.csv"
        assert config.receipts_dir == "."

    def test_log_level_normalized(self):
        """Should upper-case the log level"""
        assert PosConfig(log_level="info").log_level == "INFO"

    def test_invalid_log_level(self):
        """Should reject unknown log levels"""
        with pytest.raises(ValueError):
            PosConfig(log_level="chatty")

    def test_invalid_max_discount(self):
        """Should reject max_discount above 100"""
        with pytest.raises(ValueError):
            PosConfig(max_discount=101)

    def test_prefix_with_separator(self):
        """Should reject prefixes containing path separators"""
        with pytest.raises(ValueError):
            PosConfig(report_prefix="../Report_")

    def test_validate_assignment(self):
        """Should validate on assignment"""
        config = PosConfig()
        with pytest.raises(ValueError):
            config.pending_id_start = 0

    def test_report_prefix_shadowing_receipts(self):
        """Should reject a report prefix that matches the receipt pattern"""
        with pytest.raises(ValueError, match="report_prefix must not start with receipt_prefix"):
            PosConfig(receipt_prefix="Bill_", report_prefix="Bill_Report_")

    def test_report_prefix_checked_on_assignment(self):
        """Should reject a receipt prefix that would capture reports"""
        config = PosConfig()
        with pytest.raises(ValueError):
            config.receipt_prefix = "Rev"
