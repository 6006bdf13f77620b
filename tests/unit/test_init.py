"""
Модульные тесты для vcardqr/__init__.py
Тестирует метаданные, логирование, конфигурацию и публичный API.
"""

import json
import logging
import re
from pathlib import Path

import pytest

import vcardqr


class TestVersionMetadata:
    """Тестирование метаданных версии."""

    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", vcardqr.__version__)

    def test_version_components(self) -> None:
        expected = f"{vcardqr.VERSION_MAJOR}.{vcardqr.VERSION_MINOR}.{vcardqr.VERSION_PATCH}"
        assert vcardqr.__version__ == expected


class TestLogging:
    """Тестирование логирования пакета."""

    def test_package_logger_configured(self) -> None:
        root = logging.getLogger("vcardqr")
        assert root.handlers
        assert root.propagate is False

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("vcardqr.barcodegen", "vcardqr.barcodegen"),
            ("my_plugin", "vcardqr.my_plugin"),
            (".relative", "vcardqr.relative"),
            ("__main__", "vcardqr.main"),
        ],
    )
    def test_get_logger_namespace(self, name: str, expected: str) -> None:
        assert vcardqr.get_logger(name).name == expected

    def test_setup_is_idempotent(self) -> None:
        root = logging.getLogger("vcardqr")
        before = list(root.handlers)
        vcardqr._setup_logging()
        assert root.handlers == before


class TestLoadConfig:
    """Тестирование загрузки конфигурации."""

    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        config = vcardqr.load_config(tmp_path / "absent.json")
        assert config == {
            "error_correction": "M",
            "default_color": "#000000",
        }

    def test_user_values_override(self, tmp_path: Path) -> None:
        path = tmp_path / "vcardqr.json"
        path.write_text(json.dumps({"error_correction": "Q"}), encoding="utf-8")
        config = vcardqr.load_config(path)
        assert config["error_correction"] == "Q"
        assert config["default_color"] == "#000000"

    def test_invalid_json_falls_back(self, tmp_path: Path) -> None:
        path = tmp_path / "vcardqr.json"
        path.write_text("{not json", encoding="utf-8")
        assert vcardqr.load_config(path)["error_correction"] == "M"

    def test_non_object_falls_back(self, tmp_path: Path) -> None:
        path = tmp_path / "vcardqr.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert vcardqr.load_config(path)["error_correction"] == "M"

    def test_defaults_not_mutated(self, tmp_path: Path) -> None:
        path = tmp_path / "vcardqr.json"
        path.write_text(json.dumps({"default_color": "#123456"}), encoding="utf-8")
        vcardqr.load_config(path)
        assert vcardqr._DEFAULT_CONFIG["default_color"] == "#000000"


class TestPublicAPI:
    """Тестирование публичного API."""

    def test_all_exports_exist(self) -> None:
        for name in vcardqr.__all__:
            assert hasattr(vcardqr, name), name

    def test_end_to_end(self) -> None:
        record = vcardqr.ContactRecord(given_name="John", family_name="Doe")
        image = vcardqr.generate_vcard_qr(record, color="#FF0000")
        assert image.transport_string.startswith("data:image/png;base64,")
