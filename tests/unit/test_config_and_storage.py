"""Tests for configuration persistence and upload storage."""

import json

import pytest

from services.config_manager import ConfigManager
from services.storage import ARCHIVE_COMPARE, CSV, FILE_COMPARE, UploadStorage, get_storage


class TestConfigManager:
    def test_singleton(self, config_dir):
        assert ConfigManager.get_instance() is ConfigManager.get_instance()

    def test_defaults_fill_missing_sections(self, config_dir):
        config = ConfigManager.get_instance().get_config()

        assert config["server"] == {"host": "0.0.0.0", "port": 8080}
        assert config["csv"]["preview_rows"] == 10
        assert config["storage"]["upload_dir"].endswith("uploads")

    def test_save_merges_and_persists(self, config_dir):
        manager = ConfigManager.get_instance()

        manager.save_config({"csv": {"preview_rows": 3}})

        stored = json.loads((config_dir / "config.json").read_text(encoding="utf-8"))
        assert stored["csv"]["preview_rows"] == 3
        assert stored["server"]["port"] == 8080
        assert manager.get_config()["storage"]["upload_dir"].endswith("uploads")

    def test_malformed_file_falls_back_to_defaults(self, config_dir):
        (config_dir / "config.json").write_text("{not json", encoding="utf-8")
        ConfigManager.reset_instance()

        config = ConfigManager.get_instance().get_config()

        assert config["storage"]["upload_dir"] == "uploads"

    def test_get_config_returns_copy(self, config_dir):
        manager = ConfigManager.get_instance()

        manager.get_config()["csv"]["preview_rows"] = 99

        assert manager.get_config()["csv"]["preview_rows"] == 10

    def test_get_rereads_file(self, config_dir):
        manager = ConfigManager.get_instance()
        (config_dir / "config.json").write_text(json.dumps({"csv": {"preview_rows": 4}}), encoding="utf-8")

        assert manager.get("csv") == {"preview_rows": 4}
        assert manager.get("csv") == manager.get_config()["csv"]

    def test_get_missing_key_returns_default(self, config_dir):
        assert ConfigManager.get_instance().get("missing", "fallback") == "fallback"

    def test_set_persists_section(self, config_dir):
        manager = ConfigManager.get_instance()

        manager.set("server", {"port": 9000})

        stored = json.loads((config_dir / "config.json").read_text(encoding="utf-8"))
        assert stored["server"] == {"host": "0.0.0.0", "port": 9000}
        assert manager.get("server")["port"] == 9000

    def test_invalid_values_fall_back_to_defaults(self, config_dir):
        settings = {
            "storage": "oops",
            "csv": {"preview_rows": "ten"},
            "server": {"host": "127.0.0.1", "port": True},
        }
        (config_dir / "config.json").write_text(json.dumps(settings), encoding="utf-8")

        config = ConfigManager.get_instance().get_config()

        assert config["storage"] == {"upload_dir": "uploads", "temp_dir": "temp"}
        assert config["csv"]["preview_rows"] == 10
        assert config["server"] == {"host": "127.0.0.1", "port": 8080}

    def test_negative_preview_rows_fall_back(self, config_dir):
        (config_dir / "config.json").write_text(json.dumps({"csv": {"preview_rows": -3}}), encoding="utf-8")

        assert ConfigManager.get_instance().get_config()["csv"]["preview_rows"] == 10


class TestUploadStorage:
    def test_ensure_directories(self, tmp_path):
        storage = UploadStorage({"storage": {"upload_dir": str(tmp_path / "up"), "temp_dir": str(tmp_path / "t")}})

        storage.ensure_directories()

        for category in (FILE_COMPARE, CSV, ARCHIVE_COMPARE):
            assert (tmp_path / "up" / category).is_dir()
        assert (tmp_path / "t").is_dir()

    def test_save_upload_strips_client_path(self, tmp_path):
        storage = UploadStorage({"storage": {"upload_dir": str(tmp_path)}})

        path = storage.save_upload(CSV, "../../etc/data.csv", b"a,b\n")

        assert path.parent == tmp_path / CSV
        assert path.name.endswith("_data.csv")
        assert path.read_bytes() == b"a,b\n"

    def test_offset_keeps_names_unique(self, tmp_path):
        storage = UploadStorage({"storage": {"upload_dir": str(tmp_path)}})

        first = storage.save_upload(FILE_COMPARE, "a.txt", b"1", offset=0)
        second = storage.save_upload(FILE_COMPARE, "a.txt", b"2", offset=1)

        assert first != second

    def test_unknown_category(self, tmp_path):
        storage = UploadStorage({"storage": {"upload_dir": str(tmp_path)}})

        with pytest.raises(ValueError):
            storage.category_dir("images")

    def test_read_text_replaces_invalid_bytes(self, tmp_path):
        path = tmp_path / "bin.txt"
        path.write_bytes(b"ok\xff\n")

        assert UploadStorage.read_text(path) == "ok\ufffd\n"

    def test_get_storage_uses_config(self, config_dir, tmp_path):
        assert get_storage().upload_dir == tmp_path / "uploads"

    def test_explicit_timestamp_names_file(self, tmp_path):
        storage = UploadStorage({"storage": {"upload_dir": str(tmp_path)}})

        path = storage.save_upload(ARCHIVE_COMPARE, "trades.zip", b"x", timestamp=12345)

        assert path.name == "12345_trades.zip"
