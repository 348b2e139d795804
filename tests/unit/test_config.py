import pytest
from core.config import AppConfig

def test_defaults(config):
    assert config.get_log_level() == "WARNING"
    assert config.get_log_components() == {}
    assert config.get_qr_box_size() == 10
    assert config.get_qr_border() == 4
    assert config.get_export_dir() == ""

def test_set_get_values(config):
    config.set_log_level("debug")
    assert config.get_log_level() == "DEBUG"

    config.set_log_components({"validation": "DEBUG"})
    assert config.get_log_components() == {"validation": "DEBUG"}

    config.set_qr_box_size(6)
    config.set_qr_border(2)
    assert config.get_qr_box_size() == 6
    assert config.get_qr_border() == 2

    config.set_export_dir("  /tmp/codes  ")
    assert config.get_export_dir() == "/tmp/codes"

def test_corrupt_values_fall_back(config):
    config.settings.setValue("QRCode/box_size", "huge")
    config.settings.setValue("Logging/log_components", "{not json")
    assert config.get_qr_box_size() == AppConfig.DEFAULT_QR_BOX_SIZE
    assert config.get_log_components() == {}

def test_qr_sizes_are_clamped(config):
    config.set_qr_box_size(0)
    config.set_qr_border(-3)
    assert config.get_qr_box_size() == 1
    assert config.get_qr_border() == 0

def test_profile_isolation():
    cfg = AppConfig(profile="unittest")
    try:
        assert cfg.active_id == "zahlschein2qr-unittest"
        assert cfg.get_log_file_path().name == "app.log"
        assert cfg.get_log_file_path().parent.name == "zahlschein2qr-unittest"
    finally:
        AppConfig._active_profile = None
