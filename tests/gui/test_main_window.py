import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMessageBox
from unittest.mock import MagicMock, patch
from gui.main_window import MainWindow

@pytest.fixture
def window(config, qtbot):
    config.set_qr_box_size(2)
    win = MainWindow(app_config=config)
    win.show()
    qtbot.addWidget(win)
    return win

def fill(window, name="Muster GmbH", iban="AT61 1904 3002 3457 3201", bic="", amount="EUR12.34",
         reference="", reason="rent"):
    window.recipient_edit.setText(name)
    window.iban_edit.setText(iban)
    window.bic_edit.setText(bic)
    window.amount_edit.setText(amount)
    window.reference_edit.setText(reference)
    window.reason_edit.setText(reason)

def test_generate_shows_code(window, qtbot):
    fill(window)
    with patch("gui.main_window.show_selectable_message_box") as msg_box:
        with qtbot.waitSignal(window.payload_generated, timeout=1000) as blocker:
            window.btn_generate.click()
        msg_box.assert_not_called()

    text = blocker.args[0]
    assert text.split("\n")[6] == "AT611904300234573201"
    assert window.current_payload.text == text
    assert not window.qr_label.pixmap().isNull()
    assert window.btn_copy_payload.isEnabled()
    assert window.btn_save_image.isEnabled()

def test_invalid_iban_blocks(window):
    fill(window, iban="AT62 1904 3002 3457 3201")
    with patch("gui.main_window.show_selectable_message_box") as msg_box:
        result = window.submit()

    assert not result.ok
    msg_box.assert_called_once()
    assert msg_box.call_args.args[2] == "invalid IBAN"
    assert msg_box.call_args.kwargs["icon"] == QMessageBox.Icon.Warning
    assert window.current_payload is None
    assert window.qr_label.pixmap().isNull()
    assert not window.btn_copy_payload.isEnabled()

def test_failed_resubmit_clears_previous_code(window):
    fill(window)
    with patch("gui.main_window.show_selectable_message_box"):
        assert window.submit().ok
        window.bic_edit.setText("giboatww")
        result = window.submit()

    assert result.message == "invalid BIC"
    assert window.current_image is None
    assert window.qr_label.pixmap().isNull()

def test_typing_invalidates_code(window, qtbot):
    fill(window)
    with patch("gui.main_window.show_selectable_message_box"):
        window.submit()
    assert window.current_payload is not None

    qtbot.keyClicks(window.amount_edit, "5")
    assert window.current_payload is None
    assert not window.btn_save_image.isEnabled()

def test_return_key_submits(window, qtbot):
    fill(window)
    with qtbot.waitSignal(window.payload_generated, timeout=1000):
        qtbot.keyClick(window.reason_edit, Qt.Key.Key_Return)

def test_render_error_is_reported(window):
    fill(window)
    with patch("gui.main_window.GiroCodeGenerator.get_qr_image", side_effect=ValueError("boom")), \
         patch("gui.main_window.show_selectable_message_box") as msg_box:
        assert window.submit() is None

    assert msg_box.call_args.args[2] == "boom"
    assert msg_box.call_args.kwargs["icon"] == QMessageBox.Icon.Critical
    assert window.current_payload is None

def test_copy_payload(window):
    fill(window)
    with patch("gui.main_window.show_selectable_message_box"):
        window.submit()

    clipboard = MagicMock()
    with patch("gui.main_window.QApplication.clipboard", return_value=clipboard):
        window.copy_payload()
    clipboard.setText.assert_called_once_with(window.current_payload.text)

def test_save_image(window, config, tmp_path):
    fill(window)
    with patch("gui.main_window.show_selectable_message_box"):
        window.submit()

    target = tmp_path / "out" / "slip.png"
    target.parent.mkdir()
    with patch("gui.main_window.QFileDialog.getSaveFileName", return_value=(str(target), "")):
        window.save_image()

    assert target.read_bytes()[:4] == b"\x89PNG"
    assert config.get_export_dir() == str(target.parent)

def test_save_image_cancelled(window, config):
    fill(window)
    with patch("gui.main_window.show_selectable_message_box"):
        window.submit()

    with patch("gui.main_window.QFileDialog.getSaveFileName", return_value=("", "")):
        window.save_image()
    assert config.get_export_dir() == ""
