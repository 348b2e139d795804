import pytest
from unittest.mock import patch
import main

VALID_ARGS = ["--name", "Muster GmbH", "--iban", "AT61 1904 3002 3457 3201", "--amount", "EUR12.34"]

@pytest.fixture(autouse=True)
def isolated_app(config):
    """Routes main() to the throwaway test config and skips handler setup."""
    with patch("main.AppConfig", return_value=config), patch("main.setup_logging"):
        yield

def test_headless_prints_payload(capsys):
    assert main.main(VALID_ARGS + ["--reason", "rent"]) == main.EXIT_OK
    out = capsys.readouterr().out
    lines = out.rstrip("\n").split("\n")
    assert lines[:4] == ["BCD", "002", "1", "SCT"]
    assert lines[5] == "Muster GmbH"
    assert lines[6] == "AT611904300234573201"
    assert lines[7] == "EUR12.34"

def test_headless_reference_wins(capsys):
    main.main(VALID_ARGS + ["--reference", "RF18000000000000000000000", "--reason", "rent"])
    out = capsys.readouterr().out
    # Trailing empty fields are newline-only, so split the raw text
    fields = out[:-1].split("\n")
    assert len(fields) == 12
    assert fields[9] == "RF18000000000000000000000"
    assert fields[10] == ""

@pytest.mark.parametrize("extra, message", [
    (["--iban", "AT62 1904 3002 3457 3201"], "invalid IBAN"),
    (["--bic", "TOO1"], "invalid BIC"),
    (["--name", ""], "invalid recipient name"),
])
def test_headless_invalid_input(capsys, extra, message):
    assert main.main(VALID_ARGS + extra) == main.EXIT_INVALID_INPUT
    captured = capsys.readouterr()
    assert captured.out == ""
    assert message in captured.err

def test_headless_writes_png(tmp_path, capsys):
    out_file = tmp_path / "code.png"
    assert main.main(VALID_ARGS + ["--output", str(out_file)]) == main.EXIT_OK
    assert out_file.read_bytes()[:4] == b"\x89PNG"
    assert "BCD" in capsys.readouterr().out

def test_headless_render_failure(tmp_path, capsys):
    with patch("main.GiroCodeGenerator.get_qr_image", side_effect=ValueError("boom")):
        code = main.main(VALID_ARGS + ["--output", str(tmp_path / "x.png")])
    assert code == main.EXIT_RENDER_ERROR
    assert "boom" in capsys.readouterr().err

def test_gui_started_without_iban():
    with patch("main.run_gui", return_value=0) as run_gui:
        assert main.main(["--name", "X"]) == 0
        run_gui.assert_called_once()

def test_headless_multiline_name_stays_one_field(capsys):
    args = ["--name", "Muster\nGmbH", "--iban", "AT611904300234573201", "--reason", "rent"]
    assert main.main(args) == main.EXIT_OK
    fields = capsys.readouterr().out[:-1].split("\n")
    assert len(fields) == 12
    assert fields[5] == "MusterGmbH"
    assert fields[6] == "AT611904300234573201"
    assert fields[10] == "rent"
