"""Tests for the command line tool."""

from gamecontroller import gamestate
from gamecontroller.cli import main


def test_return_to_file(tmp_path):
    path = tmp_path / "return.bin"
    assert main(["return", "--team", "5", "--player", "1", "-o", str(path)]) == 0
    assert path.read_bytes() == b"RGrt\x02\x05\x01\x02"


def test_return_to_stdout(capsys):
    assert main(["return", "--team", "5", "--player", "1", "--message", "penalise", "--hex"]) == 0
    assert capsys.readouterr().out.strip() == "5247727402050100"


def test_return_out_of_range(caplog):
    assert main(["return", "--team", "300", "--player", "1"]) == 1
    assert "Error" in caplog.text


def test_gamestate_then_decode(tmp_path, caplog):
    path = tmp_path / "state.bin"
    assert main(["gamestate", "--state", "playing", "--teams", "3", "8", "-o", str(path)]) == 0

    packet = gamestate.decode(path.read_bytes())
    assert packet.team(3) is not None
    assert packet.team(8) is not None

    caplog.clear()
    assert main(["decode", str(path)]) == 0
    assert "PLAYING" in caplog.text
    assert "Team 8 (RED)" in caplog.text
    assert "DROPBALL" in caplog.text
    assert "Player 5" in caplog.text
    assert "Player 6" not in caplog.text


def test_decode_hex_return(tmp_path, caplog):
    path = tmp_path / "return.hex"
    path.write_text("52 47 72 74 02 05 01 02\n")
    assert main(["decode", "--hex", str(path)]) == 0
    assert "ALIVE" in caplog.text


def test_decode_hex_output(tmp_path, caplog):
    path = tmp_path / "state.hex"
    assert main(["gamestate", "--hex", "-o", str(path)]) == 0
    assert main(["decode", "--hex", "--league", "hl_kid", str(path)]) == 0
    assert "INITIAL" in caplog.text


def test_decode_bad_packet(tmp_path, caplog):
    path = tmp_path / "junk.bin"
    path.write_bytes(b"\x00" * 10)
    assert main(["decode", str(path)]) == 1
    assert "Parse Error" in caplog.text


def test_return_raw_to_stdout(capsysbinary):
    """Without --hex the raw packet bytes go to stdout."""
    assert main(["return", "--team", "5", "--player", "1"]) == 0
    assert capsysbinary.readouterr().out == b"RGrt\x02\x05\x01\x02"


def test_decode_invalid_hex(tmp_path, caplog):
    path = tmp_path / "junk.hex"
    path.write_text("zz not hex")
    assert main(["decode", "--hex", str(path)]) == 1
    assert "Cannot read" in caplog.text


def test_decode_missing_file(tmp_path, caplog):
    assert main(["decode", str(tmp_path / "missing.bin")]) == 1
    assert "Cannot read" in caplog.text


def test_import_main_module_does_not_run():
    import gamecontroller.__main__  # noqa: F401
