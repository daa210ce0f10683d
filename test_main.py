import pytest

import main
from main import _parse_args


@pytest.mark.parametrize(
    "args, expected",
    [
        ([], ("run", None)),
        (["~/notes"], ("run", "~/notes")),
        (["-v"], ("version", None)),
        (["-V"], ("version", None)),
        (["-h"], ("help", None)),
        (["--help"], ("help", None)),
        (["a", "b"], ("usage_error", None)),
        (["--bogus"], ("usage_error", None)),
    ],
)
def test_parse_args(args, expected):
    assert _parse_args(args) == expected


def test_version_flag_prints_version(capsys):
    assert main.main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == main.__version__


def test_unusable_notes_dir_exits_with_error(tmp_path, monkeypatch, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("")
    monkeypatch.setattr(main.config_paths, "CONFIG_DIR", str(tmp_path / "cfg"))
    monkeypatch.setattr(main.config_paths, "CONFIG_JSON", str(tmp_path / "cfg" / "config.json"))
    monkeypatch.setattr(main.config_paths, "LOG_PATH", str(tmp_path / "cfg" / "trmnotes.log"))
    monkeypatch.setattr(main, "configure_logging", lambda *a, **k: None)

    def no_curses(_):
        raise AssertionError("curses should not start")

    monkeypatch.setattr(main.curses, "wrapper", no_curses)

    assert main.main([str(blocker / "notes")]) == 1
    assert "cannot create" in capsys.readouterr().err
