import pytest

import main

EXAMPLE = ">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>"


def test_default_queries(tmp_path, capsys):
    path = tmp_path / "17.in"
    path.write_text(EXAMPLE + "\n")
    main.main([str(path)])
    assert capsys.readouterr().out.split() == ["3068", "1514285714288"]


def test_one_line_per_pattern_per_pass(tmp_path, capsys):
    path = tmp_path / "17.in"
    path.write_text(f"{EXAMPLE}\n>\n")
    out = tmp_path / "heights.txt"
    main.main([str(path), "--drops", "1", "2", "--output", str(out)])
    assert capsys.readouterr().out.split() == ["1", "1", "4", "4"]
    assert out.read_text() == "1\n1\n4\n4\n"


def test_dump_goes_to_stderr(tmp_path, capsys):
    path = tmp_path / "17.in"
    path.write_text(">\n")
    main.main([str(path), "--drops", "1", "--dump", "--no-cycle-detection"])
    captured = capsys.readouterr()
    assert captured.out.split() == ["1"]
    assert "...@@@@" in captured.err


def test_missing_input_is_fatal(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main.main([str(tmp_path / "missing.in")])
    assert "could not read" in str(excinfo.value)


def test_spaces_in_input_push_right(tmp_path, capsys):
    path = tmp_path / "17.in"
    path.write_text("<<> \n<<>\n")
    main.main([str(path), "--drops", "2022"])
    assert capsys.readouterr().out.split() == ["4444", "2832"]
