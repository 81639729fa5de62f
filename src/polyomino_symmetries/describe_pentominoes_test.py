import pytest
import polyomino_symmetries
from polyomino_symmetries.describe_pentominoes import render
from polyomino_symmetries.utils.polyominos import PENTOMINOS
from polyomino_symmetries.utils.shapes import Shape

def test_render():
    assert render(PENTOMINOS["F"]) == [
        ".##",
        "##.",
        ".#.",
    ]

def test_render_with_color():
    assert render(Shape.from_coords([(0, 0), (1, 1)]), "red") == [
        "[red]#[/red].",
        ".[red]#[/red]",
    ]

def test_render_empty():
    assert render(Shape.empty()) == []

def test_describe_single_pentomino(capsys):
    polyomino_symmetries.main(["describe-pentominoes", "x"])
    out = capsys.readouterr().out

    assert "X has 1 distinct orientation\n" in out
    assert "1.\n.#.\n###\n.#.\n" in out
    assert "2." not in out

def test_describe_all_pentominos(capsys):
    polyomino_symmetries.main(["describe-pentominoes"])
    out = capsys.readouterr().out

    assert out.count("================================") == 12
    assert "I has 2 distinct orientations" in out
    assert "F has 8 distinct orientations" in out

def test_unknown_pentomino():
    with pytest.raises(SystemExit) as excinfo:
        polyomino_symmetries.main(["describe-pentominoes", "Q"])
    assert excinfo.value.code == 2

def test_no_command_prints_help(capsys):
    polyomino_symmetries.main([])
    assert "describe-pentominoes" in capsys.readouterr().out

def test_verbose_after_command(capsys, caplog):
    polyomino_symmetries.main(["describe-pentominoes", "I", "-v"])
    assert "I has 2 distinct orientations" in capsys.readouterr().out

    messages = [record.getMessage() for record in caplog.records if record.levelname == "DEBUG"]
    assert "I has 2 orientations and is fixed by identity, mirror_horizontal, mirror_vertical, rotate180" in messages
    assert any(message.endswith("is fixed by ['identity', 'mirror_horizontal', 'mirror_vertical', 'rotate180']") for message in messages)

def test_debug_logging_is_off_by_default(caplog):
    polyomino_symmetries.main(["describe-pentominoes", "I"])
    assert not [record for record in caplog.records if record.levelname == "DEBUG"]
