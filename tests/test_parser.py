import io

import pytest

from wisp.parser import MazeLoadError, format_maze, load_maze, parse_maze, print_maze

SIMPLE = "#####\n#S E#\n#####\n"


def test_parse_dimensions_and_endpoints():
    maze = parse_maze(SIMPLE)
    assert (maze.width, maze.height) == (5, 3)
    assert maze.start is maze.cell(1, 1)
    assert maze.end is maze.cell(3, 1)
    assert maze.cell(0, 0).is_wall
    assert not maze.cell(2, 1).is_wall


def test_format_round_trip():
    assert format_maze(parse_maze(SIMPLE)) == SIMPLE


def test_other_characters_are_open():
    maze = parse_maze("S.x\n#@E\n")
    assert format_maze(maze) == "S  \n# E\n"


def test_crlf_line_endings():
    maze = parse_maze(SIMPLE.replace("\n", "\r\n"))
    assert format_maze(maze) == SIMPLE


def test_last_line_without_newline():
    maze = parse_maze("S#\n#E")
    assert maze.height == 2
    assert maze.end is maze.cell(1, 1)


def test_last_start_wins():
    maze = parse_maze("SS E\n")
    assert maze.start is maze.cell(1, 0)


def test_inconsistent_lines():
    with pytest.raises(MazeLoadError, match="Inconsistent line lengths"):
        parse_maze("S  \n  E \n")


def test_missing_start():
    with pytest.raises(MazeLoadError, match="no start point 'S'"):
        parse_maze("  E\n")


def test_missing_end():
    with pytest.raises(MazeLoadError, match="no end point 'E'"):
        parse_maze("S  \n")


def test_missing_both_reports_both():
    with pytest.raises(MazeLoadError) as info:
        parse_maze("")
    assert "'S'" in str(info.value)
    assert "'E'" in str(info.value)


def test_too_wide():
    with pytest.raises(MazeLoadError):
        parse_maze("S" + " " * 100 + "E\n")


def test_too_tall():
    rows = ["S"] + [" "] * 99 + ["E"]
    with pytest.raises(MazeLoadError):
        parse_maze("\n".join(rows) + "\n")


def test_load_maze_from_file(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text(SIMPLE, encoding="utf-8")
    assert format_maze(load_maze(path)) == SIMPLE
    assert format_maze(load_maze(str(path))) == SIMPLE


def test_load_missing_file(tmp_path):
    missing = tmp_path / "absent.txt"
    with pytest.raises(MazeLoadError, match="Error opening file"):
        load_maze(missing)


def test_print_maze_writes_to_file():
    out = io.StringIO()
    print_maze(parse_maze(SIMPLE), out)
    assert out.getvalue() == SIMPLE


def test_print_maze_defaults_to_stdout(capsys):
    print_maze(parse_maze(SIMPLE))
    assert capsys.readouterr().out == SIMPLE


def test_format_marks_path():
    maze = parse_maze(SIMPLE)
    maze.cell(2, 1).on_path = True
    maze.start.on_path = True
    assert format_maze(maze).splitlines()[1] == "#S.E#"