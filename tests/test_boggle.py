import pytest

from boggleht.boggle import boggle, format_board, gen_board, main, parse_dict, print_board


def _write_dict(tmp_path, text):
    path = tmp_path / "dict.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_gen_board_dimensions_and_letters():
    board = gen_board(5, 42)
    assert len(board) == 5
    assert all(len(row) == 5 for row in board)
    assert all(len(cell) == 1 and "A" <= cell <= "Z" for row in board for cell in row)


def test_gen_board_is_deterministic():
    large = gen_board(8, 7)
    small = gen_board(3, 7)
    assert len(large) == 8
    assert all(len(row) == 8 for row in large)
    # Cells are drawn row by row from the same seeded stream, so a smaller
    # board holds the first draws of a larger one made with the same seed.
    large_cells = [cell for row in large for cell in row]
    small_cells = [cell for row in small for cell in row]
    assert small_cells == large_cells[: len(small_cells)]


def test_gen_board_depends_on_seed():
    assert gen_board(10, 1) != gen_board(10, 2)


def test_gen_board_zero_size():
    assert gen_board(0, 3) == []


def test_format_board():
    assert format_board([["A", "B"], ["C", "D"]]) == " A B\n C D\n"


def test_print_board(capsys):
    print_board([["Q"]])
    assert capsys.readouterr().out == " Q\n"


def test_parse_dict(tmp_path):
    path = _write_dict(tmp_path, "cat cats\ndog\n")
    words, prefixes = parse_dict(path)
    assert words == {"cat", "cats", "dog"}
    assert prefixes == {"", "c", "ca", "cat", "d", "do"}


def test_parse_dict_missing_file(tmp_path):
    with pytest.raises(ValueError):
        parse_dict(str(tmp_path / "missing.txt"))


def test_parse_dict_prefix_invariant(tmp_path):
    words, prefixes = parse_dict(_write_dict(tmp_path, "alpha beta gamma delta"))
    for word in words:
        for i in range(len(word)):
            assert word[:i] in prefixes
        assert word not in prefixes or any(
            other != word and other.startswith(word) for other in words
        )


BOARD = [
    ["C", "A", "T"],
    ["X", "A", "X"],
    ["X", "X", "T"],
]


def test_boggle_horizontal():
    result = boggle({"CAT"}, {"", "C", "CA"}, BOARD)
    assert result == {"CAT"}


def test_boggle_diagonal():
    result = boggle({"CAT"}, {"", "C", "CA"}, [["C", "X", "X"], ["X", "A", "X"], ["X", "X", "T"]])
    assert result == {"CAT"}


def test_boggle_vertical():
    board = [["D", "X"], ["O", "X"]]
    assert boggle({"DO"}, {"", "D"}, board) == {"DO"}


def test_boggle_keeps_only_longest_from_a_start():
    result = boggle({"CA", "CAT"}, {"", "C", "CA"}, BOARD)
    assert result == {"CAT"}


def test_boggle_does_not_read_backwards():
    assert boggle({"TAC"}, {"", "T", "TA"}, BOARD) == set()


def test_boggle_stops_at_non_prefix():
    # "CA" is not a prefix here, so the walk never reaches "CAT".
    assert boggle({"CAT"}, {"", "C"}, BOARD) == set()


def test_boggle_results_are_dictionary_words(tmp_path):
    board = gen_board(6, 11)
    words, prefixes = parse_dict(_write_dict(tmp_path, "A AN AT TO IT NO ON IN EAT TEA"))
    result = boggle(words, prefixes, board)
    assert result <= words


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Usage: boggle-driver <size> <seed> <dictionary file>\n"


def test_main_missing_dictionary(tmp_path):
    assert main(["3", "1", str(tmp_path / "missing.txt")]) == 1


def test_main_empty_dictionary(tmp_path, capsys):
    path = _write_dict(tmp_path, "")
    assert main(["2", "5", path]) == 0
    out = capsys.readouterr().out
    assert out == format_board(gen_board(2, 5)) + "Found 0 words:\n\n"


def test_main_lists_found_words(tmp_path, capsys):
    board = gen_board(4, 9)
    letters = sorted({cell for row in board for cell in row})
    path = _write_dict(tmp_path, " ".join(letters))
    assert main(["4", "9", path]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:4] == format_board(board).splitlines()
    assert lines[4] == f"Found {len(letters)} words:"
    assert lines[5] == ", ".join(letters)