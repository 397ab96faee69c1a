import pytest

from hashboggle.boggle import boggle, format_board, gen_board, main, parse_dict


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("CAT CA\nDOG\nAX\n")
    return path


def test_gen_board_shape_and_letters():
    board = gen_board(5, 42)
    assert len(board) == 5
    assert all(len(row) == 5 for row in board)
    assert all(ch.isupper() and ch.isalpha() for row in board for ch in row)


def test_gen_board_deterministic():
    assert gen_board(4, 7) == gen_board(4, 7)
    assert gen_board(0, 1) == []


def test_format_board():
    assert format_board([["A", "B"], ["C", "D"]]) == " A B\n C D\n"


def test_print_board(capsys):
    from hashboggle.boggle import print_board

    board = [["X", "Y"], ["Z", "W"]]
    print_board(board)
    assert capsys.readouterr().out == format_board(board)


def test_parse_dict(dict_file):
    words, prefixes = parse_dict(str(dict_file))
    assert words == {"CAT", "CA", "DOG", "AX"}
    assert "" in prefixes
    assert "CA" in prefixes
    assert "CAT" not in prefixes
    assert "DO" in prefixes


def test_parse_dict_missing(tmp_path):
    with pytest.raises(ValueError):
        parse_dict(str(tmp_path / "absent.txt"))


def test_boggle_records_longest_word(dict_file):
    words, prefixes = parse_dict(str(dict_file))
    board = [["C", "A", "T"], ["Q", "Q", "Q"], ["Q", "Q", "Q"]]
    assert boggle(words, prefixes, board) == {"CAT"}


def test_boggle_vertical_and_diagonal(dict_file):
    words, prefixes = parse_dict(str(dict_file))
    board = [["D", "Q", "Q"], ["O", "Q", "Q"], ["G", "Q", "Q"]]
    assert boggle(words, prefixes, board) == {"DOG"}
    diag = [["D", "Q", "Q"], ["Q", "O", "Q"], ["Q", "Q", "G"]]
    assert boggle(words, prefixes, diag) == {"DOG"}


def test_boggle_not_reversed(dict_file):
    words, prefixes = parse_dict(str(dict_file))
    board = [["T", "A", "C"], ["Q", "Q", "Q"], ["Q", "Q", "Q"]]
    assert boggle(words, prefixes, board) == set()


def test_boggle_results_are_dictionary_words(dict_file):
    words, prefixes = parse_dict(str(dict_file))
    board = gen_board(8, 3)
    assert boggle(words, prefixes, board) <= words


def test_main_usage(capsys):
    assert main(["3"]) == 1
    assert capsys.readouterr().out.startswith("Usage: boggle-driver")


def test_main_output(dict_file, capsys):
    assert main(["4", "11", str(dict_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[:4] == format_board(gen_board(4, 11)).splitlines()
    count = int(lines[4].split()[1])
    listed = [w for w in lines[5].split(", ") if w]
    assert count == len(listed)
    assert listed == sorted(listed)