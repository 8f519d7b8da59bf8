import pytest

from dsakit.cli import main, print_rust


def test_print_rust(capsys):
    print_rust()
    assert capsys.readouterr().out == "Welcome to Rust\n"


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Welcome to Rust"
    assert lines[1] == "0, 1, 2, 3, 4, 5, 6, 7, 8, 9, "
    assert "root_value: 1" in lines
    assert "left_value: 0" in lines
    assert "right_value: 2" in lines
    assert "value_parent_new: 3" in lines


def test_main_traversals_repeat(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("------pretorder------") == 2
    assert lines.count("------inorder------") == 2
    assert lines.count("------postorder------") == 2
    start = lines.index("------pretorder------")
    assert lines[start + 1:start + 4] == ["key is 3", "key is 0", "key is 2"]


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit):
        main(["--bogus"])