import io

import pytest

from dstructs.bst_cli import MENU, main, run


def _run(text):
    out = io.StringIO()
    tree = run(io.StringIO(text), out)
    return tree, out.getvalue()


def test_insert_and_inorder_traversal():
    tree, output = _run("1 5 1 3 1 8 5 6")
    assert list(tree) == [3, 5, 8]
    assert "Here is an inorder traversal of your tree: 3 5 8 \n" in output


def test_menu_is_printed_for_each_choice():
    _, output = _run("1 4 5 6")
    assert output.count(MENU) == 3


def test_search_found_and_not_found():
    _, output = _run("1 5 3 5 3 9 6")
    assert " Found 5 in the tree.\n" in output
    assert " Did not find 9 in the tree.\n" in output


def test_delete_missing_value_reports():
    tree, output = _run("1 5 2 7 6")
    assert "Sorry that value isn't in the tree to delete.\n" in output
    assert list(tree) == [5]


def test_delete_present_value():
    tree, _ = _run("1 5 1 3 1 8 2 5 6")
    assert list(tree) == [3, 8]


def test_sum_of_nodes():
    _, output = _run("1 5 1 3 1 8 4 6")
    assert "The sum of the nodes in your tree is 16.\n" in output


def test_rank_query_after_quit():
    _, output = _run("1 5 1 3 1 8 8 2")
    assert output.endswith("The item is 5\n")


def test_rank_out_of_range_reports():
    _, output = _run("1 5 6 4")
    assert output.endswith("There is no item of rank 4.\n")


def test_q6_finds_first_greater():
    _, output = _run("1 5 1 3 1 8 7 4 7 8 6")
    assert "Q6: 5\n" in output
    assert "Q6: none\n" in output


def test_duplicates_are_kept():
    tree, _ = _run("1 2 1 2 6")
    assert list(tree) == [2, 2]


def test_non_integer_input_raises():
    with pytest.raises(ValueError):
        _run("1 x")


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2