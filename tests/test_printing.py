import io

from bintrees_kit.metrics import height
from bintrees_kit.node import Node
from bintrees_kit.printing import print_tree, render


def _sample():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left.insert_left(6)
    left.insert_right(56)
    right.insert_left(256)
    return root


def test_single_node():
    assert render(Node(98)) == "(098)"


def test_three_nodes_worked_example():
    root = Node(98)
    root.insert_left(12)
    root.insert_right(402)
    assert render(root).split("\n") == [
        "  .--(098)--.",
        "(012)     (402)",
    ]


def test_empty_tree_renders_nothing():
    assert render(None) == ""
    out = io.StringIO()
    print_tree(None, out)
    assert out.getvalue() == ""


def test_line_count_matches_height():
    tree = _sample()
    assert len(render(tree).split("\n")) == height(tree) + 1


def test_no_trailing_whitespace():
    for line in render(_sample()).split("\n"):
        assert line == line.rstrip()


def test_every_value_appears():
    text = render(_sample())
    for value in ("098", "012", "402", "006", "056", "256"):
        assert value in text


def test_large_value_is_not_truncated():
    root = Node(1024)
    root.insert_right(2048)
    text = render(root)
    assert "1024" in text
    assert "2048" in text


def test_print_tree_writes_render_with_newline():
    tree = _sample()
    out = io.StringIO()
    print_tree(tree, out)
    assert out.getvalue() == render(tree) + "\n"


def test_print_tree_defaults_to_stdout(capsys):
    tree = _sample()
    print_tree(tree)
    assert capsys.readouterr().out == render(tree) + "\n"


def test_subtree_renders_from_its_own_root():
    tree = _sample()
    sub = tree.left
    lines = render(sub).split("\n")
    assert len(lines) == height(sub) + 1
    assert "(012)" in lines[0]