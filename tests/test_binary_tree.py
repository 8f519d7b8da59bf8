from dsakit.binary_tree import BinaryTree, inorder, postorder, preorder


def _sample() -> BinaryTree[int]:
    tree = BinaryTree(1)
    tree.insert_left_tree(0)
    tree.insert_right_tree(2)
    return tree


def test_keys_of_children():
    tree = _sample()
    assert tree.key == 1
    assert tree.left.key == 0
    assert tree.right.key == 2


def test_set_key():
    tree = _sample()
    tree.key = 3
    assert tree.key == 3


def test_method_traversals():
    tree = _sample()
    tree.key = 3
    assert tree.preorder() == [3, 0, 2]
    assert tree.inorder() == [0, 3, 2]
    assert tree.postorder() == [0, 2, 3]


def test_function_traversals_match_methods():
    tree = _sample()
    assert preorder(tree) == tree.preorder()
    assert inorder(tree) == tree.inorder()
    assert postorder(tree) == tree.postorder()


def test_traversal_of_absent_tree():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []


def test_traversal_prints_keys(capsys):
    tree = _sample()
    tree.preorder()
    out = capsys.readouterr().out.splitlines()
    assert out == ["key is 1", "key is 0", "key is 2"]


def test_insert_left_pushes_old_child_down():
    tree = BinaryTree(1)
    tree.insert_left_tree(0)
    tree.insert_left_tree(5)
    assert tree.left.key == 5
    assert tree.left.left.key == 0
    assert tree.left.right is None


def test_insert_right_pushes_old_child_down():
    tree = BinaryTree(1)
    tree.insert_right_tree(2)
    tree.insert_right_tree(7)
    assert tree.right.key == 7
    assert tree.right.right.key == 2