import pytest

from dsakit.trie import Trie


@pytest.fixture
def trie():
    t = Trie()
    for word in ("box", "insert", "apple", "appeal"):
        t.insert(word)
    return t


def test_source_case(trie):
    assert trie.search("apple") is True
    assert trie.search("apples") is False
    assert trie.start_with("ins") is True
    assert trie.start_with("ina") is False


def test_prefix_is_not_a_word(trie):
    assert trie.search("app") is False
    assert trie.start_with("app") is True


def test_empty_string(trie):
    assert trie.search("") is False
    assert trie.start_with("") is True


def test_insert_prefix_word(trie):
    trie.insert("app")
    assert trie.search("app") is True
    assert trie.search("apple") is True