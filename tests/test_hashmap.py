import pytest

from dsakit.hashmap import HashMap
from dsakit.queue import CapacityError


def test_source_case():
    hmap = HashMap(11)
    hmap.insert(10, "cat")
    hmap.insert(2, "dog")
    hmap.insert(3, "tiger")

    assert len(hmap) == 3
    assert 2 in hmap
    assert hmap.get(3) == "tiger"
    assert hmap.remove(3) == "tiger"
    assert hmap.remove(4) is None


def test_hash_and_rehash():
    hmap = HashMap(11)
    assert hmap.hash(25) == 3
    assert hmap.rehash(10) == 0


def test_collisions_probe_forward():
    hmap = HashMap(11)
    hmap.insert(1, "a")
    hmap.insert(12, "b")
    hmap.insert(23, "c")
    assert hmap.get(1) == "a"
    assert hmap.get(12) == "b"
    assert hmap.get(23) == "c"
    assert len(hmap) == 3


def test_update_existing_key():
    hmap = HashMap(5)
    hmap.insert(7, "x")
    hmap.insert(7, "y")
    assert hmap.get(7) == "y"
    assert len(hmap) == 1


def test_full_map_raises():
    hmap = HashMap(2)
    hmap.insert(1, "a")
    hmap.insert(2, "b")
    with pytest.raises(CapacityError):
        hmap.insert(3, "c")
    assert len(hmap) == 2


def test_get_missing():
    hmap = HashMap(5)
    assert hmap.get(4) is None
    assert 4 not in hmap


@pytest.mark.parametrize("op", ["insert", "get", "remove", "contains"])
def test_zero_key_rejected(op):
    hmap = HashMap(5)
    with pytest.raises(ValueError):
        if op == "insert":
            hmap.insert(0, "x")
        elif op == "get":
            hmap.get(0)
        elif op == "remove":
            hmap.remove(0)
        else:
            0 in hmap