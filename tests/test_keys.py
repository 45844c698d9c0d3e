"""
Test cases for DSA domain parameters and keys
"""

import dataclasses

import pytest

from pydsa import DomainParameters, DSAKey, new_private_key, new_public_key

from conftest import SMALL_P, SMALL_Q, SMALL_G, SMALL_X, SMALL_Y


def test_private_key_derives_y():
    key = new_private_key(SMALL_P, SMALL_Q, SMALL_G, None, SMALL_X)
    assert key.y == SMALL_Y
    assert key.is_private


def test_private_key_keeps_supplied_y():
    key = new_private_key(SMALL_P, SMALL_Q, SMALL_G, SMALL_Y, SMALL_X)
    assert key.y == SMALL_Y
    assert key.x == SMALL_X


def test_public_key():
    key = new_public_key(SMALL_P, SMALL_Q, SMALL_G, SMALL_Y)
    assert not key.is_private
    assert key.x is None
    assert key.public_key() is key
    assert key.params == DomainParameters(SMALL_P, SMALL_Q, SMALL_G)


def test_public_view_of_private_key(small_key):
    pub = small_key.public_key()
    assert not pub.is_private
    assert pub.y == small_key.y
    assert pub.params == small_key.params


def test_keys_are_immutable(small_key):
    with pytest.raises(dataclasses.FrozenInstanceError):
        small_key.x = 5
    with pytest.raises(dataclasses.FrozenInstanceError):
        small_key.params.q = 13


def test_params_bit_length():
    assert DomainParameters(SMALL_P, SMALL_Q, SMALL_G).n == 4


@pytest.mark.parametrize("p,q,g", [
    (2, 1, 1),
    (23, 1, 4),
    (23, 23, 4),
    (23, 11, 1),
    (23, 11, 23),
])
def test_params_bounds(p, q, g):
    with pytest.raises(ValueError):
        DomainParameters(p, q, g)


@pytest.mark.parametrize("x", [0, SMALL_Q, -1])
def test_private_value_bounds(x):
    with pytest.raises(ValueError):
        new_private_key(SMALL_P, SMALL_Q, SMALL_G, SMALL_Y, x)
    with pytest.raises(ValueError):
        new_private_key(SMALL_P, SMALL_Q, SMALL_G, None, x)


@pytest.mark.parametrize("y", [0, 1, SMALL_P])
def test_public_value_bounds(y):
    with pytest.raises(ValueError):
        new_public_key(SMALL_P, SMALL_Q, SMALL_G, y)


def test_key_from_params_object():
    params = DomainParameters(SMALL_P, SMALL_Q, SMALL_G)
    assert DSAKey(params, SMALL_Y, SMALL_X) == new_private_key(
        SMALL_P, SMALL_Q, SMALL_G, None, SMALL_X
    )


def test_repr_hides_private_value(large_key):
    text = repr(large_key)
    assert "x=" not in text
    assert str(large_key.x) not in text
    assert f"y={large_key.y}" in text
