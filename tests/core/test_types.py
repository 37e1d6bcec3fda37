"""Tests for attribute id normalization."""

import pytest

from attrmeta.core import normalize_attribute_id


@pytest.mark.parametrize("raw, expected", [(42, 42), ("42", 42), (" 7 ", 7)])
def test_positive_ids_are_normalized(raw, expected) -> None:
    assert normalize_attribute_id(raw) == expected


@pytest.mark.parametrize("raw", [0, -3, "0", "-3", "abc", "", None, 1.5, True, [1]])
def test_non_positive_or_non_integer_ids_are_rejected(raw) -> None:
    assert normalize_attribute_id(raw) is None
