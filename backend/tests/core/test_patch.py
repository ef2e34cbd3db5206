"""Sparse Patch — Unset vs SetNull vs SetValue, per field. No IO."""

import pytest

from shopping_mall.core.errors import ValidationFailedError
from shopping_mall.core.patch import cleared_fields, sparse_patch


def test_absent_fields_are_not_in_patch():
    assert sparse_patch({"name": "x"}, nullable={"description"}) == {"name": "x"}


def test_null_on_nullable_field_is_kept_as_clear():
    patch = sparse_patch({"description": None}, nullable={"description"})
    assert patch == {"description": None}
    assert cleared_fields(patch) == ["description"]


def test_null_on_non_nullable_field_fails_naming_the_field():
    with pytest.raises(ValidationFailedError) as exc_info:
        sparse_patch({"name": None}, nullable={"description"})
    assert exc_info.value.field == "name"
    assert exc_info.value.http_status == 400


def test_falsy_values_are_values_not_nulls():
    patch = sparse_patch({"quantity": 0, "is_private": False, "name": ""})
    assert patch == {"quantity": 0, "is_private": False, "name": ""}
    assert cleared_fields(patch) == []


def test_empty_payload_is_empty_patch():
    assert sparse_patch({}) == {}
