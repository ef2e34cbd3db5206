"""Sparse Patch — three-state field semantics for update payloads.

Invariants:
    - A field absent from the payload is Unset: the column is left untouched
    - A field present with null is SetNull: the column is cleared, only if nullable
    - A field present with a value is SetValue
    - Unset and SetNull are never conflated

Design Decisions:
    - The payload arrives as the dict of explicitly-set fields
      (pydantic model_dump(exclude_unset=True)); absence from that dict is Unset
"""

from typing import Any, Iterable, Mapping

from shopping_mall.core.errors import ValidationFailedError


def sparse_patch(
    provided: Mapping[str, Any], nullable: Iterable[str] = (),
) -> dict[str, Any]:
    """Validate explicitly-provided fields and return the patch to apply.

    Raises ValidationFailedError when null is sent for a non-nullable field.
    """
    allowed_null = frozenset(nullable)
    patch: dict[str, Any] = {}
    for name, value in provided.items():
        if value is None and name not in allowed_null:
            raise ValidationFailedError(
                f"Field '{name}' cannot be null", field=name,
            )
        patch[name] = value
    return patch


def cleared_fields(patch: Mapping[str, Any]) -> list[str]:
    """Fields the patch explicitly sets to null."""
    return [name for name, value in patch.items() if value is None]
