# services/merge.py
from typing import Any, Callable, Dict, Iterable, Optional

from pydantic import BaseModel


def merge_update(
    existing: Any,
    incoming: BaseModel,
    *,
    fields: Optional[Iterable[str]] = None,
    transforms: Optional[Dict[str, Callable[[Any], Any]]] = None,
    renames: Optional[Dict[str, str]] = None,
) -> Any:
    """
    Apply a partial update payload onto a stored entity.

    For every updatable field a non-null incoming value replaces the stored
    one and ``None`` keeps it, so an omitted field never clears anything.
    Clearing takes an explicit empty value (``""`` for text).

    All values, transforms included, are computed before the first
    ``setattr``; a transform that raises leaves ``existing`` untouched.

    Args:
        existing: ORM instance to update in place
        incoming: Update schema; unset and null fields are skipped
        fields: Restrict the merge to these names (defaults to the schema's fields)
        transforms: Per-field one-way transforms, e.g. password hashing
        renames: Schema field -> entity attribute, where they differ

    Returns:
        The same ``existing`` instance
    """
    transforms = transforms or {}
    renames = renames or {}
    allowed = set(fields) if fields is not None else set(type(incoming).model_fields)

    changes = {}
    for field, value in incoming.model_dump(exclude_unset=True).items():
        if field not in allowed or value is None:
            continue
        transform = transforms.get(field)
        changes[renames.get(field, field)] = transform(value) if transform else value

    for attribute, value in changes.items():
        setattr(existing, attribute, value)
    return existing
