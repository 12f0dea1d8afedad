"""Record-level validation for incoming entity collections.

Each raw record is validated against a pydantic model on its own so that a
single malformed record is skipped and counted rather than failing the
whole collection.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, ValidationError

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_records(
    records: Iterable[dict[str, Any]],
    model: type[ModelT],
) -> tuple[list[ModelT], int]:
    """Validate raw dict records with `model.model_validate`.

    Args:
        records: Raw records, camelCase or snake_case keys.
        model: Target pydantic model.

    Returns:
        A tuple of (list_of_validated_models, bad_count).
    """
    good: list[ModelT] = []
    bad = 0

    for rec in records:
        try:
            good.append(model.model_validate(rec))
        except ValidationError as exc:
            bad += 1
            for err in exc.errors():
                if err["type"] == "enum":
                    log.warning(
                        "Unknown %s.%s value %r; record skipped",
                        model.__name__,
                        ".".join(str(p) for p in err["loc"]),
                        err["input"],
                    )
            log.warning(
                "Rejected %s record id=%s: %d error(s), first: %s",
                model.__name__,
                rec.get("id") if isinstance(rec, dict) else None,
                exc.error_count(),
                exc.errors()[0]["msg"],
            )

    return good, bad
