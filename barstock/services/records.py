"""Turn raw store documents into analysis records.

Documents come straight from the ``inventory`` and ``recipes`` collections
(``_id`` keys, camelCase field names). Validation errors are not skipped:
one bad document fails the whole batch with its position attached.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, ValidationError

from barstock.schemas.availability import InventoryItem, Recipe
from barstock.settings import settings

logger = logging.getLogger("barstock.records")

ModelT = TypeVar("ModelT", bound=BaseModel)


class RecordError(ValueError):
    def __init__(self, collection: str, index: int, message: str, errors: list[dict] | None = None) -> None:
        super().__init__(f"{collection}[{index}]: {message}")
        self.collection = collection
        self.index = index
        self.errors = errors or []


def _coerce(collection: str, documents: Iterable[Any], model: type[ModelT], defaults: dict[str, Any] | None = None) -> list[ModelT]:
    records: list[ModelT] = []
    for index, doc in enumerate(documents):
        if not isinstance(doc, Mapping):
            logger.warning("Rejected %s document #%s: not a mapping (%s)", collection, index, type(doc).__name__)
            raise RecordError(collection, index, f"expected a mapping, got {type(doc).__name__}")
        payload = dict(doc)
        for key, value in (defaults or {}).items():
            if payload.get(key) is None:
                payload[key] = value
        try:
            records.append(model.model_validate(payload))
        except ValidationError as exc:
            logger.warning("Rejected %s document #%s: %s error(s)", collection, index, exc.error_count())
            raise RecordError(collection, index, "invalid document", exc.errors()) from exc
    return records


def inventory_from_documents(documents: Iterable[Any]) -> list[InventoryItem]:
    return _coerce("inventory", documents, InventoryItem, {"unit": settings.DEFAULT_UNIT})


def recipes_from_documents(documents: Iterable[Any]) -> list[Recipe]:
    return _coerce("recipes", documents, Recipe)
