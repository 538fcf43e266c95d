import logging
from typing import Iterable, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def parse_records(model: Type[M], rows: Iterable) -> List[M]:
    """Validate raw JSON rows, dropping (and logging) the ones missing required fields."""
    parsed: List[M] = []
    for row in rows or []:
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as e:
            logger.warning("Skipping malformed %s row: %s", model.__name__, e.errors()[0].get("msg"))
    return parsed
