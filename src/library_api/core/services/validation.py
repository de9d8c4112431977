"""Candidate-state validation for book payloads.

Validation happens in two passes. The pydantic model checks the structure of
the candidate (required fields, lengths, unknown members); the ordered rule
list then checks domain invariants on the parsed model. Rules run only when
the structure is valid, and the same ``BookValidator`` instance serves POST,
PUT and PATCH.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from src.library_api.core.errors import ValidationFailedError
from src.library_api.core.models.book import BookForManipulation

TModel = TypeVar("TModel", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    """A validation message attached to a field or payload name."""

    field: str
    message: str


Rule = Callable[[BookForManipulation, str], Iterable[FieldError]]


def description_differs_from_title(
    candidate: BookForManipulation, payload_name: str
) -> Iterable[FieldError]:
    """Title and description must not be identical (case-sensitive)."""
    if candidate.title == candidate.description:
        yield FieldError(payload_name, "description must differ from title")


DEFAULT_RULES: tuple[Rule, ...] = (description_differs_from_title,)


def _structural_errors(exc: ValidationError, payload_name: str) -> list[FieldError]:
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or payload_name
        errors.append(FieldError(loc, err["msg"]))
    return errors


class BookValidator(Generic[TModel]):
    """Validate a raw payload into a candidate model.

    Args:
        model: The pydantic model describing the payload structure.
        rules: Domain rules applied in order to the parsed candidate.
    """

    def __init__(self, model: type[TModel], rules: Sequence[Rule] = DEFAULT_RULES):
        self.model = model
        self.rules = tuple(rules)

    @property
    def payload_name(self) -> str:
        return self.model.__name__

    def errors(self, payload: Mapping[str, Any]) -> tuple[TModel | None, list[FieldError]]:
        """Return the parsed candidate (if structurally valid) and all errors."""
        try:
            candidate = self.model.model_validate(payload)
        except ValidationError as exc:
            return None, _structural_errors(exc, self.payload_name)

        errors: list[FieldError] = []
        for rule in self.rules:
            errors.extend(rule(candidate, self.payload_name))
        return candidate, errors

    def validate(self, payload: Mapping[str, Any]) -> TModel:
        """Return the candidate or raise ``ValidationFailedError``."""
        if not isinstance(payload, Mapping):
            raise ValidationFailedError(
                [FieldError(self.payload_name, "payload must be a JSON object")]
            )

        candidate, errors = self.errors(payload)
        if errors or candidate is None:
            logger.debug("Rejected {} candidate: {}", self.payload_name, errors)
            raise ValidationFailedError(errors)
        return candidate
