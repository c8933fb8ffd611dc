# app/core/validation.py
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class Violation:
    path: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"path": self.path, "message": self.message}


@dataclass(frozen=True)
class Parsed(Generic[M]):
    value: M


@dataclass(frozen=True)
class Invalid:
    violations: list[Violation]


def violations_from_errors(errors: Iterable[Mapping[str, Any]]) -> list[Violation]:
    """Flatten pydantic/FastAPI error dicts into dotted-path violations."""
    violations = []
    for err in errors:
        path = ".".join(str(part) for part in err.get("loc", ()))
        violations.append(Violation(path=path, message=str(err.get("msg", "Invalid value"))))
    return violations


def parse_input(model: type[M], data: Any) -> Parsed[M] | Invalid:
    try:
        return Parsed(model.model_validate(data))
    except ValidationError as exc:
        return Invalid(violations_from_errors(exc.errors()))


__all__ = ["Violation", "Parsed", "Invalid", "violations_from_errors", "parse_input"]
