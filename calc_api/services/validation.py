from __future__ import annotations

"""Shared parameter validation for the calculators.

Every calculator follows the same shape: collect all constraint violations
for its raw inputs, then either fail with the complete list or run a pure
computation over the parsed values. ``Validator`` accumulates the
violations, ``run_validated`` performs the second half.

Validation never short-circuits across fields: each field contributes at
most one error (a value that does not parse cannot be range-checked) and
cross-field checks are declared explicitly with ``Validator.check``.
"""
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, TypeVar

from calc_api.core.errors import ERROR_SEPARATOR, InvalidInputError

T = TypeVar("T")

NOT_A_NUMBER = "not_a_number"
OUT_OF_RANGE = "out_of_range"
UNSUPPORTED_VALUE = "unsupported_value"


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    errors: Tuple[FieldError, ...] = ()
    values: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.errors]

    @property
    def message(self) -> str:
        return ERROR_SEPARATOR.join(self.messages)


def parse_number(raw: Any) -> Optional[float]:
    """Return ``raw`` as a finite float, or None when it is not one."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    return value if math.isfinite(value) else None


class Validator:
    def __init__(self) -> None:
        self._errors: List[FieldError] = []
        self._values: Dict[str, Any] = {}

    def _fail(self, name: str, code: str, message: str) -> None:
        self._errors.append(FieldError(field=name, code=code, message=message))

    def number(
        self,
        name: str,
        raw: Any,
        message: str,
        *,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        exclusive_minimum: bool = False,
        exclusive_maximum: bool = False,
    ) -> Optional[float]:
        """Parse ``raw`` and check it against the declared bounds.

        ``message`` is reported once for the field whichever check fails;
        the error code tells parse failures and range failures apart.
        Returns the parsed value even when it is out of range so that
        cross-field checks can still compare it.
        """
        value = parse_number(raw)
        if value is None:
            self._fail(name, NOT_A_NUMBER, message)
            return None
        too_low = minimum is not None and (
            value <= minimum if exclusive_minimum else value < minimum
        )
        too_high = maximum is not None and (
            value >= maximum if exclusive_maximum else value > maximum
        )
        if too_low or too_high:
            self._fail(name, OUT_OF_RANGE, message)
        else:
            self._values[name] = value
        return value

    def choice(self, name: str, raw: Any, choices: Iterable[str], message: str) -> Optional[str]:
        """Case-insensitive membership check; the value is kept uppercased."""
        allowed = {c.upper() for c in choices}
        normalized = raw.strip().upper() if isinstance(raw, str) else None
        if not normalized or normalized not in allowed:
            self._fail(name, UNSUPPORTED_VALUE, message)
            return None
        self._values[name] = normalized
        return normalized

    def check(self, name: str, condition: bool, message: str, code: str) -> None:
        if not condition:
            self._fail(name, code, message)

    def result(self) -> ValidationResult:
        if self._errors:
            return ValidationResult(errors=tuple(self._errors))
        return ValidationResult(values=MappingProxyType(dict(self._values)))


def run_validated(result: ValidationResult, compute: Callable[..., T]) -> T:
    """Fail with every collected error, or call ``compute(**result.values)``."""
    if not result.is_valid:
        raise InvalidInputError(result.errors)
    return compute(**result.values)
