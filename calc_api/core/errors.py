from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Sequence

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from calc_api.models.constants import AVAILABLE_ENDPOINTS

if TYPE_CHECKING:  # pragma: no cover
    from calc_api.services.validation import FieldError

logger = logging.getLogger("calc_api.errors")

ERROR_SEPARATOR = ", "


class CalculationError(Exception):
    """Base class for client-input failures raised by the calculators."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(CalculationError):
    """One or more parameters were present but violated their constraints.

    ``errors`` keeps every violation so callers can inspect them individually;
    the message is only their joined display form.
    """

    def __init__(self, errors: Sequence["FieldError"]):
        self.errors: List["FieldError"] = list(errors)
        super().__init__(ERROR_SEPARATOR.join(e.message for e in self.errors))

    @property
    def codes(self) -> List[str]:
        return [e.code for e in self.errors]


class RateUnavailableError(CalculationError):
    def __init__(self, from_currency: str, to_currency: str):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(
            f"Taux de conversion non disponible pour {from_currency} vers {to_currency}"
        )


class MissingParametersError(Exception):
    """Required query parameters were absent from the request."""

    def __init__(self, required: Iterable[str], received: Dict[str, Any]):
        self.required = list(required)
        self.received = dict(received)
        super().__init__(f"missing parameters: {', '.join(self.missing)}")

    @property
    def missing(self) -> List[str]:
        return [name for name in self.required if not self.received.get(name)]


def calculation_error_handler(request: Request, exc: CalculationError):  # type: ignore
    logger.info("rejected calculation: %s", exc.message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message},
    )


def missing_parameters_handler(request: Request, exc: MissingParametersError):  # type: ignore
    logger.info(str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Paramètres requis manquants",
            "required": exc.required,
            "received": exc.received,
        },
    )


def not_found_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    # Unknown paths and unsupported methods on known paths both answer 404
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Route non trouvée",
                "path": request.url.path,
                "method": request.method,
                "availableEndpoints": list(AVAILABLE_ENDPOINTS),
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    settings = getattr(request.app.state, "settings", None)
    show_detail = settings is not None and settings.is_development
    content: Dict[str, Any] = {"error": "Erreur interne du serveur"}
    if show_detail:
        content["message"] = str(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )
