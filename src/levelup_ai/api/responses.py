"""Envelope to HTTP response mapping."""

from fastapi import status
from fastapi.responses import JSONResponse

from levelup_ai.domain.errors import ErrorKind
from levelup_ai.domain.responses import ApiResponse

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_STATE: status.HTTP_409_CONFLICT,
    ErrorKind.BACKEND_FAILURE: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.STORE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def envelope_response(envelope: ApiResponse) -> JSONResponse:
    """Render an envelope with a status code matching its outcome."""
    if envelope.success:
        status_code = status.HTTP_200_OK
    else:
        status_code = _STATUS_BY_KIND[envelope.error_kind or ErrorKind.INTERNAL]
    return JSONResponse(status_code=status_code, content=envelope.to_json())
