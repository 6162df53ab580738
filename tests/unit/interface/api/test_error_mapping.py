"""Unit tests for domain error to HTTP status mapping."""

import json

import pytest
from fastapi import Request

from camp.domain.error import (
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    PermissionDeniedError,
    TransientStoreError,
    UnauthenticatedError,
    ValidationError,
)
from camp.interface.api.errors import domain_error_handler, status_code_for


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (UnauthenticatedError("vote"), 401),
        (NotAuthorizedError("tip", "c1", "mallory"), 403),
        (NotFoundError("tip", "c1"), 404),
        (ConflictError("lost race"), 409),
        (ValidationError("bad field"), 422),
        (PermissionDeniedError("denied"), 503),
        (TransientStoreError("offline"), 503),
        (DomainError("other"), 400),
    ],
)
def test_status_code_for(error, code):
    assert status_code_for(error) == code


@pytest.mark.asyncio
async def test_domain_error_handler_renders_error_body():
    request = Request({"type": "http", "method": "GET", "path": "/trips/t1/packing"})

    response = await domain_error_handler(request, NotFoundError("tip", "c1"))

    assert response.status_code == 404
    assert json.loads(response.body) == {
        "detail": str(NotFoundError("tip", "c1")),
        "error": "NotFoundError",
    }
