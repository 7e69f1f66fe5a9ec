"""Helpers that turn request data into validated values or a 400."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Type, TypeVar

from flask import request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from lingualog_app.core.error_handlers import ValidationError
from .date_filters import DATE_FILTERS, date_threshold

ModelT = TypeVar('ModelT', bound=BaseModel)


def json_body() -> dict:
    """Return the JSON object sent with the request, or raise a 400."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def parse_payload(schema: Type[ModelT], data: dict, message: str = 'Invalid request body') -> ModelT:
    """Validate ``data`` against a pydantic model; failures become a ``ValidationError``."""
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        errors = {
            '.'.join(str(part) for part in error['loc']) or '__root__': error['msg']
            for error in exc.errors()
        }
        raise ValidationError(message, errors=errors) from exc


def date_filter_arg(name: str = 'date_filter') -> Optional[datetime]:
    """Resolve the ``date_filter`` query argument to a ``created_at`` lower bound."""
    try:
        return date_threshold(request.args.get(name) or 'all')
    except ValueError:
        allowed = ', '.join(DATE_FILTERS)
        raise ValidationError(f'{name} must be one of: {allowed}') from None


def int_arg(name: str, required: bool = False) -> Optional[int]:
    """Read an integer query-string argument."""
    raw = request.args.get(name, '').strip()
    if not raw:
        if required:
            raise ValidationError(f'{name} parameter required')
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f'{name} must be an integer') from None
