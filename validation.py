from typing import Type, TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from errors import ValidationFailed

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _field_name(loc) -> str:
    return ".".join(str(part) for part in loc) or "body"


def parse_body(schema: Type[SchemaT]) -> SchemaT:
    """Validate the JSON body against ``schema``; every violation is reported at once."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationFailed([{"field": "body", "message": "Expected a JSON object"}])

    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        errors = [
            {"field": _field_name(err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        raise ValidationFailed(errors)
