"""Request Validation — runs a request schema over a raw JSON body.

Invariants:
    - parse_body() raises only RequestValidationFailed for malformed input
    - Every field of the schema is checked; violations come back in field order
    - Per field, only the first error is reported, with the schema's client message
    - A body that is not a JSON object is validated as an empty object, so every
      required field is reported

Design Decisions:
    - pydantic does the checking; this module only reshapes ValidationError
      into the express-validator wire shape the API's clients already parse:
      type, path, msg, location, value
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.errors import RequestValidationFailed

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def violation(path: str, message: str, location: str = "body") -> dict:
    return {"type": "field", "path": path, "msg": message, "location": location}


def violations_from_error(
    exc: ValidationError, data: dict, messages: dict[str, str],
) -> list[dict]:
    """One violation per failing field, first error wins."""
    first_errors: dict[str, dict] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        first_errors.setdefault(field, error)

    violations = []
    for field, error in first_errors.items():
        item = violation(field, messages.get(field, error["msg"]))
        if field in data:
            item["value"] = data[field]
        violations.append(item)
    return violations


def parse_body(schema: type[SchemaT], body: Any) -> SchemaT:
    """Validated schema instance, or RequestValidationFailed listing every bad field."""
    data = body if isinstance(body, dict) else {}
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        messages = getattr(schema, "field_messages", {})
        raise RequestValidationFailed(
            violations_from_error(exc, data, messages),
        ) from exc


def collect_violations(schema: type[BaseModel], body: Any) -> list[dict]:
    """Every violation of `schema` in `body`. Empty list means valid."""
    try:
        parse_body(schema, body)
    except RequestValidationFailed as exc:
        return exc.violations
    return []
