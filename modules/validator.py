"""
Validator Module - structural gate for requests and model output
"""
from typing import Any, Sequence

from pydantic import ValidationError

from errors import BadRequest, InvalidEnum, MalformedPayload, MissingField
from models import GenerationRequest, ScenarioContent

REQUIRED_REQUEST_FIELDS = ("area", "difficulty")
REQUEST_FIELDS = REQUIRED_REQUEST_FIELDS + ("customPrompt",)


def _field_path(loc: Sequence) -> str:
    return ".".join(str(part) for part in loc) or "payload"


def validate_request(raw: Any) -> GenerationRequest:
    """
    Checks the inbound parameters and returns a GenerationRequest.

    Raises MissingField when area/difficulty is absent or empty, InvalidEnum
    when either is outside its closed set, and BadRequest for any other
    shape problem.
    """
    if not isinstance(raw, dict):
        raise BadRequest("request body must be a JSON object")

    for field in REQUIRED_REQUEST_FIELDS:
        if not raw.get(field):
            raise MissingField(field)

    custom_prompt = raw.get("customPrompt")
    if custom_prompt is not None and not isinstance(custom_prompt, str):
        raise BadRequest("customPrompt must be a string", field="customPrompt")

    try:
        # Wire names only, snake_case keys are ignored
        return GenerationRequest.model_validate({k: raw[k] for k in REQUEST_FIELDS if k in raw})
    except ValidationError as e:
        field = _field_path(e.errors()[0]["loc"])
        raise InvalidEnum(field, raw.get(field)) from e


def validate_model_payload(raw: Any) -> ScenarioContent:
    """
    Strict structural check of the JSON object returned by the model.
    The first missing or mistyped field is reported as a dotted path.
    """
    try:
        return ScenarioContent.model_validate(raw, strict=True)
    except ValidationError as e:
        first = e.errors()[0]
        field = _field_path(first["loc"])
        raise MalformedPayload(f"invalid field '{field}': {first['msg']}", field=field) from e
