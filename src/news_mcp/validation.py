"""Argument validation for tool calls."""

from typing import Any, Dict, Mapping, Optional

import pydantic

from .messages import EN, Messages
from .schemas import KIND_STRING, OperationSpec, ParameterSpec
from .utils import ValidationError

_RANGE_ERRORS = {
    "greater_than",
    "greater_than_equal",
    "less_than",
    "less_than_equal",
    "string_too_short",
    "string_too_long",
}


def validate(
    spec: OperationSpec,
    raw_args: Optional[Mapping[str, Any]],
    messages: Messages = EN,
) -> Dict[str, Any]:
    """Validate raw tool arguments against an operation's parameters.

    Optional parameters missing from ``raw_args`` are filled with their
    defaults. Keys the operation does not declare are ignored.

    Args:
        spec: The operation being called
        raw_args: Arguments as received from the client; None means no arguments
        messages: Catalogue used for the error text

    Returns:
        Resolved arguments, one entry per declared parameter

    Raises:
        ValidationError: For the first violated parameter in declaration order
    """
    if raw_args is None:
        raw_args = {}
    if not isinstance(raw_args, Mapping):
        raise ValidationError(
            ValidationError.INVALID_TYPE,
            "arguments",
            messages.invalid_type.format(key="arguments", detail="expected an object"),
        )

    try:
        resolved = spec.model.model_validate(dict(raw_args))
    except pydantic.ValidationError as e:
        raise _convert_error(spec, e, messages) from e

    return resolved.model_dump()


def _convert_error(
    spec: OperationSpec,
    exc: pydantic.ValidationError,
    messages: Messages,
) -> ValidationError:
    order = {p.key: index for index, p in enumerate(spec.parameters)}
    errors = [err for err in exc.errors() if err["loc"] and err["loc"][0] in order]
    if not errors:
        return ValidationError(
            ValidationError.INVALID_TYPE,
            "arguments",
            messages.invalid_type.format(key="arguments", detail=str(exc)),
        )

    first = min(errors, key=lambda err: order[err["loc"][0]])
    key = first["loc"][0]
    param = spec.parameters[order[key]]
    error_type = first["type"]

    if error_type == "missing":
        return ValidationError(
            ValidationError.MISSING_REQUIRED,
            key,
            messages.missing_required.format(key=key),
        )
    if error_type in _RANGE_ERRORS:
        return ValidationError(
            ValidationError.OUT_OF_RANGE,
            key,
            messages.out_of_range.format(key=key, detail=_range_detail(param)),
        )
    if error_type in ("literal_error", "enum"):
        return ValidationError(
            ValidationError.INVALID_ENUM,
            key,
            messages.invalid_enum.format(key=key, allowed=", ".join(param.allowed_values)),
        )
    return ValidationError(
        ValidationError.INVALID_TYPE,
        key,
        messages.invalid_type.format(key=key, detail=first["msg"]),
    )


def _range_detail(param: ParameterSpec) -> str:
    low = "" if param.minimum is None else param.minimum
    high = "" if param.maximum is None else param.maximum
    bounds = f"[{low}, {high}]"
    return f"len {bounds}" if param.kind == KIND_STRING else bounds
