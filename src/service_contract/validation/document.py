"""Document mode: checks the concrete values of a free-form request document.

The document is plain decoded JSON/YAML data carrying an ``action_name``
field and one flat top-level field per parameter. Only required
parameters are inspected; the first failing check is reported.
"""

import logging
from collections.abc import Mapping
from typing import Any

from service_contract.schema.kinds import FLOATING_TAGS, KindTag, ParameterKind
from service_contract.schema.models import Parameter, ServiceMeta
from service_contract.validation.bounds import fits_signed, fits_unsigned
from service_contract.validation.result import ValidationResult, ViolationCode

logger = logging.getLogger(__name__)

MODE = "document"

_MISSING = object()


class DocumentValidator:
    """Value-inspecting validator for free-form documents."""

    mode = MODE

    def validate(self, schema: ServiceMeta, document: Any) -> ValidationResult:
        return validate_document(schema, document)


def validate_document(schema: ServiceMeta, document: Any) -> ValidationResult:
    """Check that ``document`` satisfies the contract of the action it names."""
    fields = document if isinstance(document, Mapping) else {}

    action_name = fields.get("action_name")
    if not isinstance(action_name, str):
        logger.info("Rejected document: action_name missing or not a string in %s", schema.service_name)
        return ValidationResult.reject(
            MODE,
            ViolationCode.ACTION_NOT_FOUND,
            "document has no string 'action_name' field",
        )

    action = schema.get_action(action_name)
    if action is None:
        logger.info("Rejected document: action not found, name %s", action_name)
        return ValidationResult.reject(
            MODE,
            ViolationCode.ACTION_NOT_FOUND,
            f"action '{action_name}' not found in service '{schema.service_name}'",
            action_name=action_name,
        )

    for parameter in action.required_parameters:
        value = fields.get(parameter.name, _MISSING)
        if value is _MISSING:
            reason = f"required parameter '{parameter.name}' is missing"
        elif not value_matches_kind(parameter.kind, value):
            reason = f"required parameter '{parameter.name}' is not a valid {parameter.kind} value: {value!r}"
        else:
            continue
        logger.info("Rejected document for %s: %s", action_name, reason)
        return _reject_parameter(action_name, parameter, reason)

    logger.debug("Accepted document for action %s", action_name)
    return ValidationResult.accept(MODE, action_name)


def value_matches_kind(kind: ParameterKind, value: Any) -> bool:
    """Whether a decoded JSON value is compatible with ``kind``.

    No coercion: ``"33"`` is a string, never a Uint32, and booleans are
    never numbers.
    """
    tag = kind.tag
    if tag is KindTag.BOOL:
        return isinstance(value, bool)
    if tag is KindTag.STRING:
        return isinstance(value, str)
    if tag is KindTag.ENUM:
        return isinstance(value, str) and value in kind.allowed
    if isinstance(value, bool):
        return False
    if tag in FLOATING_TAGS:
        # Any number, integers included; no range check.
        return isinstance(value, (int, float))
    if not isinstance(value, int):
        return False
    if kind.is_unsigned:
        return fits_unsigned(tag, value)
    return fits_signed(tag, value)


def _reject_parameter(action_name: str, parameter: Parameter, reason: str) -> ValidationResult:
    return ValidationResult.reject(
        MODE,
        ViolationCode.MISSING_REQUIRED_PARAMETER,
        reason,
        action_name=action_name,
        param_name=parameter.name,
    )
