"""Envelope mode: checks a typed ServiceRequest by its declared kinds.

The sender's kind tags are trusted; a parameter's textual value is never
inspected. Every required parameter must appear with the same name and a
structurally equal kind. Optional and undeclared entries are ignored.
"""

import logging

from service_contract.envelope import RequestParameter, ServiceRequest
from service_contract.schema.models import Parameter, ServiceMeta
from service_contract.validation.result import ValidationResult, ViolationCode

logger = logging.getLogger(__name__)

MODE = "envelope"


class EnvelopeValidator:
    """Kind-tag-trusting validator for typed request envelopes."""

    mode = MODE

    def validate(self, schema: ServiceMeta, request: ServiceRequest) -> ValidationResult:
        return validate_request(schema, request)


def validate_request(schema: ServiceMeta, request: ServiceRequest) -> ValidationResult:
    """Check that ``request`` carries every required parameter of its action."""
    if not isinstance(request, ServiceRequest):
        raise TypeError(f"envelope mode needs a ServiceRequest, got {type(request).__name__}")

    action = schema.get_action(request.action_name)
    if action is None:
        logger.info("Action not found, name %s (request %s)", request.action_name, request.correlation_id)
        return ValidationResult.reject(
            MODE,
            ViolationCode.ACTION_NOT_FOUND,
            f"action '{request.action_name}' not found in service '{schema.service_name}'",
            action_name=request.action_name,
        )

    for parameter in action.required_parameters:
        if not any(_satisfies(parameter, supplied) for supplied in request.parameters):
            logger.info(
                "Required parameter missing, name %s kind %s (request %s)",
                parameter.name,
                parameter.kind,
                request.correlation_id,
            )
            return ValidationResult.reject(
                MODE,
                ViolationCode.MISSING_REQUIRED_PARAMETER,
                f"required parameter '{parameter.name}' of kind {parameter.kind} not supplied",
                action_name=action.name,
                param_name=parameter.name,
            )

    logger.debug("Accepted request %s for action %s", request.correlation_id, action.name)
    return ValidationResult.accept(MODE, action.name)


def _satisfies(parameter: Parameter, supplied: RequestParameter) -> bool:
    return supplied.name == parameter.name and supplied.kind == parameter.kind
