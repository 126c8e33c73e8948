"""Shared entry point over both validation modes.

``document`` inspects concrete values of a free-form document;
``envelope`` trusts the declared kinds of a typed ServiceRequest.
The caller picks the mode per integration.
"""

from typing import Any, Protocol

from service_contract.envelope import ServiceRequest
from service_contract.schema.models import ServiceMeta
from service_contract.validation.document import DocumentValidator
from service_contract.validation.envelope import EnvelopeValidator
from service_contract.validation.result import ValidationResult


class Validator(Protocol):
    mode: str

    def validate(self, schema: ServiceMeta, payload: Any) -> ValidationResult: ...


VALIDATORS: dict[str, Validator] = {
    DocumentValidator.mode: DocumentValidator(),
    EnvelopeValidator.mode: EnvelopeValidator(),
}


def get_validator(mode: str) -> Validator:
    """Return the validator registered under ``mode``."""
    try:
        return VALIDATORS[mode]
    except KeyError:
        raise KeyError(f"unknown validation mode {mode!r}; expected one of {sorted(VALIDATORS)}") from None


def validate(schema: ServiceMeta, payload: Any, mode: str | None = None) -> ValidationResult:
    """Validate ``payload`` against ``schema``.

    Without an explicit ``mode``, a ServiceRequest goes to envelope mode
    and anything else to document mode.
    """
    if mode is None:
        mode = EnvelopeValidator.mode if isinstance(payload, ServiceRequest) else DocumentValidator.mode
    return get_validator(mode).validate(schema, payload)
