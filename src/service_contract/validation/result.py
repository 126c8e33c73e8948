"""Outcome of checking a request against a schema.

Validators return a ValidationResult; rejection is a value, not an
exception. Callers that prefer exceptions use ``raise_for_violation``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ViolationCode(str, Enum):
    ACTION_NOT_FOUND = "ActionNotFound"
    MISSING_REQUIRED_PARAMETER = "MissingRequiredParameter"


class Violation(BaseModel):
    """Why a request was rejected: the first failing check."""

    model_config = ConfigDict(frozen=True)

    code: ViolationCode
    message: str
    action_name: str | None = None
    param_name: str | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ContractViolationError(Exception):
    """Raised by ``ValidationResult.raise_for_violation`` on a rejected request."""

    def __init__(self, violation: Violation):
        self.violation = violation
        super().__init__(str(violation))

    @property
    def code(self) -> ViolationCode:
        return self.violation.code


class ValidationResult(BaseModel):
    """Accept, or reject with exactly one Violation.

    Attributes:
        ok: Whether the request satisfies the action's contract.
        mode: Name of the validator that produced the result.
        action_name: The requested action, when the request named one.
        violation: The first failing check if ``ok`` is False.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    mode: str
    action_name: str | None = None
    violation: Violation | None = None

    @classmethod
    def accept(cls, mode: str, action_name: str) -> "ValidationResult":
        return cls(ok=True, mode=mode, action_name=action_name)

    @classmethod
    def reject(
        cls,
        mode: str,
        code: ViolationCode,
        message: str,
        *,
        action_name: str | None = None,
        param_name: str | None = None,
    ) -> "ValidationResult":
        violation = Violation(
            code=code,
            message=message,
            action_name=action_name,
            param_name=param_name,
        )
        return cls(ok=False, mode=mode, action_name=action_name, violation=violation)

    @property
    def code(self) -> ViolationCode | None:
        return self.violation.code if self.violation else None

    def raise_for_violation(self) -> None:
        if self.violation is not None:
            raise ContractViolationError(self.violation)

    def __bool__(self) -> bool:
        return self.ok
