"""Typed request/response envelopes exchanged with a service.

Values travel as text even for numeric and boolean kinds; each parameter
carries the kind its sender claims for it. Wire shapes::

    {"action_name": str, "uuid": str, "parameters": [{"param_name", "value", "type"}]}
    {"message": str, "uuid": str, "parameters": [...]}
"""

from collections.abc import Callable, Iterable
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from service_contract.schema.kinds import ParameterKind

IdFactory = Callable[[], UUID]

_ENVELOPE_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class RequestParameter(BaseModel):
    """A concrete parameter value together with its declared kind."""

    model_config = _ENVELOPE_CONFIG

    name: str = Field(alias="param_name")
    value: str
    kind: ParameterKind = Field(alias="type")


class _Envelope(BaseModel):
    model_config = _ENVELOPE_CONFIG

    def get_parameter(self, name: str) -> RequestParameter | None:
        return next((p for p in self.parameters if p.name == name), None)

    @classmethod
    def from_json(cls, text: str | bytes):
        return cls.model_validate_json(text)

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)


class ServiceRequest(_Envelope):
    """An inbound call of one action, correlated by ``correlation_id``."""

    action_name: str
    correlation_id: UUID = Field(alias="uuid", default_factory=uuid4)
    parameters: tuple[RequestParameter, ...] = ()

    @classmethod
    def create(
        cls,
        action_name: str,
        parameters: Iterable[RequestParameter] = (),
        id_factory: IdFactory = uuid4,
    ) -> "ServiceRequest":
        """Build a request with a fresh correlation id from ``id_factory``."""
        return cls(
            action_name=action_name,
            correlation_id=id_factory(),
            parameters=tuple(parameters),
        )


class ServiceResponse(_Envelope):
    """The reply to a ServiceRequest; output values ride in ``parameters``."""

    message: str
    correlation_id: UUID = Field(alias="uuid", default_factory=uuid4)
    parameters: tuple[RequestParameter, ...] = ()

    @classmethod
    def reply_to(
        cls,
        request: ServiceRequest,
        message: str,
        parameters: Iterable[RequestParameter] = (),
    ) -> "ServiceResponse":
        """Build a response echoing the request's correlation id."""
        return cls(
            message=message,
            correlation_id=request.correlation_id,
            parameters=tuple(parameters),
        )
