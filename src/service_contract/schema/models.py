"""Schema models describing a service's callable surface.

A ServiceMeta is built once (parsed or constructed directly) and is
read-only afterwards; every model here is frozen and stores its
sequences as tuples.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from service_contract.schema.kinds import ParameterKind

_SCHEMA_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class Parameter(BaseModel):
    """A named, typed input of an action."""

    model_config = _SCHEMA_CONFIG

    name: str = Field(alias="param_name")
    description: str = ""
    kind: ParameterKind = Field(alias="type")
    required: bool
    # Textual default for request producers; never parsed or applied here.
    default: str | None = None


class Output(BaseModel):
    """A value an action may return. Documentation only."""

    model_config = _SCHEMA_CONFIG

    name: str = Field(alias="param_name")
    description: str = ""
    kind: ParameterKind = Field(alias="type")


class Action(BaseModel):
    """One independently callable operation of a service."""

    model_config = _SCHEMA_CONFIG

    name: str = Field(alias="action_name")
    description: str = ""
    parameters: tuple[Parameter, ...] = ()
    outputs: tuple[Output, ...] = ()

    def get_parameter(self, name: str) -> Parameter | None:
        """Return the first parameter declared under ``name``."""
        return next((p for p in self.parameters if p.name == name), None)

    @property
    def required_parameters(self) -> tuple[Parameter, ...]:
        return tuple(p for p in self.parameters if p.required)


class ServiceMeta(BaseModel):
    """The schema of one service: its name, description and actions.

    Serializes to the wire shape::

        {"service_name": ..., "description": ..., "actions": [
            {"action_name": ..., "description": ...,
             "parameters": [{"param_name", "description", "type", "required", "default"?}],
             "outputs": [{"param_name", "description", "type"}]}]}
    """

    model_config = _SCHEMA_CONFIG

    service_name: str
    description: str = ""
    actions: tuple[Action, ...] = ()

    def get_action(self, name: str) -> Action | None:
        """Look up an action by exact, case-sensitive name.

        Action names are expected to be unique; with duplicates the first
        declared action wins.
        """
        for action in self.actions:
            if action.name == name:
                return action
        return None

    @property
    def action_names(self) -> tuple[str, ...]:
        return tuple(a.name for a in self.actions)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServiceMeta":
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str | bytes) -> "ServiceMeta":
        """Parse a schema from its JSON text."""
        return cls.model_validate_json(text)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON text; optional parameters without a default omit the key."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
