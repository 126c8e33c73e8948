from pathlib import Path
from uuid import UUID

import pytest

from service_contract.schema.kinds import INT32, UINT32, ParameterKind
from service_contract.schema.models import Action, Output, Parameter, ServiceMeta

FIXTURES = Path(__file__).parent / "fixtures"

MESSAGE_OUTPUT = Output(
    name="message",
    description="a message of success or failure",
    kind=ParameterKind.enum("ENUM_1", "ENUM_2"),
)


def make_service(*parameters: Parameter, action_name: str = "action_1") -> ServiceMeta:
    """A one-action service with the given parameters."""
    return ServiceMeta(
        service_name="service_1",
        description="a test service",
        actions=[
            Action(
                name=action_name,
                description="action 1 does something",
                parameters=parameters,
                outputs=[MESSAGE_OUTPUT],
            )
        ],
    )


@pytest.fixture
def service_1() -> ServiceMeta:
    """Required Uint32 ``a_number_1`` and optional Int32 ``a_number_2``."""
    return make_service(
        Parameter(
            name="a_number_1",
            description="this number can be only positive and is required!",
            kind=UINT32,
            required=True,
        ),
        Parameter(
            name="a_number_2",
            description="this number can be positive and negative and is not required",
            kind=INT32,
            required=False,
            default="0",
        ),
    )


@pytest.fixture
def color_service() -> ServiceMeta:
    return make_service(
        Parameter(
            name="color",
            description="a primary color",
            kind=ParameterKind.enum("RED", "BLUE"),
            required=True,
        )
    )


@pytest.fixture
def fixed_ids():
    """Deterministic correlation ids: 00000000-...-0001, -0002, ..."""
    counter = iter(range(1, 1_000_000))
    return lambda: UUID(int=next(counter))
