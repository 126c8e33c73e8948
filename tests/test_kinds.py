import pytest
from pydantic import ValidationError

from service_contract.schema.kinds import (
    BOOL,
    DOUBLE,
    INT8,
    STRING,
    UINT32,
    UINT64,
    KindTag,
    ParameterKind,
)


class TestParameterKindParsing:
    def test_bare_tag(self):
        assert ParameterKind.model_validate("Uint32") == UINT32

    def test_every_scalar_tag(self):
        for tag in KindTag:
            if tag is KindTag.ENUM:
                continue
            assert ParameterKind.model_validate(tag.value).tag is tag

    def test_enum_object(self):
        kind = ParameterKind.model_validate({"Enum": ["ENUM_1", "ENUM_2"]})
        assert kind.is_enum
        assert kind.allowed == ("ENUM_1", "ENUM_2")

    def test_unknown_tag_rejected(self):
        with pytest.raises(ValidationError):
            ParameterKind.model_validate("Uint128")

    def test_bare_enum_rejected(self):
        with pytest.raises(ValidationError):
            ParameterKind.model_validate("Enum")

    def test_unknown_object_key_rejected(self):
        with pytest.raises(ValidationError):
            ParameterKind.model_validate({"Set": ["A"]})

    def test_enum_payload_must_be_list(self):
        with pytest.raises(ValidationError):
            ParameterKind.model_validate({"Enum": "RED"})

    def test_scalar_cannot_carry_allowed_values(self):
        with pytest.raises(ValidationError):
            ParameterKind(tag=KindTag.STRING, allowed=("a",))


class TestParameterKindEquality:
    def test_enum_equal_when_lists_equal(self):
        assert ParameterKind.enum("RED", "BLUE") == ParameterKind.model_validate({"Enum": ["RED", "BLUE"]})

    def test_enum_order_matters(self):
        assert ParameterKind.enum("RED", "BLUE") != ParameterKind.enum("BLUE", "RED")

    def test_enum_values_matter(self):
        assert ParameterKind.enum("RED") != ParameterKind.enum("RED", "BLUE")

    def test_different_tags(self):
        assert UINT32 != UINT64
        assert STRING != ParameterKind.enum("String")

    def test_hashable(self):
        kinds = {UINT32, ParameterKind.model_validate("Uint32"), ParameterKind.enum("A")}
        assert len(kinds) == 2

    def test_frozen(self):
        with pytest.raises(ValidationError):
            UINT32.tag = KindTag.INT32


class TestParameterKindSerialization:
    def test_scalar_dumps_to_tag(self):
        assert BOOL.model_dump() == "Bool"
        assert DOUBLE.model_dump_json() == '"Double"'

    def test_enum_dumps_to_object(self):
        assert ParameterKind.enum("A", "B").model_dump() == {"Enum": ["A", "B"]}

    def test_str(self):
        assert str(INT8) == "Int8"
        assert str(ParameterKind.enum("RED", "BLUE")) == "Enum(RED, BLUE)"


class TestParameterKindClassification:
    def test_flags(self):
        assert UINT32.is_unsigned and UINT32.is_numeric and not UINT32.is_signed
        assert INT8.is_signed and not INT8.is_unsigned
        assert DOUBLE.is_numeric
        assert not STRING.is_numeric
        assert not ParameterKind.enum("A").is_numeric
