"""Numeric bounds applied by document-mode validation.

Two behaviors here are kept as found and flagged so that correcting
either is a one-line change:

* ``UINT64_DOCUMENT_UPPER_BOUND``: Uint64 values are capped at the
  32-bit unsigned maximum, not 2**64 - 1.
* ``CHECK_SIGNED_LOWER_BOUND``: signed kinds are checked against their
  upper bound only, so e.g. -2**63 passes as an Int8.
"""

from service_contract.schema.kinds import KindTag

UINT32_MAX = 2**32 - 1

# Known width mismatch: Uint64 is checked against the Uint32 maximum.
UINT64_DOCUMENT_UPPER_BOUND = UINT32_MAX

# Known asymmetry: signed kinds get no lower-bound check.
CHECK_SIGNED_LOWER_BOUND = False

# Any integer accepted as signed must fit in 64 bits.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

UPPER_BOUNDS: dict[KindTag, int] = {
    KindTag.UINT8: 2**8 - 1,
    KindTag.UINT16: 2**16 - 1,
    KindTag.UINT32: UINT32_MAX,
    KindTag.UINT64: UINT64_DOCUMENT_UPPER_BOUND,
    KindTag.INT8: 2**7 - 1,
    KindTag.INT16: 2**15 - 1,
    KindTag.INT32: 2**31 - 1,
    KindTag.INT64: INT64_MAX,
}

LOWER_BOUNDS: dict[KindTag, int] = {
    KindTag.INT8: -(2**7),
    KindTag.INT16: -(2**15),
    KindTag.INT32: -(2**31),
    KindTag.INT64: INT64_MIN,
}


def fits_unsigned(tag: KindTag, value: int) -> bool:
    return 0 <= value <= UINT64_MAX and value <= UPPER_BOUNDS[tag]


def fits_signed(tag: KindTag, value: int) -> bool:
    if not INT64_MIN <= value <= INT64_MAX:
        return False
    if CHECK_SIGNED_LOWER_BOUND and value < LOWER_BOUNDS[tag]:
        return False
    return value <= UPPER_BOUNDS[tag]
