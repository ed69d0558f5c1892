# SQLite INTEGER (and BIGINT elsewhere) is a signed 64-bit value
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def fits_id(value: int) -> bool:
    """False for ids no row can have; the driver would overflow on them."""
    return MIN_ID <= value <= MAX_ID
