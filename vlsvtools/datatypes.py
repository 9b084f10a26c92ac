"""Primitive data types stored in VLSV arrays and their SILO counterparts."""

from __future__ import annotations

import enum
import math
import struct

__all__ = [
    "DataType",
    "SiloType",
    "conv_int",
    "conv_uint",
    "silo_type",
    "decode_floats",
]

_INT_FORMATS = {1: "b", 2: "h", 4: "i", 8: "q"}
_UINT_FORMATS = {1: "B", 2: "H", 4: "I", 8: "Q"}
_FLOAT_FORMATS = {4: "f", 8: "d"}
# Extended precision values occupy 12 or 16 bytes, of which the first 10 hold the value.
_EXTENDED_SIZES = (12, 16)

_INT64_RANGE = 1 << 64


class DataType(enum.Enum):
    """Kind of primitive value held in a VLSV array."""

    UNKNOWN = 0
    INT = 1
    UINT = 2
    FLOAT = 3


class SiloType(enum.IntEnum):
    """SILO primitive data type identifiers."""

    DB_INT = 16
    DB_SHORT = 17
    DB_LONG = 18
    DB_FLOAT = 19
    DB_DOUBLE = 20


def _read_integer(data: bytes, datatype: DataType, data_size: int) -> int:
    if datatype is DataType.INT:
        formats = _INT_FORMATS
        kind = "signed integer"
    elif datatype is DataType.UINT:
        formats = _UINT_FORMATS
        kind = "unsigned integer"
    else:
        raise ValueError(f"unsupported datatype {datatype!r} for integer conversion")
    fmt = formats.get(data_size)
    if fmt is None:
        raise ValueError(f"unsupported {kind} byte size {data_size}")
    if len(data) < data_size:
        raise ValueError(f"need {data_size} bytes, got {len(data)}")
    return struct.unpack_from("<" + fmt, data)[0]


def conv_int(data: bytes, datatype: DataType, data_size: int) -> int:
    """Read one stored integer and return it as a signed 64-bit value.

    Unsigned 64-bit values above the signed range wrap around.
    """
    value = _read_integer(data, datatype, data_size)
    if value >= _INT64_RANGE // 2:
        value -= _INT64_RANGE
    return value


def conv_uint(data: bytes, datatype: DataType, data_size: int) -> int:
    """Read one stored integer and return it as an unsigned 64-bit value.

    Negative signed values wrap around.
    """
    return _read_integer(data, datatype, data_size) % _INT64_RANGE


def silo_type(datatype: DataType, data_size: int) -> SiloType | None:
    """Return the SILO type matching a VLSV type, or None if there is none."""
    if datatype in (DataType.INT, DataType.UINT):
        return {2: SiloType.DB_SHORT, 4: SiloType.DB_INT, 8: SiloType.DB_LONG}.get(data_size)
    if datatype is DataType.FLOAT:
        return {4: SiloType.DB_FLOAT, 8: SiloType.DB_DOUBLE}.get(data_size)
    return None


def _decode_extended(chunk: bytes) -> float:
    mantissa = int.from_bytes(chunk[:8], "little")
    sign_exponent = int.from_bytes(chunk[8:10], "little")
    negative = bool(sign_exponent & 0x8000)
    exponent = sign_exponent & 0x7FFF
    if exponent == 0x7FFF:
        if mantissa & ((1 << 63) - 1):
            return math.nan
        value = math.inf
    elif exponent == 0 and mantissa == 0:
        value = 0.0
    else:
        if exponent == 0:
            exponent = 1
        try:
            value = math.ldexp(float(mantissa), exponent - 16383 - 63)
        except OverflowError:
            value = math.inf
    return -value if negative else value


def decode_floats(data: bytes, data_size: int) -> list[float]:
    """Decode a buffer of floating point values of the given byte size."""
    if data_size not in _FLOAT_FORMATS and data_size not in _EXTENDED_SIZES:
        raise ValueError(f"unsupported floating point byte size {data_size}")
    if len(data) % data_size:
        raise ValueError(f"buffer of {len(data)} bytes is not a multiple of {data_size}")
    fmt = _FLOAT_FORMATS.get(data_size)
    if fmt is not None:
        return [value for (value,) in struct.iter_unpack("<" + fmt, data)]
    return [
        _decode_extended(data[start:start + data_size])
        for start in range(0, len(data), data_size)
    ]