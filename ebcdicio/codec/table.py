"""
ASCII <-> EBCDIC translation tables.

The forward table is the classic 256-entry ASCII to EBCDIC mapping (the one
used by ``dd conv=ebcdic``): printable ASCII lands on its IBM code page 037
position, and the remaining byte values fill the unused EBCDIC slots so the
table stays a permutation. The inverse table is derived from it once, at
import time.
"""

import logging
from typing import Iterable, Tuple, Union

from ..exceptions import CodecTableError
from ..utils.logging_utils import log_debug_operation

logger = logging.getLogger(__name__)

TABLE_SIZE = 256

# Row n holds the EBCDIC values for ASCII 0xn0..0xnF.
_FORWARD_HEX = """
    00 01 02 03 37 2D 2E 2F 16 05 25 0B 0C 0D 0E 0F
    10 11 12 13 3C 3D 32 26 18 19 3F 27 1C 1D 1E 1F
    40 4F 7F 7B 5B 6C 50 7D 4D 5D 5C 4E 6B 60 4B 61
    F0 F1 F2 F3 F4 F5 F6 F7 F8 F9 7A 5E 4C 7E 6E 6F
    7C C1 C2 C3 C4 C5 C6 C7 C8 C9 D1 D2 D3 D4 D5 D6
    D7 D8 D9 E2 E3 E4 E5 E6 E7 E8 E9 4A E0 5A 5F 6D
    79 81 82 83 84 85 86 87 88 89 91 92 93 94 95 96
    97 98 99 A2 A3 A4 A5 A6 A7 A8 A9 C0 6A D0 A1 07
    20 21 22 23 24 15 06 17 28 29 2A 2B 2C 09 0A 1B
    30 31 1A 33 34 35 36 08 38 39 3A 3B 04 14 3E E1
    41 42 43 44 45 46 47 48 49 51 52 53 54 55 56 57
    58 59 62 63 64 65 66 67 68 69 70 71 72 73 74 75
    76 77 78 80 8A 8B 8C 8D 8E 8F 90 9A 9B 9C 9D 9E
    9F A0 AA AB AC AD AE AF B0 B1 B2 B3 B4 B5 B6 B7
    B8 B9 BA BB BC BD BE BF CA CB CC CD CE CF DA DB
    DC DD DE DF EA EB EC ED EE EF FA FB FC FD FE FF
"""


def build_tables(
    forward: Union[bytes, bytearray, Iterable[int]],
) -> Tuple[bytes, bytes]:
    """Validate a forward table and derive its inverse.

    Args:
        forward: 256 byte values, indexed by source byte.

    Returns:
        ``(forward, inverse)`` as immutable ``bytes`` such that
        ``inverse[forward[i]] == i`` for every i.

    Raises:
        CodecTableError: If the table is not a permutation of 0..255.
    """
    try:
        table = bytes(forward)
    except (TypeError, ValueError) as e:
        raise CodecTableError(
            "Translation table must contain byte values 0-255",
            original_exception=e,
        ) from e

    if len(table) != TABLE_SIZE:
        raise CodecTableError(
            "Translation table has the wrong size",
            context={"expected": TABLE_SIZE, "actual": len(table)},
        )

    inverse = bytearray(TABLE_SIZE)
    seen = [False] * TABLE_SIZE
    duplicates = []
    for i, value in enumerate(table):
        if seen[value]:
            duplicates.append(value)
            continue
        seen[value] = True
        inverse[value] = i

    if duplicates:
        missing = [v for v in range(TABLE_SIZE) if not seen[v]]
        raise CodecTableError(
            "Translation table is not a permutation",
            context={
                "duplicates": ", ".join(f"0x{v:02X}" for v in duplicates),
                "missing": ", ".join(f"0x{v:02X}" for v in missing),
            },
        )

    log_debug_operation(logger, "Built translation tables", f"{TABLE_SIZE} entries")
    return table, bytes(inverse)


# Built once at import; bytes objects are immutable.
FORWARD_TABLE, INVERSE_TABLE = build_tables(bytes.fromhex(_FORWARD_HEX))

__all__ = ["TABLE_SIZE", "FORWARD_TABLE", "INVERSE_TABLE", "build_tables"]
