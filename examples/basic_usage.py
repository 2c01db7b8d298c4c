#!/usr/bin/env python3
"""Basic usage example for legacybits.

This example demonstrates:
1. Defining a flag type
2. Encoding to the legacy {"bits": n} JSON record
3. Decoding back, including bits this version does not name
4. What the strict decoder rejects
"""

from __future__ import annotations

from legacybits import BitFlags, DecodeError, from_json, to_json


class Flags(BitFlags):
    """Four flags in a 32-bit word."""

    A = 1
    B = 2
    C = 4
    D = 8


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("legacybits Basic Usage Example")
    print("=" * 60)
    print()

    # Encode
    print("1. Encoding A | B...")
    flags = Flags.A | Flags.B
    serialized = to_json(flags)
    print(f"   {flags!r} -> {serialized}")
    assert serialized == '{"bits":3}'
    print()

    # Decode
    print("2. Decoding it back...")
    deserialized = from_json(Flags, serialized)
    print(f"   {serialized} -> {deserialized!r}")
    assert deserialized == flags
    print()

    # Unknown bits
    print("3. Decoding a record from a newer producer...")
    newer = '{"bits":19}'
    decoded = from_json(Flags, newer)
    print(f"   {newer} -> {decoded!r} (unknown bits: 0x{decoded.unknown_bits():x})")
    assert to_json(decoded) == newer
    print()

    # Rejections
    print("4. Records the legacy producer could never have written...")
    for bad in ('{"bits":3,"bits":3}', '{"flags":3}', "{}", '{"bits":"3"}'):
        try:
            from_json(Flags, bad)
        except DecodeError as e:
            print(f"   {bad:<22} {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
