#!/usr/bin/env python3
"""Pydantic model example for legacybits.

Flag sets on a Pydantic model are stored in the legacy record shape, so
documents written by older services keep loading.
"""

from __future__ import annotations

import enum
import json

from pydantic import BaseModel

from legacybits import BitFlags, LegacyBits


class Permissions(BitFlags):
    """Account permissions, stored in 16 bits."""

    bits_width = enum.nonmember(16)

    READ = 1
    WRITE = 2
    ADMIN = 4


PermissionSet = LegacyBits(Permissions)


class Account(BaseModel):
    """Account document."""

    name: str
    permissions: PermissionSet


def main() -> None:
    """Run the model example."""
    account = Account(name="ops", permissions=Permissions.READ | Permissions.WRITE)
    document = account.model_dump_json()
    print(f"Stored:   {document}")

    loaded = Account.model_validate_json(document)
    print(f"Loaded:   {loaded!r}")

    print("Schema:")
    print(json.dumps(Account.model_json_schema()["properties"]["permissions"], indent=2))


if __name__ == "__main__":
    main()
