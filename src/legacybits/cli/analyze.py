"""Flag type loading and analysis CLI commands."""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType

from ..codec.encoder import to_json
from ..codec.schema import FlagSchema
from ..flags.base import BitFlags

logger = logging.getLogger(__name__)

MODULE_NAME = "user_module"


def load_module(file_path: Path) -> ModuleType:
    """Import a Python file as ``user_module``.

    Args:
        file_path: Path to Python file containing flag definitions
    """
    spec = importlib.util.spec_from_file_location(MODULE_NAME, file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[MODULE_NAME] = module
    spec.loader.exec_module(module)
    logger.debug("loaded %s as %s", file_path, MODULE_NAME)
    return module


def find_flag_types(module: ModuleType) -> list[type[BitFlags]]:
    """BitFlags subclasses defined (not imported) in ``module``."""
    flag_types = []
    for _name, obj in inspect.getmembers(module, inspect.isclass):
        if obj is not BitFlags and issubclass(obj, BitFlags) and obj.__module__ == module.__name__:
            flag_types.append(obj)
    return flag_types


def load_flag_type(target: str) -> type:
    """Resolve a ``FILE:CLASS`` target to a flag type.

    Raises:
        ValueError: If the target is malformed or the class is not found
    """
    file_part, sep, class_name = target.rpartition(":")
    if not sep or not file_part or not class_name:
        raise ValueError(f"expected FILE:CLASS, got {target!r}")

    file_path = Path(file_part)
    if not file_path.exists():
        raise ValueError(f"File not found: {file_path}")

    module = load_module(file_path)
    flag_type = getattr(module, class_name, None)
    if not isinstance(flag_type, type):
        raise ValueError(f"{class_name} not found in {file_path}")
    return flag_type


def analyze_file(file_path: Path) -> None:
    """Analyze all BitFlags classes in a Python file.

    Args:
        file_path: Path to Python file containing flag definitions
    """
    module = load_module(file_path)
    flag_types = find_flag_types(module)

    if not flag_types:
        print(f"No BitFlags classes found in {file_path}")
        return

    print("|" * 7, "legacybits: Legacy Wire Format for Bit-Flag Sets", "|" * 7)
    print(f"{len(flag_types)} flag type{'s' if len(flag_types) != 1 else ''} loaded.")
    print()

    for flag_type in flag_types:
        analyze_flag_type(flag_type)


def analyze_flag_type(flag_type: type[BitFlags]) -> None:
    """Print the width, named flags and legacy record of one flag type."""
    schema = FlagSchema.from_type(flag_type)

    print(f"{'=' * 19} {flag_type.__name__} {'=' * 19}")
    if schema.width is None:
        print("Storage width: unbounded")
    else:
        print(f"Storage width: {schema.width} bits (max raw value {schema.max_bits()})")
    print(f"Record label: {schema.name}")
    print()

    print(f"{'-' * 28} Flags {'-' * 28}")
    for name, value in schema.flags:
        if value and value & (value - 1) == 0:
            info = f"bit {value.bit_length() - 1} (0x{value:x})"
        else:
            info = f"mask 0x{value:x}"
        dots = "." * max(1, 54 - len(name) - len(info))
        print(f"        {name}{dots}{info}")
    print()

    all_flags = flag_type.from_bits_retain(schema.known_mask())
    print(f"{'=' * 24} Record {'=' * 24}")
    print(f"All named flags: {to_json(all_flags)}")
    print()
