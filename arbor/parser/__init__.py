"""
Arbor CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .option import Option, format_switch
from .option_type import OptionType
from .switches import ScanResult, SwitchScanner
from .utils import coerce_bool, coerce_value, resolve_transform

__all__ = [
    "Option",
    "OptionType",
    "ScanResult",
    "SwitchScanner",
    "coerce_bool",
    "coerce_value",
    "format_switch",
    "resolve_transform",
]
