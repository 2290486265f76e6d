"""Wrapper naming and export eligibility"""

import hashlib
import re
from dataclasses import dataclass

from .types import CallVariant


@dataclass(frozen=True)
class NamingPolicy:
    """Per-target naming rules for generated wrappers"""
    wrapper_prefix_text: str
    unique_prefix_text: str
    # The receiver is passed as the first ordinary parameter (param0)
    synthesize_this_parameter: bool = True

    def wrapper_prefix(self) -> str:
        """Prefix for C-callable wrapper function names"""
        return self.wrapper_prefix_text

    def unique_prefix(self) -> str:
        """Prefix for unique symbolic names, not necessarily C-callable"""
        return self.unique_prefix_text

    def is_eligible(self, remap: CallVariant) -> bool:
        return not remap.extension and not remap.explicit_self

    def make_wrapper_name(self, function_name: str, index: int) -> str:
        return f"{self.wrapper_prefix()}_{_mangle(function_name)}_{index}"

    def make_unique_name(self, function_name: str, index: int) -> str:
        return f"{self.unique_prefix()}_{_mangle(function_name)}_{index}"


def _sanitize(name: str) -> str:
    """Turn a qualified C++ name into an identifier fragment"""
    name = name.replace('::', '_')
    name = re.sub(r'[^A-Za-z0-9_]', '_', name)
    return re.sub(r'_+', '_', name).strip('_')


def _mangle(name: str) -> str:
    """Identifier fragment that stays distinct for distinct names.

    Plain identifiers are kept as they are; anything sanitizing would
    alter ("a::b", "operator +") gets a digest of the full name appended.
    """
    sanitized = _sanitize(name)
    if sanitized == name:
        return name
    digest = hashlib.sha1(name.encode('utf-8')).hexdigest()[:8]
    return f"{sanitized}_{digest}" if sanitized else digest
