"""Documented type signatures of the native module exports."""

from dataclasses import dataclass, field
import re

from .constants import ARRAY_SIGNATURES, MAYBE_MODULE_ID, MODULE_ID
from .logger import logger

NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

INLINE_DECLARATION_PATTERN = re.compile(
    r"^\s*(?P<name>[A-Za-z_][A-Za-z0-9_]*)\s*::\s*(?P<signature>.+?)\s*$"
)


def split_arrows(signature):
    """Split a signature on the ``->`` arrows that are not inside parentheses."""

    parts = []
    depth = 0
    current = []
    idx = 0
    while idx < len(signature):
        char = signature[idx]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise ValueError(f"Unbalanced parentheses in signature: {signature}")
        elif depth == 0 and signature.startswith("->", idx):
            parts.append("".join(current).strip())
            current = []
            idx += 2
            continue
        current.append(char)
        idx += 1
    if depth != 0:
        raise ValueError(f"Unbalanced parentheses in signature: {signature}")
    parts.append("".join(current).strip())
    if any(not part for part in parts):
        raise ValueError(f"Empty type in signature: {signature}")
    return parts


@dataclass
class NativeDeclaration:
    """Name and curried type signature of a native export."""

    name: str
    signature: str
    argument_types: list = field(init=False)
    return_type: str = field(init=False)

    def __post_init__(self):
        self.name = (self.name or "").strip()
        if not NAME_PATTERN.match(self.name):
            raise ValueError(f"Invalid native declaration name: {self.name!r}")
        self.signature = " ".join((self.signature or "").split())
        if not self.signature:
            raise ValueError(f"Native declaration {self.name} requires a signature")
        parts = split_arrows(self.signature)
        self.argument_types = parts[:-1]
        self.return_type = parts[-1]

    @property
    def arity(self):
        return len(self.argument_types)

    def to_dict(self):
        return {
            "name": self.name,
            "signature": self.signature,
            "argument_types": list(self.argument_types),
            "return_type": self.return_type,
            "arity": self.arity,
        }

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise TypeError("Native declaration must be built from a mapping")
        signature = data.get("signature") or data.get("type")
        return cls(data.get("name"), signature)


def parse_declarations(schema):
    """Parse ``name :: signature`` lines into declarations."""

    if not schema:
        return []

    declarations = []
    for line in schema.splitlines():
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        match = INLINE_DECLARATION_PATTERN.match(entry)
        if not match:
            raise ValueError(f"Invalid native declaration: {entry}")
        declarations.append(
            NativeDeclaration(match.group("name"), match.group("signature"))
        )
    return declarations


def describe_module():
    """Identifier, dependencies and documented exports of the sequence module."""

    exports = [decl.to_dict() for decl in parse_declarations(ARRAY_SIGNATURES)]
    logger.debug("%s exposes %d declarations", MODULE_ID, len(exports))
    return {
        "module": MODULE_ID,
        "requires": [MAYBE_MODULE_ID],
        "exports": exports,
    }


__all__ = [
    "NativeDeclaration",
    "describe_module",
    "parse_declarations",
    "split_arrows",
]
