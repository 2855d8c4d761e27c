"""Bytecode chunks and the instruction set."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .value import Value

MAX_CONSTANTS = 65536


class OpCode(IntEnum):
    CONSTANT = 0
    NIL = 1
    TRUE = 2
    FALSE = 3
    EQUAL = 4
    GREATER = 5
    LESS = 6
    ADD = 7
    SUBTRACT = 8
    MULTIPLY = 9
    DIVIDE = 10
    NOT = 11
    NEGATE = 12
    PRINT = 13
    RETURN = 14


class ChunkError(Exception):
    """Raised when a chunk cannot hold more data."""


@dataclass
class Chunk:
    """A sequence of bytecode with a source line per byte and a constant pool."""

    code: bytearray = field(default_factory=bytearray)
    lines: list[int] = field(default_factory=list)
    constants: list[Value] = field(default_factory=list)

    def write(self, byte: int, line: int) -> None:
        """Append one byte of code, recorded as coming from ``line``."""
        byte = int(byte)
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        self.code.append(byte)
        self.lines.append(line)

    def add_constant(self, value: Value) -> int:
        """Add ``value`` to the constant pool and return its index."""
        if len(self.constants) >= MAX_CONSTANTS:
            raise ChunkError("Too many constants in one chunk.")
        self.constants.append(value)
        return len(self.constants) - 1

    def __len__(self) -> int:
        return len(self.code)