"""A stack-based virtual machine that runs bytecode chunks."""

from __future__ import annotations

import math
import operator
import sys
from typing import Callable, TextIO

from .chunk import Chunk, OpCode
from .gc import Heap
from .value import Value, print_value, value_type

STACK_MAX = 256


class VMRuntimeError(Exception):
    """Raised when running bytecode fails."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message}\n[line {self.line}] in script"


class StackOverflowError(VMRuntimeError):
    """Raised when the value stack is full."""


def is_falsey(value: Value) -> bool:
    """Nil and false are falsey; every other value is truthy."""
    return value is None or value is False


def values_equal(a: Value, b: Value) -> bool:
    """Equal when both values are of the same kind and hold the same data."""
    if value_type(a) is not value_type(b):
        return False
    return a == b


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


_BINARY: dict[OpCode, Callable[[float, float], Value]] = {
    OpCode.GREATER: operator.gt,
    OpCode.LESS: operator.lt,
    OpCode.ADD: operator.add,
    OpCode.SUBTRACT: operator.sub,
    OpCode.MULTIPLY: operator.mul,
    OpCode.DIVIDE: _divide,
}


class VM:
    """Runs chunks against a value stack, printing to ``out``."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out
        self.stack: list[Value] = []
        self.heap = Heap()

    def push(self, value: Value) -> None:
        if len(self.stack) >= STACK_MAX:
            raise StackOverflowError("Stack overflow.")
        self.stack.append(value)

    def pop(self) -> Value:
        if not self.stack:
            raise VMRuntimeError("Stack underflow.")
        return self.stack.pop()

    def run(self, chunk: Chunk) -> None:
        """Execute ``chunk`` until a RETURN instruction."""
        ip = 0
        try:
            while True:
                if ip >= len(chunk.code):
                    raise VMRuntimeError("Unexpected end of bytecode.")
                byte = chunk.code[ip]
                ip += 1
                try:
                    instruction = OpCode(byte)
                except ValueError:
                    raise VMRuntimeError(f"Unknown opcode {byte}.") from None

                if instruction is OpCode.RETURN:
                    return
                ip = self._execute(instruction, chunk, ip)
        except VMRuntimeError as error:
            if error.line is None and 0 < ip <= len(chunk.lines):
                error.line = chunk.lines[ip - 1]
            self.stack.clear()
            raise

    def _execute(self, instruction: OpCode, chunk: Chunk, ip: int) -> int:
        if instruction is OpCode.CONSTANT:
            if ip >= len(chunk.code):
                raise VMRuntimeError("Unexpected end of bytecode.")
            index = chunk.code[ip]
            ip += 1
            if index >= len(chunk.constants):
                raise VMRuntimeError(f"Unknown constant {index}.")
            self.push(chunk.constants[index])
        elif instruction is OpCode.NIL:
            self.push(None)
        elif instruction is OpCode.TRUE:
            self.push(True)
        elif instruction is OpCode.FALSE:
            self.push(False)
        elif instruction is OpCode.EQUAL:
            b = self.pop()
            a = self.pop()
            self.push(values_equal(a, b))
        elif instruction in _BINARY:
            b = self.pop()
            a = self.pop()
            if not (_is_number(a) and _is_number(b)):
                raise VMRuntimeError("Operands must be numbers.")
            self.push(_BINARY[instruction](float(a), float(b)))
        elif instruction is OpCode.NOT:
            self.push(is_falsey(self.pop()))
        elif instruction is OpCode.NEGATE:
            value = self.pop()
            if not _is_number(value):
                raise VMRuntimeError("Operand must be a number.")
            self.push(-float(value))
        elif instruction is OpCode.PRINT:
            out = sys.stdout if self.out is None else self.out
            print_value(self.pop(), out)
            out.write("\n")
        return ip