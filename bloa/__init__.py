"""Values, scanner, bytecode chunks, stack VM and heap for a small scripting language."""

__version__ = "0.1.0"
__all__ = ["chunk", "gc", "lexer", "value", "vm"]