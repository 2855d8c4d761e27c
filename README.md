# bloa

`bloa` holds the building blocks of an interpreter for a tiny scripting
language:

- `bloa.value`: the language's values and how they print;
- `bloa.lexer`: a scanner that turns source text into tokens;
- `bloa.chunk`: bytecode chunks and the `OpCode` instruction set;
- `bloa.vm`: a stack-based virtual machine that runs chunks;
- `bloa.gc`: a mark-and-sweep heap that tracks allocated objects.

It needs nothing outside the standard library and supports Python 3.10 and
later. Install the test extra (`pip install -e .[test]`) and run `pytest` to
run the tests.

## What it does not do

There is no parser and no compiler: nothing turns tokens into bytecode, so
source text cannot be run directly. Chunks have to be built by hand with
`Chunk.write` and `Chunk.add_constant`. There is also no command-line program
or interactive prompt.

## Values

Language values are plain Python objects:

| Language | Python  |
|----------|---------|
| `nil`    | `None`  |
| booleans | `bool`  |
| integers | `int`   |
| numbers  | `float` |
| strings  | `str`   |

`value_type(value)` returns the value's `ValueType` (`NIL`, `BOOL`, `INT`,
`FLOAT`, `STRING`) and raises `TypeError` for anything else.
`format_value(value)` returns its printed form: `nil`, `true`/`false`,
integers in `%d` style, floats in `%g` style, strings in double quotes, and
`unknown` for anything that is not a language value. `print_value(value, file)`
writes that text to `file`, or to standard output when `file` is `None`.

```python
from bloa.value import format_value

format_value(None)   # 'nil'
format_value(True)   # 'true'
format_value(2.5)    # '2.5'
format_value("hi")   # '"hi"'
```

## Scanning

`Scanner(source)` reads source text one `Token` at a time with `scan_token()`,
and can also be iterated; iteration stops after the `EOF` token.
`scan_tokens(source)` returns the whole list of tokens, ending with `EOF`.

A `Token` is a frozen dataclass with `type` (a `TokenType`), `lexeme` (the text
it was scanned from) and `line`. Spaces, tabs, carriage returns, newlines and
`//` comments are skipped; newlines, including those inside strings, advance
the line count. The keywords `and`, `else`, `false`, `for`, `fun`, `if`, `nil`,
`or`, `print`, `return`, `true`, `var` and `while` get their own token types.
Numbers are digits with an optional fractional part; a string's lexeme keeps
its quotes.

Errors do not raise: an unterminated string or an unexpected character yields
a token of type `ERROR` whose `lexeme` is the message (`Unterminated string.`
or `Unexpected character.`), and scanning can carry on.

```python
from bloa.lexer import scan_tokens

for token in scan_tokens("var answer = 42; // the answer"):
    print(token.type.name, repr(token.lexeme), token.line)
```

## Chunks

A `Chunk` is a dataclass with `code` (a `bytearray`), `lines` (the source line
of every byte) and `constants` (the constant pool).

- `write(byte, line)` appends one byte; a value outside 0-255 raises
  `ValueError`.
- `add_constant(value)` appends to the pool and returns the index; past 65536
  constants it raises `ChunkError`.
- `len(chunk)` is the number of bytes of code.

`OpCode` is an `IntEnum`: `CONSTANT`, `NIL`, `TRUE`, `FALSE`, `EQUAL`,
`GREATER`, `LESS`, `ADD`, `SUBTRACT`, `MULTIPLY`, `DIVIDE`, `NOT`, `NEGATE`,
`PRINT`, `RETURN`. `CONSTANT` is followed by one byte, the index of the
constant to push.

## The virtual machine

`VM(out)` runs chunks with `run(chunk)`, stopping at a `RETURN` instruction.
`PRINT` pops a value and writes its printed form and a newline to `out`
(standard output when `out` is `None`). Values live on `vm.stack`, used through
`push` and `pop`; the stack holds at most 256 values.

Arithmetic and comparison instructions need two numbers and work on them as
floats, so `1 + 2` gives `3.0`. Division by zero gives an infinity, or NaN for
`0 / 0`. `EQUAL` uses `values_equal`, `NOT` uses `is_falsey`.

Failures raise `VMRuntimeError`, whose `message` and `line` (the source line
of the failing instruction) are kept, and whose text reads
`<message>\n[line N] in script`. This covers non-numeric operands
(`Operands must be numbers.`, `Operand must be a number.`), popping an empty
stack, unknown opcodes or constants, and code that ends without `RETURN`. A
full stack raises `StackOverflowError`, a subclass. The stack is cleared when
`run` fails.

```python
import io

from bloa.chunk import Chunk, OpCode
from bloa.vm import VM

chunk = Chunk()
index = chunk.add_constant(1.5)
chunk.write(OpCode.CONSTANT, 1)
chunk.write(index, 1)
chunk.write(OpCode.NEGATE, 1)
chunk.write(OpCode.PRINT, 1)
chunk.write(OpCode.RETURN, 1)

out = io.StringIO()
VM(out).run(chunk)
out.getvalue()   # '-1.5\n'
```

Two helpers state the language's rules:

```python
from bloa.vm import is_falsey, values_equal

is_falsey(None)         # True: only nil and false are falsey
is_falsey(0)            # False
values_equal(1, 1.0)    # False: values of different kinds are never equal
values_equal("a", "a")  # True
```

## Heap

`Heap(threshold)` (1024 bytes by default; a negative threshold raises
`ValueError`) keeps a list of `HeapObject`s in `objects`, the bytes they take
in `bytes_allocated`, and the next collection threshold in `next_gc`. A
`HeapObject` has a `value`, a `size` (32 by default) and a `marked` flag.

- `allocate(value, size, roots)` first collects with `roots` if the new object
  would take `bytes_allocated` past `next_gc`, then adds the object and returns
  it.
- `collect(roots)` marks every `HeapObject` among `roots` and every object
  reachable through a chain of `value`s that are themselves `HeapObject`s,
  frees the rest, sets `next_gc` to twice the bytes still allocated, and
  returns how many objects were freed.
- `free(obj)` releases one object at once; an object not on this heap raises
  `ValueError`.
- `len(heap)`, iteration and `obj in heap` work on the live objects.

```python
from bloa.gc import Heap

heap = Heap()
kept = heap.allocate("kept")
heap.allocate("dropped")
heap.collect([kept])   # 1
len(heap)              # 1
```