import pytest

from bloa.chunk import MAX_CONSTANTS, Chunk, ChunkError, OpCode


def test_new_chunk_is_empty():
    chunk = Chunk()
    assert len(chunk) == 0
    assert chunk.lines == []
    assert chunk.constants == []


def test_write_records_byte_and_line():
    chunk = Chunk()
    chunk.write(OpCode.NIL, 3)
    chunk.write(OpCode.RETURN, 4)
    assert len(chunk) == 2
    assert chunk.code[0] == OpCode.NIL
    assert chunk.code[1] == OpCode.RETURN
    assert chunk.lines == [3, 4]


def test_lines_parallel_code():
    chunk = Chunk()
    for line, op in enumerate(OpCode, start=1):
        chunk.write(op, line)
    assert len(chunk.lines) == len(chunk.code) == len(chunk)


def test_opcodes_encode_in_declared_order():
    chunk = Chunk()
    for op in OpCode:
        chunk.write(op, 1)
    assert bytes(chunk.code) == bytes(range(len(OpCode)))
    assert OpCode(chunk.code[0]) is OpCode.CONSTANT
    assert OpCode(chunk.code[-1]) is OpCode.RETURN


def test_constant_instruction_with_operand():
    chunk = Chunk()
    index = chunk.add_constant(1.5)
    chunk.write(OpCode.CONSTANT, 1)
    chunk.write(index, 1)
    assert chunk.constants[chunk.code[1]] == 1.5


@pytest.mark.parametrize("byte", [256, -1])
def test_write_rejects_out_of_range_bytes(byte):
    chunk = Chunk()
    with pytest.raises(ValueError):
        chunk.write(byte, 1)
    assert len(chunk) == 0
    assert chunk.lines == []


def test_add_constant_returns_sequential_indices():
    chunk = Chunk()
    values = [None, True, 7, 2.5, "s"]
    indices = [chunk.add_constant(v) for v in values]
    assert indices == list(range(len(values)))
    assert chunk.constants == values


def test_too_many_constants():
    chunk = Chunk()
    for i in range(MAX_CONSTANTS):
        chunk.add_constant(i)
    assert len(chunk.constants) == 65536
    with pytest.raises(ChunkError, match="Too many constants in one chunk."):
        chunk.add_constant(0)
    assert len(chunk.constants) == MAX_CONSTANTS