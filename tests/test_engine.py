#!/usr/bin/env python3
"""
Tests for the execution engine and its input/output capabilities.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

import pytest

from brnfk import (
    Brainfuck,
    BufferOutput,
    BytesInput,
    InputExhaustedError,
    NullInput,
    PointerUnderflowError,
    Program,
    StdinInput,
    StdoutOutput,
)

HELLO_WORLD = (
    b"++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------."
    b"--------.>>+.>++."
)


def run(source, input_data=b"", eof_value=None):
    bf = Brainfuck(BytesInput(input_data), BufferOutput(), eof_value=eof_value)
    steps = bf.run(Program.load(source))
    return bf.output.getvalue(), steps


def test_hello_world():
    bf = Brainfuck(NullInput(), BufferOutput())
    bf.run(Program.load(HELLO_WORLD))
    assert bf.output.getvalue() == b"Hello World!\n"


def test_clear_loop_terminates():
    output, steps = run("+[-]")
    assert output == b""
    # + [ - ] then the loop end falls through
    assert steps == 4


def test_clear_loop_leaves_zero():
    output, _ = run("+[-].")
    assert output == b"\x00"


def test_zero_trip_loop_is_skipped():
    output, steps = run("[.]")
    assert output == b""
    # loop start jumps onto the loop end, which falls through
    assert steps == 2


def test_empty_loop():
    output, steps = run("[]")
    assert output == b""
    assert steps == 2


def test_echo_until_zero():
    output, _ = run(",[.,]", input_data=bytes([65, 66, 0]))
    assert output == b"AB"


def test_wraparound_both_ways():
    output, _ = run("-." + "+" * 256 + ".")
    assert output == b"\xff\xff"


def test_pointer_moves_between_cells():
    output, _ = run("+>++>+++<.<.>>.")
    assert output == b"\x02\x01\x03"


def test_pointer_underflow_is_fatal():
    bf = Brainfuck(NullInput(), BufferOutput())
    with pytest.raises(PointerUnderflowError) as exc:
        bf.run(Program.load("+.<"))
    assert exc.value.ip == 2
    assert exc.value.dp == 0
    # output written before the failure stays written
    assert bf.output.getvalue() == b"\x01"


def test_exhausted_input_raises():
    with pytest.raises(InputExhaustedError) as exc:
        run(",.,", input_data=b"A")
    assert exc.value.ip == 2


def test_exhausted_input_uses_eof_value():
    output, _ = run(",.,.", input_data=b"A", eof_value=0)
    assert output == b"A\x00"


def test_engine_is_reusable():
    bf = Brainfuck(NullInput(), BufferOutput())
    bf.run(Program.load("+++."))
    bf.run(Program.load("+."))
    # each run starts from a fresh tape
    assert bf.output.getvalue() == b"\x03\x01"


def test_into_inner_returns_capabilities():
    source = BytesInput(b"z")
    sink = BufferOutput()
    bf = Brainfuck(source, sink)
    bf.run(Program.load(",."))
    inp, out = bf.into_inner()
    assert inp is source
    assert out is sink
    assert out.getvalue() == b"z"
    assert not inp.has_next()


def test_stream_backed_capabilities():
    stdin = io.BytesIO(b"hi")
    stdout = io.BytesIO()
    bf = Brainfuck(StdinInput(stdin), StdoutOutput(stdout))
    bf.run(Program.load(",.,."))
    assert stdout.getvalue() == b"hi"


def test_stdin_input_signals_eof():
    source = StdinInput(io.BytesIO(b""))
    assert source.has_next()
    assert source.next() is None


def test_shared_program_between_engines():
    program = Program.load(",+.")
    first = Brainfuck(BytesInput(b"a"), BufferOutput())
    second = Brainfuck(BytesInput(b"x"), BufferOutput())
    first.run(program)
    second.run(program)
    assert first.output.getvalue() == b"b"
    assert second.output.getvalue() == b"y"
