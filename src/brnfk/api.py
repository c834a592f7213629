from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .engine import Brainfuck
from .program import Program
from .streams import BufferOutput, BytesInput


@dataclass(frozen=True)
class RunOptions:
    eof_value: Optional[int] = None


@dataclass(frozen=True)
class RunResult:
    output: bytes
    steps: int


def load_string(source: Union[str, bytes]) -> Program:
    return Program.load(source)


def load_file(path: Union[str, Path]) -> Program:
    return Program.load(Path(path).read_bytes())


def run_program(program: Program, *, input_data: bytes = b"", options: Optional[RunOptions] = None) -> RunResult:
    eof_value = None if options is None else options.eof_value
    bf = Brainfuck(BytesInput(input_data), BufferOutput(), eof_value=eof_value)
    steps = bf.run(program)
    return RunResult(output=bf.output.getvalue(), steps=steps)


def run_string(source: Union[str, bytes], *, input_data: bytes = b"", options: Optional[RunOptions] = None) -> RunResult:
    return run_program(load_string(source), input_data=input_data, options=options)


def run_file(path: Union[str, Path], *, input_data: bytes = b"", options: Optional[RunOptions] = None) -> RunResult:
    return run_program(load_file(path), input_data=input_data, options=options)
