
from .commands import Command, CommandKind
from .engine import Brainfuck
from .errors import (
    BrnfkError,
    BrnfkInternalError,
    BrnfkLoadError,
    BrnfkRuntimeError,
    InputExhaustedError,
    InvalidCommandError,
    PointerUnderflowError,
    UnmatchedJumpError,
)
from .program import Program
from .streams import BufferOutput, BytesInput, Input, NullInput, Output, StdinInput, StdoutOutput
from .tape import Tape
from .api import RunOptions, RunResult, load_file, load_string, run_file, run_program, run_string

__all__ = [
    'Brainfuck',
    'Command',
    'CommandKind',
    'Program',
    'Tape',
    'Input',
    'Output',
    'StdinInput',
    'StdoutOutput',
    'BytesInput',
    'NullInput',
    'BufferOutput',
    'BrnfkError',
    'BrnfkLoadError',
    'BrnfkRuntimeError',
    'BrnfkInternalError',
    'InvalidCommandError',
    'UnmatchedJumpError',
    'PointerUnderflowError',
    'InputExhaustedError',
    'RunOptions',
    'RunResult',
    'load_string',
    'load_file',
    'run_program',
    'run_string',
    'run_file',
]
