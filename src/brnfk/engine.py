from __future__ import annotations

import logging
from typing import Optional, Tuple

from .commands import CommandKind
from .errors import InputExhaustedError, PointerUnderflowError
from .program import Program
from .streams import Input, Output, StdinInput, StdoutOutput
from .tape import Tape

logger = logging.getLogger(__name__)

INC_PTR = CommandKind.INC_PTR
DEC_PTR = CommandKind.DEC_PTR
INC = CommandKind.INC
DEC = CommandKind.DEC
OUTPUT = CommandKind.OUTPUT
INPUT = CommandKind.INPUT
JMP_START = CommandKind.JMP_START
JMP_END = CommandKind.JMP_END


class Brainfuck:
    """
    Brainfuck interpreter.

    Holds the input source and output sink; everything else (tape, data
    pointer, instruction pointer) lives only for the duration of one
    ``run`` call, so the same instance can run several programs in a row.

    Args:
        input: byte source for ``,``. Defaults to standard input.
        output: byte sink for ``.``. Defaults to standard output.
        eof_value: byte stored by ``,`` once the input is exhausted. When
            None, an exhausted input aborts the run with InputExhaustedError.
    """

    def __init__(self, input: Optional[Input] = None, output: Optional[Output] = None, *,
                 eof_value: Optional[int] = None):
        self._input = input if input is not None else StdinInput()
        self._output = output if output is not None else StdoutOutput()
        self.eof_value = eof_value

    @property
    def input(self) -> Input:
        return self._input

    @property
    def output(self) -> Output:
        return self._output

    def into_inner(self) -> Tuple[Input, Output]:
        return self._input, self._output

    def _read(self, ip: int, dp: int) -> int:
        value = self._input.next() if self._input.has_next() else None
        if value is None:
            if self.eof_value is None:
                raise InputExhaustedError(message=f"Input exhausted at command {ip}", ip=ip, dp=dp)
            return self.eof_value
        return value

    def run(self, program: Program) -> int:
        """
        Execute ``program`` to completion and return the number of steps taken.

        A loop start on a zero cell jumps onto its loop end, which then sees
        the same zero cell and falls through. A loop end on a non-zero cell
        jumps back onto its loop start, which re-checks the cell.
        """
        commands = program.commands
        length = len(commands)
        tape = Tape()
        output = self._output
        d_ptr = 0
        i_ptr = 0
        steps = 0

        logger.debug("run started: %d commands", length)

        while i_ptr < length:
            command = commands[i_ptr]
            kind = command.kind
            steps += 1

            if kind is INC_PTR:
                d_ptr += 1
            elif kind is DEC_PTR:
                if d_ptr == 0:
                    raise PointerUnderflowError(
                        message=f"Data pointer moved left of cell 0 at command {i_ptr}",
                        ip=i_ptr,
                        dp=d_ptr,
                    )
                d_ptr -= 1
            elif kind is INC:
                tape.increment(d_ptr)
            elif kind is DEC:
                tape.decrement(d_ptr)
            elif kind is OUTPUT:
                output.write(tape.get(d_ptr))
            elif kind is INPUT:
                tape.set(d_ptr, self._read(i_ptr, d_ptr))
            elif kind is JMP_START:
                if tape.get(d_ptr) == 0:
                    i_ptr = command.matching
                    continue
            elif kind is JMP_END:
                if tape.get(d_ptr) != 0:
                    i_ptr = command.matching
                    continue

            i_ptr += 1

        logger.debug("run finished after %d steps, tape length %d", steps, len(tape))
        return steps
