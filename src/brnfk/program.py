from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterator, List, Sequence, Tuple, Union

from .commands import BF_OPS, SIMPLE_COMMANDS, Command, CommandKind
from .errors import BrnfkInternalError, make_invalid_command_error, make_unmatched_jump_error

logger = logging.getLogger(__name__)

# bytes.isspace() whitespace: space, \t, \n, \r, \x0b, \x0c
_WHITESPACE = frozenset(b' \t\n\r\x0b\x0c')

_PLACEHOLDER = -1


class Program:
    """
    Decoded, jump-resolved Brainfuck program.

    Built by ``Program.load``. The command sequence is a tuple and every
    jump command already knows the index of its partner, so a Program can
    be shared between runs without copying.
    """

    __slots__ = ('_commands',)

    def __init__(self, commands: Sequence[Command]):
        self._commands: Tuple[Command, ...] = tuple(commands)

    @classmethod
    def load(cls, data: Union[bytes, bytearray, str]) -> 'Program':
        """
        Tokenize ``data`` and resolve loop pairs.

        Whitespace is skipped. Raises InvalidCommandError for any other
        non-command byte and UnmatchedJumpError for an unbalanced bracket.
        Nothing is returned unless the whole source is valid.
        """
        if isinstance(data, str):
            data = data.encode('utf-8')
        data = bytes(data)

        commands: List[Command] = []
        jump_stack: List[Tuple[int, int]] = []  # (command index, source offset)

        for offset, b in enumerate(data):
            if b in _WHITESPACE:
                continue

            kind = BF_OPS.get(b)
            if kind is None:
                raise make_invalid_command_error(source=data, offset=offset, command=b)

            if kind is CommandKind.JMP_START:
                jump_stack.append((len(commands), offset))
                commands.append(Command(kind, _PLACEHOLDER))
            elif kind is CommandKind.JMP_END:
                idx = len(commands)
                if not jump_stack:
                    raise make_unmatched_jump_error(source=data, offset=offset, index=idx, unclosed=False)
                matching, _ = jump_stack.pop()
                start = commands[matching]
                if start.kind is not CommandKind.JMP_START:
                    raise BrnfkInternalError(
                        message=f"command at {matching} is {start!r}, expected a jump start"
                    )
                commands[matching] = replace(start, matching=idx)
                commands.append(Command(kind, matching))
            else:
                commands.append(SIMPLE_COMMANDS[kind])

        if jump_stack:
            unmatched, offset = jump_stack.pop()
            raise make_unmatched_jump_error(source=data, offset=offset, index=unmatched, unclosed=True)

        logger.debug("loaded %d commands from %d bytes", len(commands), len(data))
        return cls(commands)

    @property
    def commands(self) -> Tuple[Command, ...]:
        return self._commands

    def jump_table(self) -> Dict[int, int]:
        return {i: c.matching for i, c in enumerate(self._commands) if c.kind.is_jump}

    def __len__(self) -> int:
        return len(self._commands)

    def __getitem__(self, index: int) -> Command:
        return self._commands[index]

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __str__(self) -> str:
        return ''.join(str(c) for c in self._commands)

    def __repr__(self) -> str:
        return f"Program({len(self._commands)} commands)"
