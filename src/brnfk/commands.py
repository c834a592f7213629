from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class CommandKind(Enum):
    INC_PTR = '>'
    DEC_PTR = '<'
    INC = '+'
    DEC = '-'
    OUTPUT = '.'
    INPUT = ','
    JMP_START = '['
    JMP_END = ']'

    @property
    def is_jump(self) -> bool:
        return self in (CommandKind.JMP_START, CommandKind.JMP_END)


# source byte -> kind
BF_OPS: Dict[int, CommandKind] = {ord(kind.value): kind for kind in CommandKind}


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    matching: Optional[int] = None  # jump target, only set on JMP_START / JMP_END

    def __str__(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        if self.matching is not None:
            return f"{self.kind.value} (target: {self.matching})"
        return self.kind.value


# Simple commands carry no data, so one shared instance per kind is enough.
SIMPLE_COMMANDS: Dict[CommandKind, Command] = {
    kind: Command(kind) for kind in CommandKind if not kind.is_jump
}
