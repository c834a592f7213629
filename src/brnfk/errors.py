from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _locate(source: str, offset: int) -> Tuple[int, int]:
    # 1-based line number and 0-based column of a source offset
    line_no = source.count('\n', 0, offset) + 1
    line_start = source.rfind('\n', 0, offset) + 1
    return line_no, offset - line_start


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * column}^")
    return "\n".join(out)


def _hint_for(kind: str, command: Optional[int] = None) -> Optional[str]:
    if kind == 'invalid':
        if command is not None and chr(command) in '{}()':
            return 'Loops are written with "[" and "]".'
        return 'Only the symbols > < + - . , [ ] and whitespace are allowed.'
    if kind == 'unclosed':
        return 'Check for a missing "]".'
    if kind == 'unopened':
        return 'Check for an extra "]" or a missing "[".'
    return None


@dataclass
class BrnfkError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BrnfkLoadError(BrnfkError):
    offset: int
    context: str


@dataclass
class InvalidCommandError(BrnfkLoadError):
    command: int


@dataclass
class UnmatchedJumpError(BrnfkLoadError):
    index: int


@dataclass
class BrnfkInternalError(BrnfkError):
    pass


@dataclass
class BrnfkRuntimeError(BrnfkError):
    ip: int
    dp: int


@dataclass
class PointerUnderflowError(BrnfkRuntimeError):
    pass


@dataclass
class InputExhaustedError(BrnfkRuntimeError):
    pass


def _source_context(source: bytes, offset: int) -> str:
    # latin-1 keeps one character per byte so offsets stay aligned
    text = source.decode('latin-1')
    line_no, column = _locate(text, offset)
    return _build_context(text.split('\n'), line_no, column)


def make_invalid_command_error(*, source: bytes, offset: int, command: int) -> InvalidCommandError:
    ctx = _source_context(source, offset)
    hint = _hint_for('invalid', command)
    hint_block = f"\nHint: {hint}" if hint else ""
    return InvalidCommandError(
        message=f"Found invalid command `{chr(command)}` (code: {command}) at {offset}\n{ctx}{hint_block}",
        offset=offset,
        context=ctx,
        command=command,
    )


def make_unmatched_jump_error(*, source: bytes, offset: int, index: int, unclosed: bool) -> UnmatchedJumpError:
    ctx = _source_context(source, offset)
    hint = _hint_for('unclosed' if unclosed else 'unopened')
    hint_block = f"\nHint: {hint}" if hint else ""
    return UnmatchedJumpError(
        message=f"No matching jump found for jump at {index}\n{ctx}{hint_block}",
        offset=offset,
        context=ctx,
        index=index,
    )
