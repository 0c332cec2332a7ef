"""SVG path data tokenizer and relative → absolute resolution.

Follows the path grammar in https://www.w3.org/TR/SVG11/paths.html:
implicit command repetition, compact numbers ("1-2.5.5"), and single
character arc flags ("a1 1 0 013 4").
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from logo_outline.errors import ParseError

FLOAT_RE = re.compile(r"[-+]?(?:(?:\d*\.\d+)|(?:\d+\.?))(?:[Ee][+-]?\d+)?")

_WHITESPACE = frozenset(" \t\r\n\f,")

# Argument count per command
ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}

# Positions of the large-arc and sweep flags inside an arc argument group
_ARC_FLAG_POSITIONS = (3, 4)


@dataclass(frozen=True)
class RawCommand:
    """One command as written in the path data (possibly relative)."""

    code: str
    args: tuple[float, ...]
    offset: int

    @property
    def is_relative(self) -> bool:
        return self.code.islower()

    @property
    def is_known(self) -> bool:
        return self.code.upper() in ARITY


@dataclass(frozen=True)
class AbsoluteCommand:
    """A command resolved against the current point.

    ``x``/``y`` is the end point, ``x0``/``y0`` the point the command starts
    from. Control points are only set for curve commands.
    """

    code: str
    x: float
    y: float
    x0: float
    y0: float
    x1: float | None = None
    y1: float | None = None
    x2: float | None = None
    y2: float | None = None
    offset: int = 0


def tokenize_path(path_data: str) -> list[RawCommand]:
    """Split path data into commands, one per argument group.

    Raises:
        ParseError: on stray characters, bad argument counts, or path data
            that does not start with a moveto.
    """
    groups: list[tuple[str, int, list[float]]] = []
    length = len(path_data)
    offset = 0

    while offset < length:
        char = path_data[offset]

        if char in _WHITESPACE:
            offset += 1
            continue

        if char.isalpha() and char not in "eE":
            groups.append((char, offset, []))
            offset += 1
            continue

        if not groups:
            raise ParseError(f"expected a command, found {char!r}", offset)

        code, _, args = groups[-1]
        if code in "Aa" and len(args) % ARITY["A"] in _ARC_FLAG_POSITIONS:
            if char not in "01":
                raise ParseError(f"invalid arc flag {char!r}", offset)
            args.append(float(char))
            offset += 1
            continue

        match = FLOAT_RE.match(path_data, offset)
        if not match:
            raise ParseError(f"unexpected character {char!r}", offset)
        args.append(float(match.group(0)))
        offset = match.end()

    if groups and groups[0][0] not in "Mm":
        raise ParseError(f"path data must begin with a moveto, found {groups[0][0]!r}", groups[0][1])

    commands: list[RawCommand] = []
    for code, start, args in groups:
        commands.extend(_split_arguments(code, start, args))
    return commands


def _split_arguments(code: str, offset: int, args: list[float]) -> list[RawCommand]:
    """Expand implicit repetition: ``L1 2 3 4`` → ``L1 2``, ``L3 4``."""
    upper = code.upper()
    if upper not in ARITY:
        # Passed through so the interpreter can report and skip it
        return [RawCommand(code, tuple(args), offset)]

    arity = ARITY[upper]
    if arity == 0:
        if args:
            raise ParseError(f"command {code!r} takes no arguments", offset)
        return [RawCommand(code, (), offset)]

    if not args or len(args) % arity:
        raise ParseError(
            f"command {code!r} expects a multiple of {arity} arguments, got {len(args)}",
            offset,
        )

    out: list[RawCommand] = []
    for i in range(0, len(args), arity):
        group_code = code
        # Extra coordinate pairs after a moveto are implicit linetos
        if i > 0 and upper == "M":
            group_code = "l" if code == "m" else "L"
        out.append(RawCommand(group_code, tuple(args[i : i + arity]), offset))
    return out


def to_absolute(commands: list[RawCommand]) -> list[AbsoluteCommand]:
    """Resolve relative commands against the running current point.

    ``H``/``V`` resolve to full end points, ``Z`` moves back to the start of
    the sub-path. Unknown commands keep the current point unchanged.
    """
    resolved: list[AbsoluteCommand] = []
    cx = cy = 0.0
    sx = sy = 0.0

    for cmd in commands:
        upper = cmd.code.upper()
        rel = cmd.is_relative
        a = cmd.args
        ox, oy = (cx, cy) if rel else (0.0, 0.0)

        if upper == "M":
            x, y = a[0] + ox, a[1] + oy
            resolved.append(AbsoluteCommand("M", x, y, cx, cy, offset=cmd.offset))
            sx, sy = x, y
        elif upper == "L" or upper == "T":
            x, y = a[0] + ox, a[1] + oy
            resolved.append(AbsoluteCommand(upper, x, y, cx, cy, offset=cmd.offset))
        elif upper == "H":
            x, y = a[0] + ox, cy
            resolved.append(AbsoluteCommand("H", x, y, cx, cy, offset=cmd.offset))
        elif upper == "V":
            x, y = cx, a[0] + oy
            resolved.append(AbsoluteCommand("V", x, y, cx, cy, offset=cmd.offset))
        elif upper == "C":
            x, y = a[4] + ox, a[5] + oy
            resolved.append(
                AbsoluteCommand(
                    "C", x, y, cx, cy,
                    x1=a[0] + ox, y1=a[1] + oy,
                    x2=a[2] + ox, y2=a[3] + oy,
                    offset=cmd.offset,
                )
            )
        elif upper == "S":
            x, y = a[2] + ox, a[3] + oy
            resolved.append(
                AbsoluteCommand("S", x, y, cx, cy, x2=a[0] + ox, y2=a[1] + oy, offset=cmd.offset)
            )
        elif upper == "Q":
            x, y = a[2] + ox, a[3] + oy
            resolved.append(
                AbsoluteCommand("Q", x, y, cx, cy, x1=a[0] + ox, y1=a[1] + oy, offset=cmd.offset)
            )
        elif upper == "A":
            x, y = a[5] + ox, a[6] + oy
            resolved.append(AbsoluteCommand("A", x, y, cx, cy, offset=cmd.offset))
        elif upper == "Z":
            x, y = sx, sy
            resolved.append(AbsoluteCommand("Z", x, y, cx, cy, offset=cmd.offset))
        else:
            x, y = cx, cy
            resolved.append(AbsoluteCommand(cmd.code, x, y, cx, cy, offset=cmd.offset))

        cx, cy = x, y

    return resolved
