"""Packet decoder: parse and evaluate a nested bit-level packet format."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from pathlib import Path

LITERAL = 4


@dataclass(frozen=True)
class Packet:
    """A literal value or an operator over sub-packets."""

    version: int
    type_id: int
    value: int = 0
    children: tuple[Packet, ...] = ()

    @property
    def is_literal(self) -> bool:
        return self.type_id == LITERAL


def hex_to_bits(text: str) -> str:
    """Turn hexadecimal digits into a string of 0s and 1s, four per digit."""
    digits = "".join(text.split())
    try:
        return "".join(format(int(char, 16), "04b") for char in digits)
    except ValueError:
        raise ValueError(f"not a hexadecimal string: {text!r}") from None


class _Reader:
    def __init__(self, bits: str):
        if any(char not in "01" for char in bits):
            raise ValueError("bits must be made of 0 and 1")
        self.bits = bits
        self.offset = 0

    def read(self, width: int) -> int:
        end = self.offset + width
        if end > len(self.bits):
            raise ValueError("the packet ends before it is complete")
        value = int(self.bits[self.offset : end], 2) if width else 0
        self.offset = end
        return value

    def packet(self) -> Packet:
        version = self.read(3)
        type_id = self.read(3)
        if type_id == LITERAL:
            value = 0
            while True:
                group = self.read(5)
                value = (value << 4) | (group & 0xF)
                if group <= 0xF:
                    break
            return Packet(version, type_id, value)
        children = []
        if self.read(1):
            for _ in range(self.read(11)):
                children.append(self.packet())
        else:
            length = self.read(15)
            start = self.offset
            while self.offset - start < length:
                children.append(self.packet())
        return Packet(version, type_id, children=tuple(children))


def parse_packet(bits: str) -> Packet:
    """Parse the outermost packet of a bit string; trailing padding is ignored."""
    return _Reader(bits).packet()


def version_sum(packet: Packet) -> int:
    """Sum of the version numbers of the packet and all packets inside it."""
    return packet.version + sum(version_sum(child) for child in packet.children)


def _pair(args: list[int], type_id: int) -> tuple[int, int]:
    if len(args) < 2:
        raise ValueError(f"operation {type_id} needs two sub-packets")
    return args[0], args[1]


def evaluate(packet: Packet) -> int:
    """The value the packet expression computes."""
    if packet.is_literal:
        return packet.value
    args = [evaluate(child) for child in packet.children]
    kind = packet.type_id
    if kind == 0:
        return sum(args)
    if kind == 1:
        return math.prod(args)
    if kind in (2, 3):
        if not args:
            raise ValueError(f"operation {kind} needs at least one sub-packet")
        return min(args) if kind == 2 else max(args)
    if kind == 5:
        first, second = _pair(args, kind)
        return int(first > second)
    if kind == 6:
        first, second = _pair(args, kind)
        return int(first < second)
    if kind == 7:
        first, second = _pair(args, kind)
        return int(first == second)
    raise ValueError("Unknown operation requested")


def _read_hex(text: str) -> str:
    lines = []
    for raw in text.splitlines():
        line = raw.split("\r", 1)[0].strip()
        if not line:
            break
        lines.append(line)
    return "".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Decode a transmission packet.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        text = Path(options.path).read_text()
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    try:
        packet = parse_packet(hex_to_bits(_read_hex(text)))
        if options.part in (None, 1):
            print(f"Version Sum: {version_sum(packet)}")
        if options.part in (None, 2):
            print(f"Decoded packet result: {evaluate(packet)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())