"""History of routing tables used to compute a node's change degree."""

from __future__ import annotations

import ipaddress
import math
import re

_WHITESPACE = " \n\r\t"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_UINT32 = 1 << 32


def _complete_lines(text: str) -> list[str]:
    """Return the newline-terminated lines; trailing text without a newline is dropped."""
    return text.split("\n")[:-1]


def _route_lines(text: str) -> list[str]:
    stripped = (line.strip(_WHITESPACE) for line in _complete_lines(text))
    return [line for line in stripped if line and line[0].isdigit()]


def _parse_hops(token: str) -> int:
    """Parse the leading integer of a token as an unsigned 32-bit hop count."""
    match = _INT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"invalid hop count: {token!r}")
    return int(match.group(1)) % _UINT32


def _field(parts: list[str], index: int, line: str) -> str:
    try:
        return parts[index]
    except IndexError:
        raise ValueError(f"malformed routing table entry: {line!r}") from None


def _is_loopback(address: str) -> bool:
    return address == "127.0.0.1"


def _is_broadcast(address: str) -> bool:
    # Only valid for networks with a 255.255.0.0 mask.
    return ".255.255" in address


def _in_range(hops: int, max_hops: int) -> bool:
    return 0 < hops <= max_hops


def _dsdv_destinations(lines: list[str], max_hops: int) -> list[str]:
    destinations = []
    for line in lines:
        parts = line.split()
        hops = _parse_hops(_field(parts, 3, line))
        address = parts[0]
        if _is_loopback(address) or _is_broadcast(address):
            continue
        if not _in_range(hops, max_hops):
            continue
        destinations.append(address)
    return destinations


def _aodv_destinations(lines: list[str], max_hops: int) -> list[str]:
    destinations = []
    for line in lines:
        parts = line.split()
        hops = _parse_hops(_field(parts, 5, line))
        address = parts[0]
        if parts[3] != "UP":
            continue
        if _is_loopback(address) or _is_broadcast(address):
            continue
        if not _in_range(hops, max_hops):
            continue
        destinations.append(address)
    return destinations


def _to_int(address: str) -> int:
    try:
        return int(ipaddress.IPv4Address(address))
    except ipaddress.AddressValueError as exc:
        raise ValueError(f"invalid IPv4 address: {address!r}") from exc


def get_neighbors(table: str, max_hops: int) -> set[int]:
    """Return the addresses (as integers) reachable within ``max_hops`` in a printed routing table.

    AODV and DSDV table dumps are recognised; any other text yields an empty set.
    """
    lines = _route_lines(table)
    if "AODV" in table:
        destinations = _aodv_destinations(lines, max_hops)
    elif "DSDV" in table:
        destinations = _dsdv_destinations(lines, max_hops)
    else:
        destinations = []
    return {_to_int(address) for address in destinations}


class Table:
    """Ring buffer of neighbour sets taken from successive routing tables."""

    def __init__(self, num: int = 0, max_hops: int = 0) -> None:
        if num < 0:
            raise ValueError("number of tables must not be negative")
        self.num_tables = num
        self.max_hops = max_hops
        self._current = 0
        self._last = 0
        self._tables: list[set[int]] = [set() for _ in range(num)]

    def _advance(self) -> None:
        self._current = (self._current + 1) % self.num_tables
        self._last = (self._current + 1) % self.num_tables

    def compute_change_degree(self) -> float:
        """Fraction of neighbours that differ between the newest and oldest tables."""
        if (
            self.num_tables == 0
            or self._current >= self.num_tables
            or self._last >= self.num_tables
        ):
            return 0.0
        current = self._tables[self._current]
        last = self._tables[self._last]
        union_size = len(current | last)
        intersect_size = len(current & last)
        if union_size == 0:
            return 0.0
        result = (union_size - intersect_size) / union_size
        return 0.0 if math.isnan(result) else result

    def update_table(self, table: str) -> None:
        """Record the neighbours found in a new routing table dump."""
        if self.num_tables == 0:
            raise ValueError("table history has no slots")
        self._advance()
        self._tables[self._current] = get_neighbors(table, self.max_hops)