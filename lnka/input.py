"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens:
single characters for text, and upper-case names (``UP``, ``ESC``,
``BACKSPACE``...) for control keys. Unrecognized escape sequences decode to
``UNKNOWN`` and Alt chords to ``ALT_<key>``, so neither is mistaken for a
bare Esc.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
CSI_MAX_LENGTH = 32
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS = {
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\t": "TAB",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}

_ARROW_KEYS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_utf8_char(fd: int, lead: bytes) -> str:
    data = lead
    for _ in range(_utf8_length(lead[0]) - 1):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data.decode("utf-8", errors="replace")


def _read_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence."""
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _ARROW_KEYS:
        return _ARROW_KEYS[seq]
    # Parameterized sequences (``1;5A``, ``3~``...) end in a byte from @ to ~.
    length = 1
    while not 0x40 <= seq[0] <= 0x7E:
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        length += 1
        if seq is None or length > CSI_MAX_LENGTH:
            return UNKNOWN_KEY
    return _ARROW_KEYS.get(seq, UNKNOWN_KEY)


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key from ``fd`` and return its token.

    Returns ``""`` on timeout or end of input.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]

    if ch != b"\x1b":
        if ch[0] >= 0x80:
            return _read_utf8_char(fd, ch)
        return ch.decode("ascii", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        # SS3 arrows sent in application cursor mode.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        return _ARROW_KEYS.get(final, UNKNOWN_KEY)
    if seq == b"\x1b":
        # Two Esc presses in a row: report the first, keep the second.
        _PENDING_BYTES.append(seq)
        return "ESC"
    # Any other byte right after Esc is an Alt chord, never a bare Esc.
    if seq in _CONTROL_KEYS:
        return f"ALT_{_CONTROL_KEYS[seq]}"
    if seq[0] >= 0x80:
        return f"ALT_{_read_utf8_char(fd, seq)}"
    return f"ALT_{seq.decode('ascii', errors='replace')}"
