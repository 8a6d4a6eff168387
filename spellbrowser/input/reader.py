"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens
such as ``UP``, ``CTRL_J`` or a single printable character. Multi-byte UTF-8
characters are read whole so typed text is never split mid-character.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x01": "CTRL_A",
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\x05": "CTRL_E",
    b"\x08": "CTRL_H",
    b"\t": "TAB",
    b"\n": "CTRL_J",
    b"\x0b": "CTRL_K",
    b"\x0c": "CTRL_L",
    b"\r": "ENTER",
    b"\x15": "CTRL_U",
    b"\x7f": "BACKSPACE",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"3": "DELETE",
    b"4": "END",
    b"7": "HOME",
    b"8": "END",
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


def _decode_text(fd: int, ch: bytes) -> str:
    data = ch
    for _ in range(_utf8_length(ch[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _read_escape(fd: int) -> str:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"

    final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if final is None:
        return "ESC"
    if final in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[final]
    if seq == b"[" and final.isdigit():
        params = final
        while True:
            part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                return "ESC"
            if part == b"~":
                return _CSI_TILDE_KEYS.get(params, "ESC")
            if part in _CSI_FINAL_KEYS:
                # Modified arrows such as ESC [ 1 ; 5 A map to the plain key.
                return _CSI_FINAL_KEYS[part]
            params += part
            if len(params) > 16:
                return "ESC"
    return "ESC"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``; return ``""`` when ``timeout_ms`` expires."""
    if _PENDING_BYTES:
        ch: bytes | None = _PENDING_BYTES.pop(0)
    elif timeout_ms is None:
        ch = os.read(fd, 1)
    else:
        ch = _read_ready_byte(fd, timeout_ms)
    if not ch:
        return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]
    if ch == b"\x1b":
        return _read_escape(fd)
    if ch[0] < 0x20:
        return f"CTRL_{chr(ch[0] + 0x40)}"
    return _decode_text(fd, ch)
