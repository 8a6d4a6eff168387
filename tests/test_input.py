"""Raw-key decoding tests.

Covers control-key tokens, ESC timing, CSI navigation sequences and
multi-byte text input.
"""

import os
import unittest

from spellbrowser.input import reader
from spellbrowser.input.key_registry import KeyBinding, KeyRegistry


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        reader._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        reader._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [reader.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_control_keys(self) -> None:
        payload = b"\r\n\x0b\x08\x0c\t\x04\x03\x7f\x15"
        self.assertEqual(
            self._read_all(payload, 10),
            ["ENTER", "CTRL_J", "CTRL_K", "CTRL_H", "CTRL_L", "TAB", "CTRL_D", "CTRL_C", "BACKSPACE", "CTRL_U"],
        )

    def test_unmapped_control_byte_uses_ctrl_name(self) -> None:
        self.assertEqual(self._read_all(b"\x07", 1), ["CTRL_G"])

    def test_arrow_and_navigation_sequences(self) -> None:
        payload = b"\x1b[A\x1b[B\x1b[C\x1b[D\x1bOH\x1b[F\x1b[3~\x1b[1;5C"
        self.assertEqual(
            self._read_all(payload, 8),
            ["UP", "DOWN", "RIGHT", "LEFT", "HOME", "END", "DELETE", "RIGHT"],
        )

    def test_lone_escape_then_printable(self) -> None:
        self.assertEqual(self._read_all(b"\x1bf", 2), ["ESC", "f"])

    def test_multibyte_text_is_read_whole(self) -> None:
        self.assertEqual(self._read_all("ñú".encode("utf-8"), 2), ["ñ", "ú"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(self._read_all(b"", 1), [""])


class KeyRegistryTests(unittest.TestCase):
    def test_first_registration_wins(self) -> None:
        calls: list[str] = []
        registry = KeyRegistry().register(
            KeyBinding(("UP", "CTRL_K"), lambda: calls.append("first")),
            KeyBinding(("UP",), lambda: calls.append("second")),
        )
        self.assertTrue(registry.dispatch("UP"))
        self.assertTrue(registry.dispatch("CTRL_K"))
        self.assertFalse(registry.dispatch("DOWN"))
        self.assertEqual(calls, ["first", "first"])
        self.assertEqual(registry.bound_keys(), frozenset({"UP", "CTRL_K"}))


if __name__ == "__main__":
    unittest.main()
