"""Regression tests for raw-key decoding.

Covers ESC timing, Alt chords, CSI and SS3 arrow sequences, control-key
tokens, and multi-byte text input read from a pipe.
"""

import os
import time
import unittest

from lnka import input as input_mod
from lnka.selection import ConfirmModel, MultiSelectModel


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()
        os.close(self.read_fd)
        if self.write_fd is not None:
            os.close(self.write_fd)

    def _keys(self, payload: bytes, count: int) -> list[str]:
        os.write(self.write_fd, payload)
        return [input_mod.read_key(self.read_fd, timeout_ms=20) for _ in range(count)]

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        os.write(self.write_fd, b"\x1b")
        started = time.monotonic()
        key = input_mod.read_key(self.read_fd, timeout_ms=20)
        elapsed = time.monotonic() - started

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[A\x1b[B\x1b[C\x1b[D", 4),
            ["UP", "DOWN", "RIGHT", "LEFT"],
        )

    def test_ss3_arrows(self) -> None:
        self.assertEqual(self._keys(b"\x1bOA\x1bOB", 2), ["UP", "DOWN"])

    def test_modified_arrow_keeps_direction(self) -> None:
        self.assertEqual(self._keys(b"\x1b[1;5B", 1), ["DOWN"])

    def test_unknown_sequence_is_not_mistaken_for_escape(self) -> None:
        self.assertEqual(self._keys(b"\x1b[3~x", 2), ["UNKNOWN", "x"])

    def test_alt_chords_are_not_escape(self) -> None:
        self.assertEqual(
            self._keys(b"\x1bh\x1by\x1b\r\x1b\xc3\xa9x", 5),
            ["ALT_h", "ALT_y", "ALT_ENTER_CR", "ALT_\u00e9", "x"],
        )

    def test_alt_chord_is_ignored_by_prompts(self) -> None:
        key = self._keys(b"\x1bh", 1)[0]
        model = MultiSelectModel(["a", "b"], ["a"])
        confirm = ConfirmModel("Apply?")

        self.assertNotEqual(key, "ESC")
        self.assertFalse(model.handle_key(key))
        self.assertFalse(model.aborted)
        self.assertFalse(model.hide_unselected)
        self.assertFalse(confirm.handle_key(key))
        self.assertFalse(confirm.aborted)

    def test_double_escape_yields_two_escapes(self) -> None:
        self.assertEqual(self._keys(b"\x1b\x1b", 2), ["ESC", "ESC"])

    def test_control_keys(self) -> None:
        self.assertEqual(
            self._keys(b"\x03\x7f\x08\r\n\t", 6),
            ["CTRL_C", "BACKSPACE", "BACKSPACE", "ENTER_CR", "ENTER_LF", "TAB"],
        )

    def test_printable_and_multibyte_text(self) -> None:
        self.assertEqual(self._keys("/ hé€".encode("utf-8"), 5), ["/", " ", "h", "é", "€"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(input_mod.read_key(self.read_fd, timeout_ms=10), "")

    def test_end_of_input_returns_empty_token(self) -> None:
        os.close(self.write_fd)
        self.write_fd = None

        self.assertEqual(input_mod.read_key(self.read_fd), "")


if __name__ == "__main__":
    unittest.main()
