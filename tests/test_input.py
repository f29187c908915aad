"""Tests for key decoding (no terminal needed)."""

import pytest

from rawedit.cli.core.input import Key, KeyDecoder, KeyEvent, decode_bytes
from rawedit.core.constants import ctrl

from conftest import FakeDevice


def decode(data: bytes) -> KeyEvent:
    return KeyDecoder(FakeDevice(data)).next_key()


class TestLiteralKeys:
    """Bytes other than ESC come back unchanged."""

    @pytest.mark.parametrize("byte", [b for b in range(256) if b != 0x1B])
    def test_single_byte_is_literal(self, byte: int) -> None:
        event = decode(bytes([byte]))
        assert event.is_char
        assert event.code == byte
        assert event.key is None

    def test_ctrl_q(self) -> None:
        assert decode(b"\x11").code == ctrl("q")

    def test_waits_through_timeouts(self) -> None:
        class SlowDevice(FakeDevice):
            idle_reads = 3

            def read(self, n: int = 1) -> bytes:
                if self.idle_reads:
                    self.idle_reads -= 1
                    return b""
                return super().read(n)

        device = SlowDevice(b"x")
        assert KeyDecoder(device).next_key().code == ord("x")
        assert device.idle_reads == 0

    def test_reads_one_key_at_a_time(self) -> None:
        decoder = KeyDecoder(FakeDevice(b"ab"))
        assert decoder.next_key().code == ord("a")
        assert decoder.next_key().code == ord("b")


class TestEscapeSequences:
    """Multi-byte sequences after ESC."""

    @pytest.mark.parametrize("data,key", [
        (b"\x1b[A", Key.UP),
        (b"\x1b[B", Key.DOWN),
        (b"\x1b[C", Key.RIGHT),
        (b"\x1b[D", Key.LEFT),
        (b"\x1b[E", Key.HOME),
        (b"\x1b[F", Key.END),
        (b"\x1b[1~", Key.HOME),
        (b"\x1b[3~", Key.DELETE),
        (b"\x1b[4~", Key.END),
        (b"\x1b[5~", Key.PAGE_UP),
        (b"\x1b[6~", Key.PAGE_DOWN),
        (b"\x1b[7~", Key.HOME),
        (b"\x1b[8~", Key.END),
        (b"\x1bOH", Key.HOME),
        (b"\x1bOF", Key.END),
    ])
    def test_known_sequence(self, data: bytes, key: Key) -> None:
        event = decode(data)
        assert event.key is key
        assert event.raw == data

    def test_lone_escape(self) -> None:
        event = decode(b"\x1b")
        assert event.key is Key.ESCAPE
        assert event.raw == b"\x1b"

    @pytest.mark.parametrize("data", [
        b"\x1b[",       # timeout after introducer
        b"\x1b[5",      # timeout before '~'
        b"\x1bO",
    ])
    def test_incomplete_sequence_is_escape(self, data: bytes) -> None:
        assert decode(data).key is Key.ESCAPE

    @pytest.mark.parametrize("data", [
        b"\x1b[Z",      # unmapped CSI letter
        b"\x1b[2~",     # unmapped tilde parameter
        b"\x1b[9~",
        b"\x1b[5x",     # digit not followed by '~'
        b"\x1bOP",      # unmapped SS3 letter
        b"\x1b[;",      # not a letter or digit
        b"\x1bxy",      # unknown introducer
    ])
    def test_unknown_sequence_is_escape(self, data: bytes) -> None:
        assert decode(data).key is Key.ESCAPE

    def test_unknown_introducer_consumes_two_bytes(self) -> None:
        decoder = KeyDecoder(FakeDevice(b"\x1bxyz"))
        assert decoder.next_key().key is Key.ESCAPE
        assert decoder.next_key().code == ord("z")

    def test_sequence_followed_by_literal(self) -> None:
        decoder = KeyDecoder(FakeDevice(b"\x1b[3~q"))
        assert decoder.next_key().key is Key.DELETE
        assert decoder.next_key().code == ord("q")


class TestDecodeBytes:
    def test_decodes_first_key(self) -> None:
        assert decode_bytes(b"\x1b[A").key is Key.UP
        assert decode_bytes(b"hi").code == ord("h")

    def test_empty_input_rejected(self) -> None:
        with pytest.raises(ValueError):
            decode_bytes(b"")
