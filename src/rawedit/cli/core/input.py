"""Keyboard input decoding with an escape-sequence state table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol

from rawedit.core.constants import ESC

logger = logging.getLogger(__name__)


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    DELETE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    ESCAPE = auto()


ARROW_KEYS = frozenset({Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT})


@dataclass(frozen=True)
class KeyEvent:
    """Represents a decoded keystroke."""
    key: Optional[Key] = None  # Named key if recognized
    code: Optional[int] = None  # Byte value for literal keys
    raw: bytes = b""  # Bytes the event was decoded from

    @property
    def is_char(self) -> bool:
        """Check if this is a literal byte rather than a named key."""
        return self.code is not None and self.key is None


class ByteSource(Protocol):
    """Anything that can hand out bytes; b"" means the read timed out."""

    def read(self, n: int = 1) -> bytes:
        ...


class _Stage(Enum):
    """Decoder position after the leading ESC."""
    INTRO = auto()      # expecting '[' or 'O'
    CSI = auto()        # after ESC [
    CSI_PARAM = auto()  # after ESC [ <digit>, expecting '~'
    SS3 = auto()        # after ESC O
    DISCARD = auto()    # unknown introducer, swallow one more byte
    ACCEPT = auto()
    REJECT = auto()


class _ByteClass(Enum):
    OPEN_BRACKET = auto()
    SS3_INTRO = auto()
    DIGIT = auto()
    LETTER = auto()
    TILDE = auto()
    OTHER = auto()


def _classify(byte: int) -> _ByteClass:
    if byte == 0x5B:  # '['
        return _ByteClass.OPEN_BRACKET
    if byte == 0x4F:  # 'O'
        return _ByteClass.SS3_INTRO
    if 0x30 <= byte <= 0x39:
        return _ByteClass.DIGIT
    if byte == 0x7E:  # '~'
        return _ByteClass.TILDE
    if 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A:
        return _ByteClass.LETTER
    return _ByteClass.OTHER


# (stage, byte class) -> next stage. Pairs not listed go to REJECT.
TRANSITIONS: dict[tuple[_Stage, _ByteClass], _Stage] = {
    (_Stage.INTRO, _ByteClass.OPEN_BRACKET): _Stage.CSI,
    (_Stage.INTRO, _ByteClass.SS3_INTRO): _Stage.SS3,
    (_Stage.INTRO, _ByteClass.DIGIT): _Stage.DISCARD,
    (_Stage.INTRO, _ByteClass.LETTER): _Stage.DISCARD,
    (_Stage.INTRO, _ByteClass.TILDE): _Stage.DISCARD,
    (_Stage.INTRO, _ByteClass.OTHER): _Stage.DISCARD,
    (_Stage.CSI, _ByteClass.DIGIT): _Stage.CSI_PARAM,
    (_Stage.CSI, _ByteClass.LETTER): _Stage.ACCEPT,
    (_Stage.CSI, _ByteClass.SS3_INTRO): _Stage.ACCEPT,
    (_Stage.SS3, _ByteClass.LETTER): _Stage.ACCEPT,
    (_Stage.SS3, _ByteClass.SS3_INTRO): _Stage.ACCEPT,
    (_Stage.CSI_PARAM, _ByteClass.TILDE): _Stage.ACCEPT,
}

# Final byte (or, for CSI_PARAM, the parameter digit) -> key, per accepting stage.
# Unmapped entries decode to Key.ESCAPE.
FINALS: dict[_Stage, dict[int, Key]] = {
    _Stage.CSI: {
        ord('A'): Key.UP,
        ord('B'): Key.DOWN,
        ord('C'): Key.RIGHT,
        ord('D'): Key.LEFT,
        ord('E'): Key.HOME,
        ord('F'): Key.END,
    },
    _Stage.SS3: {
        ord('H'): Key.HOME,
        ord('F'): Key.END,
    },
    _Stage.CSI_PARAM: {
        ord('1'): Key.HOME,
        ord('3'): Key.DELETE,
        ord('4'): Key.END,
        ord('5'): Key.PAGE_UP,
        ord('6'): Key.PAGE_DOWN,
        ord('7'): Key.HOME,
        ord('8'): Key.END,
    },
}

# Bytes after ESC: at most ESC [ <digit> ~
MAX_SEQUENCE = 3


class KeyDecoder:
    """
    Blocking key reader over a raw terminal.

    The first byte is waited for indefinitely (timeouts are retried).
    Bytes following an ESC get a single timed read each; if any of them
    does not arrive, the sequence is abandoned and the lone ESC is
    returned.
    """

    def __init__(self, source: ByteSource) -> None:
        self.source = source

    def next_key(self) -> KeyEvent:
        """Read a key event, blocking until input is available."""
        first = b""
        while not first:
            first = self.source.read(1)

        if first != ESC:
            return KeyEvent(code=first[0], raw=first)

        event = self._decode_sequence()
        logger.debug("decoded %r as %s", event.raw, event.key)
        return event

    def _decode_sequence(self) -> KeyEvent:
        """Run the state table over the bytes after ESC."""
        raw = bytearray(ESC)
        stage = _Stage.INTRO
        param: Optional[int] = None

        for _ in range(MAX_SEQUENCE):
            chunk = self.source.read(1)
            if not chunk:
                break
            byte = chunk[0]
            raw.append(byte)

            next_stage = TRANSITIONS.get((stage, _classify(byte)), _Stage.REJECT)
            if next_stage is _Stage.ACCEPT:
                lookup = param if stage is _Stage.CSI_PARAM else byte
                key = FINALS[stage].get(lookup, Key.ESCAPE)  # type: ignore[arg-type]
                return KeyEvent(key=key, raw=bytes(raw))
            if next_stage is _Stage.REJECT:
                break
            if next_stage is _Stage.CSI_PARAM:
                param = byte
            stage = next_stage

        return KeyEvent(key=Key.ESCAPE, raw=bytes(raw))


class _BufferSource:
    """ByteSource over an in-memory buffer; reads past the end time out."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def read(self, n: int = 1) -> bytes:
        chunk = self._data[self._pos:self._pos + n]
        self._pos += len(chunk)
        return chunk


def decode_bytes(data: bytes) -> KeyEvent:
    """Decode the first key in ``data``. ``data`` must not be empty."""
    if not data:
        raise ValueError("cannot decode a key from empty input")
    return KeyDecoder(_BufferSource(data)).next_key()
