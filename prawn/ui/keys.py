"""
Escape-sequence decoding for Prawn.

Turns the raw bytes coming from the terminal into key codes. Plain bytes are
returned as they are; navigation keys come back as the matching curses KEY_*
constants, so the mode handlers can compare against them just as they would
with curses.getch().

The decoder reads one byte at a time and stops as soon as a sequence is
complete, so a short sequence never swallows the first byte of the next key.
Longer ESC [ sequences are read through their parameter bytes to the final
byte; those that name no editor key are dropped whole.
"""
import curses
from curses import ascii

from prawn import logger

# ESC [ <letter>
BRACKET_KEYS = {
    ord('D'): curses.KEY_LEFT,
    ord('C'): curses.KEY_RIGHT,
    ord('A'): curses.KEY_UP,
    ord('B'): curses.KEY_DOWN,
    ord('H'): curses.KEY_HOME,
    ord('F'): curses.KEY_END,
}

# ESC [ <digit> ~
TILDE_KEYS = {
    ord('1'): curses.KEY_HOME,
    ord('2'): curses.KEY_IC,
    ord('3'): curses.KEY_DC,
    ord('4'): curses.KEY_END,
    ord('5'): curses.KEY_PPAGE,
    ord('6'): curses.KEY_NPAGE,
    ord('7'): curses.KEY_HOME,
    ord('8'): curses.KEY_END,
}

# ESC O <letter>
SS3_KEYS = {
    ord('H'): curses.KEY_HOME,
    ord('F'): curses.KEY_END,
}

# Decoder states
SAW_ESC = "esc"
SAW_ESC_BRACKET = "esc["
SAW_ESC_BRACKET_DIGIT = "esc[digit"
SAW_ESC_O = "escO"


def is_csi_parameter(byte: int) -> bool:
    """Parameter and intermediate bytes of ESC [ sequences (digits, ';', ' ' ...)."""
    return 0x20 <= byte <= 0x3F


def is_csi_final(byte: int) -> bool:
    return 0x40 <= byte <= 0x7E


def csi_key(params: bytes, final: int):
    """
    Key for a complete ESC [ <params> <final> sequence, or None when the
    sequence means nothing to the editor (F5, Shift-Tab ...).

    Modifiers are ignored, so ESC [ 1 ; 5 C (Ctrl-Right) is still Right and
    ESC [ 3 ; 2 ~ is still Delete.
    """
    if final == ord('~'):
        first = params.split(b";")[0]
        if len(first) != 1:
            return None
        if first == params:
            return TILDE_KEYS.get(first[0], ascii.ESC)
        return TILDE_KEYS.get(first[0])
    if params and final in BRACKET_KEYS:
        return BRACKET_KEYS[final]
    return None


class KeyDecoder:
    """
    Reads logical keys from a byte source.

    The source must provide read_byte() (blocking, raising on I/O failure) and
    has_pending_input(), which tells a lone ESC keypress apart from the start
    of an escape sequence.
    """
    def __init__(self, source):
        self.source = source

    def read_key(self) -> int:
        """Consume the bytes of exactly one key and return its code."""
        while True:
            key = self._read_sequence()
            if key is not None:
                return key

    def _read_sequence(self):
        """Decode one keystroke; None if it was an escape sequence with no key."""
        byte = self.source.read_byte()
        if byte == ascii.DEL:
            return curses.KEY_BACKSPACE
        if byte != ascii.ESC:
            return byte
        if not self.source.has_pending_input():
            return ascii.ESC

        state = SAW_ESC
        params = bytearray()
        while True:
            byte = self.source.read_byte()
            if state == SAW_ESC:
                if byte == ord('['):
                    state = SAW_ESC_BRACKET
                elif byte == ord('O'):
                    state = SAW_ESC_O
                else:
                    return byte
            elif state == SAW_ESC_BRACKET:
                if byte in BRACKET_KEYS:
                    return BRACKET_KEYS[byte]
                if is_csi_parameter(byte):
                    params.append(byte)
                    state = SAW_ESC_BRACKET_DIGIT
                elif is_csi_final(byte):
                    logger.log(f"keys: ignored sequence ESC [ {chr(byte)}")
                    return None
                else:
                    return byte
            elif state == SAW_ESC_BRACKET_DIGIT:
                if is_csi_parameter(byte):
                    params.append(byte)
                elif is_csi_final(byte):
                    key = csi_key(bytes(params), byte)
                    if key is None:
                        logger.log(f"keys: ignored sequence ESC [ {params.decode()}{chr(byte)}")
                    return key
                else:
                    return byte
            else:  # SAW_ESC_O
                return SS3_KEYS.get(byte, byte)
