"""Reassembly of indexed, possibly out-of-order substrings into a byte stream."""

from __future__ import annotations

from itertools import takewhile

from minnowtcp.byte_stream import ByteStream, Reader, Writer


class Reassembler:
    """Puts indexed substrings back together and writes them into a :class:`ByteStream`.

    Substrings may arrive out of order and may overlap. Bytes that fit in the
    stream's available capacity but cannot be written yet are held back until
    the gap before them is filled. Bytes beyond the available capacity are
    discarded. The stream is closed once the last byte has been written.
    """

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self.next_index = 0
        self.last_substring = False
        self._last_index = 0
        # One slot per byte of the window that starts at ``next_index``;
        # ``None`` marks a byte that has not arrived yet.
        self._slots: list[str | None] = []

    def insert(self, first_index: int, data: str, is_last_substring: bool) -> None:
        """Insert ``data`` starting at stream index ``first_index``."""
        if is_last_substring:
            self.last_substring = True
            self._last_index = first_index + len(data)

        if first_index < self.next_index:
            overlap = self.next_index - first_index
            if overlap >= len(data):
                return
            data = data[overlap:]
            first_index = self.next_index

        writer = self._output.writer()
        window = writer.available_capacity()
        data = data[:window]

        offset = first_index - self.next_index
        if offset < window:
            slots = self._slots[:window]
            slots.extend([None] * (window - len(slots)))
            slots[offset : offset + len(data)] = list(data)
            self._slots = slots[:window]

        ready = "".join(takewhile(lambda byte: byte is not None, self._slots))
        if ready:
            writer.push(ready)
            self.next_index += len(ready)
            self._slots = self._slots[len(ready) :]

        if self.last_substring and self.next_index >= self._last_index:
            writer.close()

    def count_bytes_pending(self) -> int:
        """How many bytes are held in the reassembler itself."""
        return sum(byte is not None for byte in self._slots)

    def reader(self) -> Reader:
        """The reading side of the output stream."""
        return self._output.reader()

    def writer(self) -> Writer:
        """The writing side of the output stream, for inspection."""
        return self._output.writer()