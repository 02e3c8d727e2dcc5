"""A bounded in-memory byte stream with separate reading and writing views."""

from __future__ import annotations


class ByteStream:
    """A stream of bytes with limited buffer capacity.

    Writing goes through :meth:`writer`, reading through :meth:`reader`;
    both views share the same state.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._buffer = ""
        self._closed = False
        self._error = False
        self._pushed = 0
        self._popped = 0
        self._reader = Reader(self)
        self._writer = Writer(self)

    def reader(self) -> Reader:
        """The reading side of the stream."""
        return self._reader

    def writer(self) -> Writer:
        """The writing side of the stream."""
        return self._writer

    def set_error(self) -> None:
        """Signal that the stream suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        """Whether the stream has had an error."""
        return self._error


class Writer:
    """The writing side of a :class:`ByteStream`."""

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    def push(self, data: str) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        accepted = data[: self.available_capacity()]
        self._stream._buffer += accepted
        self._stream._pushed += len(accepted)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._stream._closed = True

    def is_closed(self) -> bool:
        return self._stream._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        return self._stream._capacity - len(self._stream._buffer)

    def bytes_pushed(self) -> int:
        """Total number of bytes pushed so far."""
        return self._stream._pushed

    def set_error(self) -> None:
        self._stream.set_error()

    def has_error(self) -> bool:
        return self._stream.has_error()


class Reader:
    """The reading side of a :class:`ByteStream`."""

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    def peek(self) -> str:
        """The bytes currently buffered, without removing them."""
        return self._stream._buffer

    def pop(self, length: int) -> None:
        """Remove ``length`` bytes from the front of the buffer."""
        if length < 0 or length > len(self._stream._buffer):
            raise ValueError(
                f"cannot pop {length} bytes with {len(self._stream._buffer)} buffered"
            )
        self._stream._buffer = self._stream._buffer[length:]
        self._stream._popped += length

    def is_finished(self) -> bool:
        """Whether the stream is closed and fully popped."""
        return not self._stream._buffer and self._stream._closed

    def bytes_buffered(self) -> int:
        """Number of bytes pushed and not yet popped."""
        return len(self._stream._buffer)

    def bytes_popped(self) -> int:
        """Total number of bytes popped so far."""
        return self._stream._popped

    def set_error(self) -> None:
        self._stream.set_error()

    def has_error(self) -> bool:
        return self._stream.has_error()


def read(reader: Reader, max_len: int) -> str:
    """Peek and pop up to ``max_len`` bytes from ``reader``."""
    out: list[str] = []
    taken = 0
    while reader.bytes_buffered() and taken < max_len:
        view = reader.peek()
        if not view:
            raise RuntimeError("Reader.peek() returned an empty string")
        view = view[: max_len - taken]
        out.append(view)
        taken += len(view)
        reader.pop(len(view))
    return "".join(out)