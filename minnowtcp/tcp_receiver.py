"""The receiving side of a TCP connection."""

from __future__ import annotations

from minnowtcp.byte_stream import Reader, Writer
from minnowtcp.messages import TCPReceiverMessage, TCPSenderMessage
from minnowtcp.reassembler import Reassembler
from minnowtcp.wrapping_integers import Wrap32

_MOD64 = 1 << 64
_MAX_WINDOW = 0xFFFF


class TCPReceiver:
    """Turns incoming segments into stream bytes and reports acknowledgments."""

    def __init__(self, reassembler: Reassembler) -> None:
        self._reassembler = reassembler
        self._zero_point: Wrap32 | None = None

    def receive(self, message: TCPSenderMessage) -> None:
        """Insert the payload of ``message`` at its place in the stream."""
        if message.rst:
            self._reassembler.reader().set_error()
            return

        if message.syn:
            self._zero_point = message.seqno

        if self._zero_point is None:
            return

        seqno = message.seqno + 1 if message.syn else message.seqno
        absolute = seqno.unwrap(self._zero_point, self._reassembler.next_index)
        stream_index = (absolute - 1) % _MOD64
        self._reassembler.insert(stream_index, message.payload, message.fin)

    def send(self) -> TCPReceiverMessage:
        """The acknowledgment and window to report to the peer's sender."""
        writer = self._reassembler.writer()
        ackno = None
        if self._zero_point is not None:
            consumed = self._reassembler.next_index + (2 if writer.is_closed() else 1)
            ackno = Wrap32.wrap(consumed, self._zero_point)
        return TCPReceiverMessage(
            ackno=ackno,
            window_size=min(writer.available_capacity(), _MAX_WINDOW),
            rst=self._reassembler.reader().has_error(),
        )

    def reassembler(self) -> Reassembler:
        return self._reassembler

    def reader(self) -> Reader:
        return self._reassembler.reader()

    def writer(self) -> Writer:
        return self._reassembler.writer()