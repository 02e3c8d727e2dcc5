"""Messages exchanged between a TCP sender and a TCP receiver."""

from __future__ import annotations

from dataclasses import dataclass, field

from minnowtcp.wrapping_integers import Wrap32


@dataclass
class TCPSenderMessage:
    """A segment sent from a TCP sender to its peer's receiver."""

    seqno: Wrap32 = field(default_factory=lambda: Wrap32(0))
    syn: bool = False
    payload: str = ""
    fin: bool = False
    rst: bool = False

    def sequence_length(self) -> int:
        """Number of sequence numbers the segment occupies."""
        return int(self.syn) + len(self.payload) + int(self.fin)


@dataclass
class TCPReceiverMessage:
    """Acknowledgment and window advertisement from a TCP receiver."""

    ackno: Wrap32 | None = None
    window_size: int = 0
    rst: bool = False