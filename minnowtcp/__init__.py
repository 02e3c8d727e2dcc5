"""The receiving half of a TCP core: wrapping sequence numbers, byte streams, reassembly and a receiver."""

__version__ = "0.1.0"
__all__ = [
    "wrapping_integers",
    "byte_stream",
    "messages",
    "reassembler",
    "tcp_receiver",
]