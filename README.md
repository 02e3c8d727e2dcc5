# minnowtcp

The receiving half of a TCP implementation, written in plain Python with
no dependencies beyond the standard library. Everything works in memory:
you hand it segments and read back stream bytes and acknowledgments.

## What it provides

- `minnowtcp.wrapping_integers.Wrap32`: a 32-bit sequence number that wraps
  around at 2**32. `Wrap32.wrap(n, isn)` turns an absolute sequence number
  into a wrapped one. `seqno.unwrap(isn, checkpoint)` goes the other way and
  picks the absolute value closest to the checkpoint. `Wrap32` values can be
  added to integers, compared for equality and hashed; `raw_value` gives the
  underlying 32-bit number.
- `minnowtcp.byte_stream`: a bounded in-memory `ByteStream` with a `Writer`
  side (`push`, `close`, `is_closed`, `available_capacity`, `bytes_pushed`)
  and a `Reader` side (`peek`, `pop`, `is_finished`, `bytes_buffered`,
  `bytes_popped`). Both sides share `set_error` and `has_error`. A push
  keeps only as much data as fits; popping more than is buffered raises
  `ValueError`. The `read(reader, max_len)` helper peeks and pops up to
  `max_len` bytes and returns them as a string.
- `minnowtcp.messages`: the `TCPSenderMessage` (`seqno`, `syn`, `payload`,
  `fin`, `rst`, and `sequence_length()`) and `TCPReceiverMessage` (`ackno`,
  `window_size`, `rst`) dataclasses.
- `minnowtcp.reassembler.Reassembler`: puts substrings that may arrive out
  of order or overlap back into one `ByteStream`. Bytes beyond the stream's
  available capacity are dropped; the stream is closed once the last byte
  has been written. `count_bytes_pending()` reports how many bytes are held
  back waiting for a gap to be filled.
- `minnowtcp.tcp_receiver.TCPReceiver`: turns incoming `TCPSenderMessage`s
  into stream bytes and, through `send()`, reports the ackno, the window
  size (capped at 65535) and whether the stream has an error. A segment
  with `rst` set marks the stream as errored.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from minnowtcp.byte_stream import ByteStream, read
from minnowtcp.messages import TCPSenderMessage
from minnowtcp.reassembler import Reassembler
from minnowtcp.tcp_receiver import TCPReceiver
from minnowtcp.wrapping_integers import Wrap32

receiver = TCPReceiver(Reassembler(ByteStream(4000)))
isn = Wrap32(1000)
receiver.receive(TCPSenderMessage(seqno=isn, syn=True, payload="hello"))

reply = receiver.send()
assert reply.ackno == isn + 6
assert reply.window_size == 3995
assert read(receiver.reader(), 100) == "hello"
```

## What it does not do

- There is no sending side: nothing here splits an outgoing stream into
  segments, tracks a peer's window or retransmits unacknowledged data.
  `TCPReceiverMessage` is provided so that you can feed the receiver's
  replies to a sender of your own.
- It does no network input or output. There are no sockets, no IP or
  Ethernet handling and no command-line program; segments go in and
  replies come out as Python objects.