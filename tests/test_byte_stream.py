import pytest

from minnowtcp.byte_stream import ByteStream, read


def test_push_within_capacity():
    data = "hello"
    stream = ByteStream(15)
    stream.writer().push(data)
    assert stream.reader().peek() == data
    assert stream.reader().bytes_buffered() == len(data)
    assert stream.writer().bytes_pushed() == len(data)
    assert stream.writer().available_capacity() == 15 - len(data)


def test_push_truncated_to_capacity():
    data = "hello, world"
    capacity = 4
    stream = ByteStream(capacity)
    stream.writer().push(data)
    assert stream.reader().peek() == data[:capacity]
    assert stream.writer().bytes_pushed() == capacity
    assert stream.writer().available_capacity() == 0


def test_pop_frees_capacity():
    data = "abcdef"
    stream = ByteStream(len(data))
    stream.writer().push(data)
    stream.reader().pop(2)
    assert stream.reader().peek() == data[2:]
    assert stream.reader().bytes_popped() == 2
    assert stream.writer().available_capacity() == 2
    stream.writer().push("xyz")
    assert stream.reader().peek() == data[2:] + "xy"


def test_pop_too_many_raises():
    stream = ByteStream(10)
    stream.writer().push("ab")
    with pytest.raises(ValueError):
        stream.reader().pop(3)


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        ByteStream(-1)


def test_finished_only_after_close_and_drain():
    stream = ByteStream(10)
    stream.writer().push("ab")
    stream.writer().close()
    assert stream.writer().is_closed()
    assert not stream.reader().is_finished()
    stream.reader().pop(2)
    assert stream.reader().is_finished()


def test_not_finished_when_open_and_empty():
    stream = ByteStream(10)
    assert not stream.reader().is_finished()
    assert not stream.writer().is_closed()


def test_error_shared_between_views():
    stream = ByteStream(10)
    assert not stream.reader().has_error()
    stream.writer().set_error()
    assert stream.reader().has_error()
    assert stream.has_error()


def test_views_share_state_across_calls():
    stream = ByteStream(10)
    first_writer = stream.writer()
    first_writer.push("abc")
    assert stream.writer().bytes_pushed() == 3
    assert stream.reader().peek() == "abc"
    stream.reader().pop(1)
    assert stream.reader().bytes_popped() == 1
    assert first_writer.available_capacity() == 8


def test_read_helper_limits_length():
    data = "abcdefgh"
    stream = ByteStream(20)
    stream.writer().push(data)
    assert read(stream.reader(), 3) == data[:3]
    assert read(stream.reader(), 100) == data[3:]
    assert stream.reader().bytes_popped() == len(data)


def test_read_helper_on_empty_stream():
    stream = ByteStream(5)
    assert read(stream.reader(), 10) == ""


class _BrokenReader:
    def bytes_buffered(self):
        return 1

    def peek(self):
        return ""

    def pop(self, length):
        raise AssertionError("pop should not be reached")


def test_read_helper_rejects_empty_peek():
    with pytest.raises(RuntimeError):
        read(_BrokenReader(), 5)


def test_null_byte_preserved():
    data = "a\0b"
    stream = ByteStream(10)
    stream.writer().push(data)
    assert read(stream.reader(), 10) == data