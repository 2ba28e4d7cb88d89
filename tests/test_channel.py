import threading
import time

import pytest

from lokit.channel import (
    Channel,
    ChannelClosedError,
    buffer,
    buffer_with_context,
    buffer_with_timeout,
    channel_dispatcher,
    channel_to_slice,
    dispatching_strategy_first,
    dispatching_strategy_least,
    dispatching_strategy_most,
    dispatching_strategy_random,
    dispatching_strategy_round_robin,
    dispatching_strategy_weighted_random,
    fan_in,
    fan_out,
    generator,
    slice_to_channel,
)


def _eventually(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.002)
    return predicate()


def test_channel_send_receive_and_close():
    ch = Channel(3)
    ch.send(1)
    ch.send(2)
    assert len(ch) == 2
    assert ch.capacity == 3
    assert ch.receive() == (1, True)
    ch.close()
    assert ch.receive() == (2, True)
    assert ch.receive() == (None, False)
    with pytest.raises(ChannelClosedError):
        ch.send(3)
    with pytest.raises(ChannelClosedError):
        ch.close()


def test_channel_receive_timeout():
    ch = Channel(1)
    with pytest.raises(TimeoutError):
        ch.receive(timeout=0.01)


def test_unbuffered_send_waits_for_receiver():
    ch = Channel(0)
    done = threading.Event()

    def send():
        ch.send("x")
        done.set()

    threading.Thread(target=send, daemon=True).start()
    time.sleep(0.05)
    assert not done.is_set()
    assert len(ch) == 0
    assert ch.receive(timeout=1) == ("x", True)
    assert done.wait(1)


def test_channel_dispatcher():
    ch = Channel(10)
    for i in range(4):
        ch.send(i)
    assert len(ch) == 4

    children = channel_dispatcher(ch, 5, 10, dispatching_strategy_round_robin)
    assert _eventually(lambda: sum(len(c) for c in children) == 4)

    assert len(children) == 5
    assert [c.capacity for c in children] == [10] * 5
    assert [len(c) for c in children] == [1, 1, 1, 1, 0]
    assert len(ch) == 0

    for i in range(4):
        assert children[i].receive(timeout=1) == (i, True)

    ch.close()
    with pytest.raises(ChannelClosedError):
        ch.send(42)
    for child in children:
        assert child.receive(timeout=1) == (None, False)

    unbuffered = channel_dispatcher(ch, 5, 0, dispatching_strategy_round_robin)
    assert unbuffered[0].capacity == 0


def test_dispatching_strategy_round_robin():
    children = [Channel(2) for _ in range(3)]
    assert dispatching_strategy_round_robin(42, 0, children) == 0
    assert dispatching_strategy_round_robin(42, 1, children) == 1
    assert dispatching_strategy_round_robin(42, 2, children) == 2
    assert dispatching_strategy_round_robin(42, 3, children) == 0


def test_dispatching_strategy_round_robin_skips_full():
    children = [Channel(1) for _ in range(3)]
    children[1].send(0)
    assert dispatching_strategy_round_robin(42, 1, children) == 2


def test_dispatching_strategy_random_avoids_full():
    children = [Channel(2) for _ in range(2)]
    children[1].send(0)
    children[1].send(1)
    for _ in range(20):
        assert dispatching_strategy_random(42, 0, children) == 0


def test_dispatching_strategy_weighted_random():
    children = [Channel(2) for _ in range(2)]
    dispatcher = dispatching_strategy_weighted_random([0, 42])
    assert dispatcher(42, 0, children) == 1
    children[0].send(0)
    assert dispatcher(42, 0, children) == 1
    children[1].send(1)
    assert dispatcher(42, 0, children) == 1


def test_dispatching_strategy_first():
    children = [Channel(2) for _ in range(2)]
    assert dispatching_strategy_first(42, 0, children) == 0
    children[0].send(0)
    assert dispatching_strategy_first(42, 0, children) == 0
    children[0].send(1)
    assert dispatching_strategy_first(42, 0, children) == 1


def test_dispatching_strategy_least():
    children = [Channel(2) for _ in range(2)]
    assert dispatching_strategy_least(42, 0, children) == 0
    children[0].send(0)
    assert dispatching_strategy_least(42, 0, children) == 1
    children[1].send(0)
    assert dispatching_strategy_least(42, 0, children) == 0
    children[0].send(1)
    assert dispatching_strategy_least(42, 0, children) == 1
    children[1].send(1)
    assert dispatching_strategy_least(42, 0, children) == 0


def test_dispatching_strategy_most():
    children = [Channel(2) for _ in range(2)]
    assert dispatching_strategy_most(42, 0, children) == 0
    children[0].send(0)
    assert dispatching_strategy_most(42, 0, children) == 0
    children[1].send(0)
    assert dispatching_strategy_most(42, 0, children) == 0
    children[0].send(1)
    assert dispatching_strategy_most(42, 0, children) == 0
    children[1].send(1)
    assert dispatching_strategy_most(42, 0, children) == 0


def test_slice_to_channel():
    ch = slice_to_channel(2, [1, 2, 3])
    assert ch.receive(timeout=1) == (1, True)
    assert ch.receive(timeout=1) == (2, True)
    assert ch.receive(timeout=1) == (3, True)
    assert ch.receive(timeout=1) == (None, False)


def test_channel_to_slice():
    ch = slice_to_channel(2, [1, 2, 3])
    assert channel_to_slice(ch) == [1, 2, 3]


def test_generator():
    def producer(emit):
        for i in range(4):
            emit(i)

    assert list(generator(2, producer)) == [0, 1, 2, 3]


def test_buffer():
    ch = slice_to_channel(2, [1, 2, 3])

    items1, length1, _, ok1 = buffer(ch, 2)
    items2, length2, _, ok2 = buffer(ch, 2)
    items3, length3, _, ok3 = buffer(ch, 2)

    assert (items1, length1, ok1) == ([1, 2], 2, True)
    assert (items2, length2, ok2) == ([3], 1, False)
    assert (items3, length3, ok3) == ([], 0, False)


def test_buffer_with_context_cancelled():
    ch1 = Channel(10)
    cancel = threading.Event()

    def produce():
        for i in range(3):
            ch1.send(i)
        time.sleep(0.05)
        cancel.set()
        time.sleep(0.05)
        for i in range(3, 6):
            ch1.send(i)
        ch1.close()

    threading.Thread(target=produce, daemon=True).start()
    items, length, _, ok = buffer_with_context(cancel, ch1, 20)
    assert items == [0, 1, 2]
    assert length == 3
    assert ok is True


def test_buffer_with_context_fills():
    ch2 = Channel(10)
    for i in range(10):
        ch2.send(i)
    items, length, _, ok = buffer_with_context(threading.Event(), ch2, 5)
    assert items == [0, 1, 2, 3, 4]
    assert length == 5
    assert ok is True


def test_buffer_with_timeout():
    def producer(emit):
        for i in range(5):
            emit(i)
            time.sleep(0.05)

    ch = generator(0, producer)

    assert buffer_with_timeout(ch, 20, 0.075)[::3] == ([0, 1], True)
    assert buffer_with_timeout(ch, 20, 0.01)[::3] == ([], True)
    items3, length3, _, ok3 = buffer_with_timeout(ch, 1, 0.15)
    assert (items3, length3, ok3) == ([2], 1, True)
    items4, length4, _, ok4 = buffer_with_timeout(ch, 2, 0.125)
    assert (items4, length4, ok4) == ([3, 4], 2, True)
    items5, length5, _, ok5 = buffer_with_timeout(ch, 3, 0.125)
    assert (items5, length5, ok5) == ([], 0, False)


def test_fan_in():
    upstreams = [Channel(10) for _ in range(3)]

    def feed(channel):
        channel.send(1)
        channel.send(1)
        channel.close()

    for upstream in upstreams:
        threading.Thread(target=feed, args=(upstream,), daemon=True).start()

    out = fan_in(10, *upstreams)
    assert _eventually(lambda: len(out) == 6)

    assert [len(u) for u in upstreams] == [0, 0, 0]
    assert out.capacity == 10

    for _ in range(6):
        assert out.receive(timeout=1) == (1, True)
    assert out.receive(timeout=1) == (None, False)


def test_fan_out():
    upstream = slice_to_channel(10, [0, 1, 2, 3, 4, 5])
    downstreams = fan_out(3, 10, upstream)

    assert len(downstreams) == 3
    assert _eventually(lambda: all(len(d) == 6 for d in downstreams))

    for downstream in downstreams:
        assert downstream.capacity == 10
        assert channel_to_slice(downstream) == [0, 1, 2, 3, 4, 5]

    for downstream in downstreams:
        assert downstream.receive(timeout=1) == (None, False)