import threading

from memory_match.store.lock import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(2, timeout=5)

    def reader():
        with lock.read_lock():
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert not any(t.is_alive() for t in threads)


def test_writer_waits_for_reader():
    lock = ReadWriteLock()
    order = []
    reading = threading.Event()
    release = threading.Event()

    def reader():
        with lock.read_lock():
            reading.set()
            release.wait(timeout=5)
            order.append('read')

    def writer():
        reading.wait(timeout=5)
        with lock.write_lock():
            order.append('write')

    r = threading.Thread(target=reader)
    w = threading.Thread(target=writer)
    r.start()
    w.start()
    w.join(timeout=0.2)
    assert w.is_alive()
    release.set()
    r.join(timeout=5)
    w.join(timeout=5)
    assert order == ['read', 'write']
