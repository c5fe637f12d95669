"""Tests for the in-memory code store and its lock."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from shortener.storage.base import CodeStore
from shortener.storage.locks import ReadWriteLock


class TestInMemoryCodeStore:
    """Test store operations."""
    
    def test_is_code_store(self, store):
        """In-memory store implements the store interface."""
        assert isinstance(store, CodeStore)
    
    def test_put_and_get(self, store):
        """Stored targets are returned verbatim."""
        store.put("abc123", "https://example.com/a?b=c%20d")
        
        assert store.get("abc123") == ("https://example.com/a?b=c%20d", True)
        assert store.exists("abc123")
        assert store.size() == 1
    
    def test_get_missing(self, store):
        """Missing codes return an empty target and found=False."""
        assert store.get("nope00") == ("", False)
        assert not store.exists("nope00")
        assert store.size() == 0
    
    def test_put_overwrites(self, store):
        """Put replaces an existing entry."""
        store.put("abc123", "https://example.com/first")
        store.put("abc123", "https://example.com/second")
        
        assert store.get("abc123") == ("https://example.com/second", True)
        assert store.size() == 1
    
    def test_put_if_absent(self, store):
        """put_if_absent never replaces an existing entry."""
        assert store.put_if_absent("abc123", "https://example.com/first")
        assert not store.put_if_absent("abc123", "https://example.com/second")
        
        assert store.get("abc123") == ("https://example.com/first", True)
        assert store.size() == 1
    
    def test_concurrent_writes_and_reads(self, store):
        """Concurrent puts from many threads are all visible afterwards."""
        num_workers = 100
        num_operations = 10
        
        def write(worker_id):
            for j in range(num_operations):
                store.put(f"code{worker_id}_{j}", f"https://example.com/{worker_id}/{j}")
        
        with ThreadPoolExecutor(max_workers=32) as pool:
            list(pool.map(write, range(num_workers)))
        
        assert store.size() == num_workers * num_operations
        
        def read(worker_id):
            return [
                store.get(f"code{worker_id}_{j}") == (f"https://example.com/{worker_id}/{j}", True)
                for j in range(num_operations)
            ]
        
        with ThreadPoolExecutor(max_workers=32) as pool:
            results = [ok for batch in pool.map(read, range(num_workers)) for ok in batch]
        
        assert all(results)
    
    def test_concurrent_put_if_absent_single_winner(self, store):
        """Only one of many racing claims for a code succeeds."""
        barrier = threading.Barrier(20)
        
        def claim(i):
            barrier.wait()
            return store.put_if_absent("shared", f"https://example.com/{i}")
        
        with ThreadPoolExecutor(max_workers=20) as pool:
            results = list(pool.map(claim, range(20)))
        
        assert results.count(True) == 1
        assert store.size() == 1


class TestReadWriteLock:
    """Test shared/exclusive locking."""
    
    def test_readers_share_the_lock(self):
        """Several readers hold the lock at the same time."""
        lock = ReadWriteLock()
        readers = 4
        barrier = threading.Barrier(readers, timeout=5)
        errors = []
        
        def reader():
            with lock.read_locked():
                try:
                    # Only passes if every reader is inside at once
                    barrier.wait()
                except threading.BrokenBarrierError as e:
                    errors.append(e)
        
        threads = [threading.Thread(target=reader) for _ in range(readers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)
        
        assert not errors
    
    def test_writer_waits_for_reader(self):
        """A writer blocks until the active reader releases."""
        lock = ReadWriteLock()
        writer_done = threading.Event()
        
        def writer():
            with lock.write_locked():
                writer_done.set()
        
        lock.acquire_read()
        thread = threading.Thread(target=writer)
        thread.start()
        
        assert not writer_done.wait(timeout=0.2)
        
        lock.release_read()
        assert writer_done.wait(timeout=5)
        thread.join(timeout=5)
    
    def test_reader_waits_for_writer(self):
        """A reader blocks while a writer holds the lock."""
        lock = ReadWriteLock()
        reader_done = threading.Event()
        
        def reader():
            with lock.read_locked():
                reader_done.set()
        
        lock.acquire_write()
        thread = threading.Thread(target=reader)
        thread.start()
        
        assert not reader_done.wait(timeout=0.2)
        
        lock.release_write()
        assert reader_done.wait(timeout=5)
        thread.join(timeout=5)
    
    def test_waiting_writer_blocks_new_readers(self):
        """New readers queue behind a waiting writer."""
        lock = ReadWriteLock()
        order = []
        writer_waiting = threading.Event()
        
        def writer():
            writer_waiting.set()
            with lock.write_locked():
                order.append("writer")
        
        def late_reader():
            with lock.read_locked():
                order.append("reader")
        
        lock.acquire_read()
        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        writer_waiting.wait(timeout=5)
        
        deadline = time.monotonic() + 5
        while not lock._writers_waiting and time.monotonic() < deadline:
            time.sleep(0.01)
        assert lock._writers_waiting == 1
        
        reader_thread = threading.Thread(target=late_reader)
        reader_thread.start()
        
        lock.release_read()
        writer_thread.join(timeout=5)
        reader_thread.join(timeout=5)
        
        assert order == ["writer", "reader"]
    
    def test_lock_released_on_exception(self):
        """Scoped locking releases on error paths."""
        lock = ReadWriteLock()
        
        with pytest.raises(RuntimeError):
            with lock.write_locked():
                raise RuntimeError("boom")
        
        with lock.read_locked():
            pass
        with lock.write_locked():
            pass
    
    def test_release_without_acquire(self):
        """Releasing an unheld lock is an error."""
        lock = ReadWriteLock()
        
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()
