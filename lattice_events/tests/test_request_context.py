import threading

from lattice_events.core import request_context


def test_set_and_clear_request_id():
    assert request_context.set_request_id("req-1") == "req-1"
    assert request_context.get_request_id() == "req-1"

    request_context.clear_request_id()
    assert request_context.get_request_id() is None


def test_request_id_set_in_thread_does_not_leak():
    request_context.set_request_id("main")

    def worker():
        request_context.set_request_id("worker")

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert request_context.get_request_id() == "main"
    request_context.clear_request_id()
