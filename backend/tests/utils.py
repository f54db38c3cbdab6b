import time


def wait_for_sessions(client, count, timeout=5.0):
    """Poll history until ``count`` sessions are stored; commits land asynchronously."""
    deadline = time.monotonic() + timeout
    while True:
        body = client.get("/history/sessions").json()
        if len(body) >= count or time.monotonic() > deadline:
            return body
        time.sleep(0.02)
