import time


def now_unix() -> int:
    return int(time.time())
