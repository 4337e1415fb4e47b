import time


class MonotonicClock:
    def monotonic_ms(self) -> float:
        return time.perf_counter() * 1000.0
