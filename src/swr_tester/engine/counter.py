import threading

class SimulationCounter:
    """Running total of trials simulated; only ever grows."""

    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    def add(self, n: int):
        with self._lock:
            self._value += int(n)

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

# process-wide
DEFAULT_COUNTER = SimulationCounter()

def simulations_ran() -> int:
    return DEFAULT_COUNTER.value
