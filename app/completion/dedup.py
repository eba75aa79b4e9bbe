import threading

UNSET = object()


class LastPromptFilter:
    """Single-slot memory of the most recent prompt, shared by the whole process.

    Every call records the prompt, so only back-to-back repeats are suppressed.
    """

    def __init__(self) -> None:
        self._last_prompt: object = UNSET
        self._lock = threading.Lock()

    def should_suppress(self, prompt: str) -> bool:
        with self._lock:
            repeated = self._last_prompt is not UNSET and self._last_prompt == prompt
            self._last_prompt = prompt
            return repeated

    def reset(self) -> None:
        with self._lock:
            self._last_prompt = UNSET
