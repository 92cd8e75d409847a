"""
Heap, benchmark and logging settings, loaded with pydantic-settings.

Each field can be overridden by an environment variable of the same name
or by a .env file, e.g. DEFAULT_HEAP_ORDERING=reverse turns every
PriorityHeap() built without an explicit ordering into a max-heap.

Values are validated when `settings` is created: an unknown ordering name
fails at import time with a ValidationError, not on the first heap.
"""

from pydantic_settings import BaseSettings

from models.enums import HeapOrdering


class Settings(BaseSettings):
    # ── Heap ────────────────────────────────────────────────────
    DEFAULT_HEAP_ORDERING: HeapOrdering = HeapOrdering.REGULAR  # used when PriorityHeap() gets no ordering

    # ── Benchmark ───────────────────────────────────────────────
    BENCHMARK_NUM_ITEMS: int = 10_000  # values pushed (and popped) per run
    BENCHMARK_SEED: int = 42           # same seed → same input for every ordering

    # ── Logging ─────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
