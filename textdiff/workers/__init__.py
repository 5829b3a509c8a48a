"""
Background workers for non-blocking comparisons.

Provides QThread-based workers for:
- Comparing in-memory text
- Comparing text files

All workers use Qt signals for thread-safe communication
with the calling thread.
"""

from textdiff.workers.base_worker import (
    BaseWorker,
    CancelledException,
    WorkerSignals,
    WorkerState,
    WorkerThread,
)
from textdiff.workers.compare_worker import (
    FileDiffWorker,
    InputTooLargeError,
    TextDiffWorker,
    check_input_size,
)

__all__ = [
    # Base
    'BaseWorker',
    'CancelledException',
    'WorkerSignals',
    'WorkerState',
    'WorkerThread',
    # Compare
    'TextDiffWorker',
    'FileDiffWorker',
    'InputTooLargeError',
    'check_input_size',
]
