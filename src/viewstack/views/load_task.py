"""
load_task.py
------------
Cooperative wrapper around a view's load_assets hook.

load_assets may be:
- absent (None): the task is complete immediately
- a plain method: it runs to completion on the first step
- a generator function: each step advances it to its next ``yield``; a
  yielded number between 0 and 1 is recorded as progress

An ``async def`` loader is rejected with TypeError; nothing here runs an
event loop to await it.

The frame loop steps the task once per update, so a long load never blocks
drawing of the loading indicator.
"""

import inspect

from viewstack.core.errors import raise_logged


class LoadTask:
    """Single-use task with a completion flag and progress fraction."""

    def __init__(self, loader=None):
        self._loader = loader
        self._steps = None
        self._started = False
        self.done = False
        self.progress = 0.0

    def step(self) -> bool:
        """
        Advance the load by one step. Exceptions from the loader propagate.

        Returns:
            bool: True once loading has completed
        """
        if self.done:
            return True

        if not self._started:
            self._started = True
            result = self._loader() if self._loader is not None else None
            if inspect.iscoroutine(result):
                result.close()
                raise_logged(
                    TypeError,
                    f"load_assets {self._loader!r} is a coroutine function; "
                    "make it a generator that yields between steps instead",
                    category="loading"
                )
            if not inspect.isgenerator(result):
                return self._finish()
            self._steps = result

        try:
            value = next(self._steps)
        except StopIteration:
            return self._finish()

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            self.progress = max(self.progress, min(1.0, max(0.0, float(value))))
        return False

    def _finish(self) -> bool:
        self.done = True
        self.progress = 1.0
        self._steps = None
        return True
