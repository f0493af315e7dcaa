"""
Background driver for the K-means engine.

The driver owns the only path that mutates its engine: the stepping loop
runs on one thread, and manual step-back requests from a UI thread go through
the same lock. Pausing, resuming and the delay between automatic steps are
handled here; the engine knows nothing about them.
"""

from typing import Callable, Optional
import threading
import warnings

from ..algorithms.kmeans import ClusteringEngine
from ..utils.validation import check_delay_ms

UpdateCallback = Callable[[ClusteringEngine], None]


class SteppingDriver:
    """Steps a `ClusteringEngine` on request or on a timer.

    While paused, the loop only advances on `step_forward()`. While running,
    it advances every `delay_ms` milliseconds. The loop ends when a step
    reports no change, when `stop()` is called, or after `max_iter` steps.

    Args:
        engine: A loaded engine
        delay_ms: Delay between automatic steps
        paused: Start paused (waiting for `step_forward`) if True
        max_iter: Optional cap on the number of steps taken by the loop
        on_update: Called with the engine after every step and step-back
        verbose: Verbosity level (0=silent, 1=progress)
    """

    def __init__(self,
                 engine: ClusteringEngine,
                 delay_ms: float = 500.0,
                 paused: bool = True,
                 max_iter: Optional[int] = None,
                 on_update: Optional[UpdateCallback] = None,
                 verbose: int = 0):
        if not engine.is_loaded:
            raise RuntimeError("Engine must be loaded before it can be driven")

        self.engine = engine
        self.max_iter = max_iter
        self.on_update = on_update
        self.verbose = verbose

        self._delay_ms = check_delay_ms(delay_ms)
        self._paused = paused
        self._pending_steps = 0
        self._stopped = False
        self._finished = False
        self.n_steps_ = 0

        self._cond = threading.Condition()
        self._engine_lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    # Control surface

    def step_forward(self) -> bool:
        """Request one step. Returns False if the loop has already ended."""
        with self._cond:
            if self._finished or self._stopped:
                return False
            self._pending_steps += 1
            self._cond.notify_all()
        return True

    def step_back(self) -> bool:
        """Undo the latest step. Only allowed while paused or after the loop ended."""
        with self._cond:
            if not (self._paused or self._finished):
                return False
            with self._engine_lock:
                moved = self.engine.step_back()
            self._cond.notify_all()

        if moved:
            if self.verbose:
                print(f"Back to iteration {self.engine.iteration}")
            self._notify_update()
        return moved

    def pause(self) -> None:
        with self._cond:
            self._paused = True
            self._cond.notify_all()

    def resume(self) -> None:
        with self._cond:
            self._paused = False
            self._cond.notify_all()

    def set_speed(self, delay_ms: float) -> None:
        """Set the delay between automatic steps, in milliseconds."""
        delay_ms = check_delay_ms(delay_ms)
        with self._cond:
            self._delay_ms = delay_ms
            self._cond.notify_all()

    def stop(self) -> None:
        """End the loop after the current step, if any."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @property
    def finished(self) -> bool:
        return self._finished

    # Loop

    def _notify_update(self) -> None:
        if self.on_update is not None:
            self.on_update(self.engine)

    def _advance(self) -> bool:
        with self._engine_lock:
            changed = self.engine.step()
        with self._cond:
            self.n_steps_ += 1
            self._cond.notify_all()

        if self.verbose:
            print(f"Iteration {self.engine.iteration}")
        self._notify_update()
        return changed

    def _next_step_due(self) -> bool:
        """Block until a step should run. Returns False when stopped."""
        with self._cond:
            while True:
                self._cond.wait_for(
                    lambda: self._stopped or self._pending_steps > 0 or not self._paused
                )
                if self._stopped:
                    return False
                if self._pending_steps > 0:
                    self._pending_steps -= 1
                    return True

                # Running: wait out the delay unless paused, stopped or stepped manually
                interrupted = self._cond.wait_for(
                    lambda: self._stopped or self._paused or self._pending_steps > 0,
                    timeout=self._delay_ms / 1000.0
                )
                if not interrupted:
                    return True

    def run(self) -> int:
        """Run the stepping loop on the calling thread.

        Returns:
            Number of steps taken
        """
        self._notify_update()
        try:
            while self._next_step_due():
                if self.max_iter is not None and self.n_steps_ >= self.max_iter:
                    warnings.warn(f"Stopped after {self.max_iter} iterations without converging")
                    break
                if not self._advance():
                    if self.verbose:
                        print(f"Converged at iteration {self.engine.iteration}")
                    break
        finally:
            with self._cond:
                self._finished = True
                self._cond.notify_all()
        return self.n_steps_

    def start(self) -> threading.Thread:
        """Run the loop on a background daemon thread."""
        if self._thread is not None:
            raise RuntimeError("Driver already started")
        self._thread = threading.Thread(target=self.run, name='kstep-driver', daemon=True)
        self._thread.start()
        return self._thread

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the background loop. Returns True if it has ended."""
        if self._thread is None:
            return self._finished
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def wait_for_iteration(self, iteration: int, timeout: Optional[float] = None) -> bool:
        """Block until the engine reaches `iteration` or the loop ends."""
        with self._cond:
            return self._cond.wait_for(
                lambda: self.engine.iteration >= iteration or self._finished,
                timeout=timeout
            )
