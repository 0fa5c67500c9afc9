"""
Application bootstrap on the main thread.

Qt requires the QApplication, its widgets and the event loop to live on the
main thread. MainThreadDispatcher is a one-shot rendezvous: other threads
submit work and the main thread runs it, either inline (when the caller is
already the main thread) or from serve().

Usage:
    def make_window():
        window = MainWindow()
        window.setWindowTitle("Main")
        return window

    exit_code = with_main_window(make_window, name="viewer")
"""

import logging
import queue
import sys
import threading
from concurrent.futures import Future, TimeoutError as FutureTimeoutError
from typing import Any, Callable, List, Optional, Union

from PyQt6.QtWidgets import QApplication, QWidget

from pyqt_toolkit.exceptions import MainThreadError
from pyqt_toolkit.protocols import get_toolkit_config
from .lifecycle import finalize

logger = logging.getLogger(__name__)

# --- Module-level constants ---
SERVE_POLL_SECONDS = 0.05   # How often serve() checks for stop() between tasks


def is_main_thread() -> bool:
    return threading.current_thread() is threading.main_thread()


class MainThreadDispatcher:
    """
    Hands work from any thread to the main thread.

    Submissions made on the main thread run inline. Submissions from other
    threads are queued until the main thread calls serve().

    Usage:
        dispatcher = get_main_thread_dispatcher()

        # worker thread
        result = dispatcher.call(build_ui, config)

        # main thread
        dispatcher.serve()   # returns after dispatcher.stop()
    """

    def __init__(self):
        self._queue: "queue.Queue[tuple]" = queue.Queue()
        self._serving = threading.Event()
        self._stopped = threading.Event()

    @property
    def serving(self) -> bool:
        return self._serving.is_set()

    def submit(self, function: Callable[..., Any], *args, **kwargs) -> Future:
        """Schedule function on the main thread and return its Future."""
        future: Future = Future()
        if is_main_thread():
            _resolve(future, function, args, kwargs)
        else:
            self._queue.put((future, function, args, kwargs))
            logger.debug(f"Queued {getattr(function, '__name__', function)} for the main thread")
        return future

    def call(self, function: Callable[..., Any], *args, timeout: Optional[float] = None, **kwargs) -> Any:
        """
        Run function on the main thread and wait for its result.

        Exceptions raised by function propagate to the caller.

        Raises:
            MainThreadError: If the main thread does not answer within timeout
                (ToolkitConfig.main_thread_timeout when not given)
        """
        if timeout is None:
            timeout = get_toolkit_config().main_thread_timeout
        future = self.submit(function, *args, **kwargs)
        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError as e:
            future.cancel()
            raise MainThreadError(
                f"Main thread did not run {getattr(function, '__name__', function)} within {timeout}s"
            ) from e

    def serve(self) -> None:
        """
        Run queued work on the main thread until stop() is called.

        Raises:
            MainThreadError: If called from another thread
        """
        if not is_main_thread():
            raise MainThreadError("serve() must be called from the main thread")
        self._serving.set()
        logger.debug("Main thread dispatcher serving")
        try:
            while not self._stopped.is_set():
                try:
                    task = self._queue.get(timeout=SERVE_POLL_SECONDS)
                except queue.Empty:
                    continue
                _resolve(*task)
        finally:
            self._serving.clear()
            self._stopped.clear()
            logger.debug("Main thread dispatcher stopped")

    def stop(self) -> None:
        """
        Make serve() return after the task it is running. Safe from any thread.

        A stop requested before serve() is entered makes the next serve() return at once.
        """
        self._stopped.set()


def _resolve(future: Future, function: Callable, args: tuple, kwargs: dict) -> None:
    """Run function and store its outcome in future."""
    if not future.set_running_or_notify_cancel():
        return
    try:
        future.set_result(function(*args, **kwargs))
    except BaseException as e:
        future.set_exception(e)
        # SystemExit and KeyboardInterrupt still stop the serving thread
        if not isinstance(e, Exception):
            raise


_dispatcher: Optional[MainThreadDispatcher] = None
_dispatcher_lock = threading.Lock()


def get_main_thread_dispatcher() -> MainThreadDispatcher:
    """Process-wide dispatcher used by with_main_window()."""
    global _dispatcher
    with _dispatcher_lock:
        if _dispatcher is None:
            _dispatcher = MainThreadDispatcher()
        return _dispatcher


def ensure_qapplication(name: Optional[str] = None, argv: Optional[List[str]] = None) -> QApplication:
    """
    Return the running QApplication, creating one if needed.

    Args:
        name: Application name for a new instance (ToolkitConfig.application_name by default)
        argv: Arguments for a new instance (sys.argv by default)
    """
    app = QApplication.instance()
    if app is not None:
        return app

    config = get_toolkit_config()
    app = QApplication(list(argv) if argv is not None else list(sys.argv))
    app.setApplicationName(name or config.application_name)
    app.setQuitOnLastWindowClosed(config.quit_on_last_window_closed)
    logger.info(f"Created QApplication '{app.applicationName()}'")
    return app


def _start_main_window(window_factory: Callable[[], QWidget], name: Optional[str],
                       on_error: Optional[Callable[[BaseException], Any]]) -> int:
    app = ensure_qapplication(name)
    window = None
    try:
        window = window_factory()
        window.show()
        logger.debug(f"Entering event loop for {type(window).__name__}")
        return app.exec()
    except Exception as e:
        if on_error is None:
            raise
        logger.exception("Main window failed", exc_info=e)
        on_error(e)
        return 1
    finally:
        if window is not None:
            finalize(window)


def with_main_window(
    window_factory: Callable[[], QWidget],
    name: Optional[str] = None,
    blocking: bool = True,
    main_thread: bool = True,
    on_error: Optional[Callable[[BaseException], Any]] = None,
) -> Union[int, Future]:
    """
    Create a main window, show it and run the event loop.

    The window is created by window_factory on the thread that runs the
    event loop and finalized after the loop exits.

    Args:
        window_factory: Callable returning the window to show
        name: Application name for a newly created QApplication
        blocking: Wait for the event loop to finish. When False a Future is
            returned, resolved with the exit code. On the main thread (or with
            main_thread=False) the event loop still runs before returning, so
            the Future is already done.
        main_thread: Hand startup to the main thread when called from another
            thread (the main thread must be in MainThreadDispatcher.serve())
        on_error: Receives exceptions raised during startup. Without it they
            propagate to the caller.

    Returns:
        The event loop's exit code, or a Future of it when not blocking
    """
    def start() -> int:
        return _start_main_window(window_factory, name, on_error)

    if main_thread and not is_main_thread():
        dispatcher = get_main_thread_dispatcher()
        if blocking:
            return dispatcher.call(start)
        return dispatcher.submit(start)

    if blocking:
        return start()
    future: Future = Future()
    _resolve(future, start, (), {})
    return future
