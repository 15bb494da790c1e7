"""
Event-driven streams and the pump() helper relaying one stream into another.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections import defaultdict
from typing import IO, Any, Callable, Protocol, runtime_checkable

# Constants ------------------------------------------------------------------------------------------------------------
DEFAULT_CHUNK_SIZE = 64 * 1024  # 64KB


# Classes --------------------------------------------------------------------------------------------------------------

class EventEmitter:
    """
    Minimal synchronous event emitter.

    Listeners run in registration order, on the caller's thread, inside emit().

    Example:
        >>> em = EventEmitter()
        >>> em.on("data", lambda chunk: print(chunk))  # doctest: +ELLIPSIS
        <...EventEmitter object at ...>
        >>> em.emit("data", b"abc")
        b'abc'
        True
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[str, list[Callable[..., Any]]] = defaultdict(list)

    def on(self, event: str, listener: Callable[..., Any]) -> "EventEmitter":
        self._listeners[event].append(listener)
        return self

    add_listener = on

    def remove_listener(self, event: str, listener: Callable[..., Any]) -> "EventEmitter":
        if listener in self._listeners.get(event, ()):
            self._listeners[event].remove(listener)
        return self

    def listeners(self, event: str) -> list[Callable[..., Any]]:
        return list(self._listeners.get(event, ()))

    def emit(self, event: str, *args: Any) -> bool:
        """Call every listener of event with args; return True if there were any."""
        listeners = self.listeners(event)
        for listener in listeners:
            listener(*args)
        return bool(listeners)


@runtime_checkable
class Readable(Protocol):
    """Source of 'data', 'end', 'close' and 'error' events."""

    def on(self, event: str, listener: Callable[..., Any]) -> Any: ...

    def pause(self) -> Any: ...

    def resume(self) -> Any: ...

    def destroy(self) -> Any: ...


@runtime_checkable
class Writable(Protocol):
    """Sink emitting 'drain' and 'error' events; write() returns False when full."""

    def on(self, event: str, listener: Callable[..., Any]) -> Any: ...

    def write(self, chunk: Any) -> bool: ...

    def end(self) -> Any: ...


class ReadableStream(EventEmitter):
    """
    Readable stream over a file-like object.

    Reads are driven by flow(): chunks are emitted as 'data' until the stream is paused,
    destroyed or exhausted. Exhaustion emits 'end' then 'close'; a failing read emits 'error'.

    Args:
        file: Object with a read(size) method.
        chunk_size: Bytes (or characters) per 'data' event.
    """

    def __init__(self, file: IO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        super().__init__()
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.file = file
        self.chunk_size = chunk_size
        self.paused = False
        self.ended = False
        self.destroyed = False

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False
        self.flow()

    def destroy(self) -> None:
        """Stop reading for good and close the file; emits nothing."""
        self.destroyed = True
        self.file.close()

    def flow(self) -> None:
        while not (self.paused or self.ended or self.destroyed):
            try:
                chunk = self.file.read(self.chunk_size)
            except Exception as exc:
                self.destroyed = True
                self.emit("error", exc)
                return
            if not chunk:
                self.ended = True
                self.emit("end")
                self.emit("close")
                return
            self.emit("data", chunk)


class WritableStream(EventEmitter):
    """
    Buffered writable stream over a file-like object.

    write() buffers chunks until the buffer reaches high_water_mark. Then, with auto_flush,
    the buffer is written out at once; without it, write() returns False and the writer is
    expected to wait for 'drain', emitted by the next flush().

    Args:
        file: Object with a write(chunk) method.
        high_water_mark: Buffered size at which the buffer is flushed or the writer told to wait.
        auto_flush: Flush synchronously when full instead of signalling backpressure.
    """

    def __init__(self, file: IO, high_water_mark: int = DEFAULT_CHUNK_SIZE, auto_flush: bool = True) -> None:
        super().__init__()
        self.file = file
        self.high_water_mark = high_water_mark
        self.auto_flush = auto_flush
        self.buffered = 0
        self.ended = False
        self._buffer: list[Any] = []
        self._needs_drain = False

    def write(self, chunk: Any) -> bool:
        if self.ended:
            self.emit("error", ValueError("write after end"))
            return False
        self._buffer.append(chunk)
        self.buffered += len(chunk)
        if self.buffered < self.high_water_mark:
            return True
        if self.auto_flush:
            self.flush()
            return True
        self._needs_drain = True
        return False

    def flush(self) -> None:
        try:
            for chunk in self._buffer:
                self.file.write(chunk)
        except Exception as exc:
            self.emit("error", exc)
            return
        self._buffer.clear()
        self.buffered = 0
        if self._needs_drain:
            self._needs_drain = False
            self.emit("drain")

    def end(self) -> None:
        if self.ended:
            return
        self.ended = True
        self.flush()
        self.emit("finish")


# Methods --------------------------------------------------------------------------------------------------------------

def pump(source: Readable, sink: Writable, callback: Callable[..., Any] | None = None) -> None:
    """
    Relay data events from a readable source into a writable sink.

    Honors backpressure: the source is paused whenever sink.write() returns False and
    resumed on the sink's 'drain'. The sink is ended when the source ends.

    The callback runs at most once: with the error on the first 'error' from either side,
    or with no argument when the source closes cleanly. Errors are not retried.

    Args:
        source: Emits 'data', 'end', 'close', 'error'; supports pause(), resume(), destroy().
        sink: Emits 'drain', 'error'; supports write() and end().
        callback: Completion callback, callback() or callback(error).

    Example:
        >>> with open("in.bin", "rb") as src, open("out.bin", "wb") as dst:
        ...     reader, writer = ReadableStream(src), WritableStream(dst)
        ...     pump(reader, writer, lambda err=None: print("done", err))
        ...     reader.flow()
        done None
    """
    called = False

    def call(*args: Any) -> None:
        nonlocal called
        if callback is not None and not called:
            called = True
            callback(*args)

    def on_data(chunk: Any) -> None:
        if sink.write(chunk) is False:
            source.pause()

    def on_source_error(err: BaseException) -> None:
        sink.end()
        call(err)

    def on_sink_error(err: BaseException) -> None:
        source.destroy()
        call(err)

    source.on("data", on_data)
    sink.on("drain", source.resume)
    source.on("end", sink.end)
    source.on("close", call)
    source.on("error", on_source_error)
    sink.on("error", on_sink_error)
