import asyncio
import datetime
import io
import sys
import threading
from typing import (
    Callable,
    Dict,
    TypeVar,
)

import msgspec

from throttled_stream.logging.config import LoggingConfig, StreamType
from throttled_stream.logging.models import Entry, Log

T = TypeVar('T', bound=Entry)


DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"


class LoggerStream:
    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template

        self._init_lock: asyncio.Lock | None = None
        self._streams: Dict[StreamType, io.TextIOBase] = {}

        self._config = LoggingConfig()
        self._initialized: bool = False

    @property
    def name(self):
        return self._name

    @property
    def initialized(self):
        return self._initialized

    async def initialize(self):
        if self._init_lock is None:
            self._init_lock = asyncio.Lock()

        async with self._init_lock:

            if self._initialized:
                return

            # Bound at initialize time so stdout/stderr redirection
            # (pytest capture, contextlib.redirect_stdout) is honored.
            self._streams = {
                StreamType.STDOUT: sys.stdout,
                StreamType.STDERR: sys.stderr,
            }

            self._initialized = True

    async def close(self):
        if self._initialized is False:
            return

        for stream in self._streams.values():
            if not stream.closed:
                stream.flush()

        self._initialized = False

    async def log(
        self,
        entry: T | Log[T],
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if template is None:
            template = self._default_template

        await self._log(
            entry,
            template=template,
            filter=filter,
        )

    async def _log(
        self,
        entry_or_log: T | Log[T],
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        entry: Entry = None
        if isinstance(entry_or_log, Log):
            entry = entry_or_log.entry

        else:
            entry = entry_or_log

        # Level and filter checks come first so disabled entries never
        # touch the output streams.
        if self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        if self._initialized is False:
            await self.initialize()

        if isinstance(entry_or_log, Log):
            log = entry_or_log

        else:
            log_file, line_number, function_name = self._find_caller()
            log = Log(
                entry=entry,
                filename=log_file,
                function_name=function_name,
                line_number=line_number,
                thread_id=threading.get_native_id(),
                timestamp=datetime.datetime.now(datetime.UTC).isoformat(),
            )

        stream = self._streams[self._config.output]
        if stream.closed:
            return

        if self._config.format == 'json':
            line = msgspec.json.encode(log).decode() + "\n"

        else:
            if template is None:
                template = DEFAULT_TEMPLATE

            line = entry.to_template(
                template,
                context={
                    "filename": log.filename,
                    "function_name": log.function_name,
                    "line_number": log.line_number,
                    "thread_id": log.thread_id,
                    "timestamp": log.timestamp,
                },
            ) + "\n"

        # Synchronous write. Logging must not add a suspension point to
        # gate polls or sequence requests.
        self._write(stream, line)

    def _write(
        self,
        stream: io.TextIOBase,
        line: str,
    ):
        stream.write(line)
        stream.flush()

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(3)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
