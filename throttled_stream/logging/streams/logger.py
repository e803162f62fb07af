from __future__ import annotations

import asyncio
import datetime
import sys
import threading
from typing import (
    Callable,
    Dict,
    TypeVar,
)

from throttled_stream.logging.config import LoggingConfig
from throttled_stream.logging.models import Entry, Log

from .logger_context import LoggerContext

T = TypeVar('T', bound=Entry)


class Logger:
    def __init__(self) -> None:
        self._contexts: Dict[str, LoggerContext] = {}
        self._config = LoggingConfig()

    def __getitem__(self, name: str):

        if self._contexts.get(name) is None:
            self._contexts[name] = LoggerContext(name=name)

        return self._contexts[name]

    def context(
        self,
        name: str | None = None,
        template: str | None = None,
        nested: bool = False,
    ):
        if name is None:
            name = 'default'

        if self._contexts.get(name) is None:

            self._contexts[name] = LoggerContext(
                name=name,
                template=template,
                nested=nested,
            )

        else:
            self._contexts[name].template = template if template else self._contexts[name].template
            self._contexts[name].nested = nested

        return self._contexts[name]

    async def log(
        self,
        entry: T,
        name: str | None = None,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
        stacklevel: int = 1,
    ):
        if name is None:
            name = 'default'

        if self._config.enabled(name, entry.level) is False:
            return

        # stacklevel counts frames above this one, so helpers that log on
        # behalf of their caller pass 2.
        frame = sys._getframe(stacklevel)
        code = frame.f_code

        async with self.context(
            name=name,
            nested=True,
        ) as ctx:
            await ctx.log(
                Log(
                    entry=entry,
                    filename=code.co_filename,
                    function_name=code.co_name,
                    line_number=frame.f_lineno,
                    thread_id=threading.get_native_id(),
                    timestamp=datetime.datetime.now(datetime.UTC).isoformat()
                ),
                template=template,
                filter=filter,
            )

    async def close(self):
        if len(self._contexts) > 0:
            await asyncio.gather(*[
                context.stream.close() for context in self._contexts.values()
            ])
