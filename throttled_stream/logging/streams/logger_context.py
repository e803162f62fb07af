from .logger_stream import LoggerStream


class LoggerContext:
    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        nested: bool = False,
    ) -> None:
        self.name = name
        self.template = template
        self.stream = LoggerStream(
            name=name,
            template=template,
        )
        self.nested = nested

    async def __aenter__(self):
        return self.stream

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.nested is False:
            await self.stream.close()
