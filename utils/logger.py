from rich.console import Console

LOG_PREFIX = "collection-plugin-maimemo"


class PluginLogger:
    """Prefixed log lines on a rich Console; the only thing the collector needs is `log(message)`."""

    def __init__(self, console: Console | None = None, prefix: str = LOG_PREFIX):
        self.console = console or Console(stderr=True)
        self.prefix = prefix

    def log(self, message: str) -> None:
        # markup off: user words like "[sic]" must print as typed
        self.console.log(f"[{self.prefix}] {message}", markup=False, highlight=False)
