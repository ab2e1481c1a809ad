"""
Logging handler that writes through a LogHistory.

Routing log records through the ledger instead of writing to the stream
directly keeps log lines intact while interactive sessions redraw above or
between them:

    registry = StreamRegistry()
    ledger = LogHistory(sys.stderr, registry)
    install_handler(ledger, level="debug")

    logging.getLogger("app").info("starting")  # plain ledger write
"""

from __future__ import annotations

import logging

from ..constants import LedgerConstants
from ..history import LogHistory
from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants


class LedgerFormatter(logging.Formatter):
    """
    Single-line formatter with optional level coloring.

    Produces "[12:00:01] [I] message". With colors enabled the level marker
    and message use the level's color.
    """

    def __init__(self, config: LogConfig | None = None) -> None:
        self._config = config or LogConfig()
        super().__init__(LogConstants.DEFAULT_FORMAT, datefmt=self._config.datefmt)

    @property
    def config(self) -> LogConfig:
        return self._config

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self._config.colors:
            return text
        return ColorManager.colorize(text, record.levelno)


class LedgerHandler(logging.Handler):
    """
    Handler emitting formatted records through LogHistory.write().

    Formatting errors are reported through logging's handleError() like any
    other handler. Errors raised by the underlying stream propagate to the
    caller unchanged when `raise_errors` is set (the default follows
    logging.raiseExceptions) and go to handleError() otherwise.
    """

    def __init__(
        self,
        ledger: LogHistory,
        config: LogConfig | None = None,
        raise_errors: bool | None = None,
    ) -> None:
        """
        Initialize the handler.

        Args:
            ledger: Ledger of the stream to write to
            config: Level, colors and timestamp format (default: LogConfig())
            raise_errors: Propagate stream write errors (default:
                          logging.raiseExceptions)
        """
        config = config or LogConfig()
        if config.level is False:
            super().__init__(logging.CRITICAL + 1)
            self._disabled = True
        else:
            super().__init__(config.level)
            self._disabled = False

        self._ledger = ledger
        self._raise_errors = (
            logging.raiseExceptions if raise_errors is None else raise_errors
        )
        self.setFormatter(LedgerFormatter(config))

    @property
    def ledger(self) -> LogHistory:
        return self._ledger

    def handle(self, record: logging.LogRecord) -> bool | logging.LogRecord:
        # No handler lock: the stream handle's lock serializes writes, and a
        # render callback holding it may log from inside a rewrite.
        rv = self.filter(record)
        if isinstance(rv, logging.LogRecord):
            record = rv
        if rv:
            self.emit(record)
        return rv

    def emit(self, record: logging.LogRecord) -> None:
        if self._disabled:
            return
        try:
            msg = self.format(record)
        except Exception:
            self.handleError(record)
            return
        try:
            self._ledger.write(msg + LedgerConstants.EOL)
        except Exception:
            if self._raise_errors:
                raise
            self.handleError(record)


def install_handler(
    ledger: LogHistory,
    level: str | int | bool = "info",
    colors: bool = True,
    logger: logging.Logger | None = None,
    clear_handlers: bool = True,
    config: LogConfig | None = None,
) -> LedgerHandler:
    """
    Route a logger (the root logger by default) through a ledger.

    Unless `config` is given, the level honours TERMLEDGER_LOG_LEVEL and
    the DEBUG namespace list (matched against the logger's name).

    Args:
        ledger: Ledger of the stream to write to
        level: Log level for both the handler and the logger
        colors: Enable colored output
        logger: Logger to configure (default: root logger)
        clear_handlers: Remove the logger's existing handlers first
        config: Ready-made configuration, e.g. from LogConfig.from_config();
                replaces `level` and `colors`

    Returns:
        The installed handler

    Raises:
        InvalidLogLevelError: If `level` is not a valid level
    """
    target = logger or logging.getLogger()
    if config is None:
        namespace = None if logger is None else logger.name
        config = LogConfig.from_params(level, colors=colors, namespace=namespace)
    handler = LedgerHandler(ledger, config)

    if clear_handlers:
        target.handlers.clear()
    target.addHandler(handler)
    if config.level is not False:
        target.setLevel(config.level)
    return handler
