"""Build a ready-to-use dispatcher from ``SinklineSettings``."""

from __future__ import annotations

import logging

from sinkline.config import SinklineSettings, settings as default_settings
from sinkline.core.dispatcher import Dispatcher
from sinkline.sinks import console_sink, file_sink

logger = logging.getLogger(__name__)

CONSOLE_SINK_NAME = "console"
FILE_SINK_NAME = "file"


def from_settings(config: SinklineSettings | None = None) -> Dispatcher:
    """Return a dispatcher with a console sink and, if configured, a file sink.

    The caller owns the result and must close it (``with`` or
    ``close_all``).
    """
    config = config or default_settings
    flags = config.render_flags()
    options = config.sink_options()

    dispatcher = Dispatcher()
    dispatcher.add_sink(
        console_sink(
            CONSOLE_SINK_NAME,
            config.default_level,
            flags=flags,
            styled=config.styled_console,
            options=options,
        )
    )

    if config.log_file is not None:
        dispatcher.add_sink(
            file_sink(
                FILE_SINK_NAME,
                config.log_file,
                config.default_level,
                replace=config.replace_log_file,
                flags=flags,
                buffer_size=config.file_buffer_size,
                options=options,
            )
        )

    logger.debug("Dispatcher built with sinks: %s", dispatcher.list_sink_names())
    return dispatcher
