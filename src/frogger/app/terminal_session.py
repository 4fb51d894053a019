from __future__ import annotations

import logging
from types import TracebackType

from frogger.app.exceptions import TerminalError
from frogger.app.ports import Surface

logger = logging.getLogger(__name__)


class TerminalSession:
    """
    Puts the surface into game display mode for the lifetime of a `with` block
    and restores it (screen cleared, cursor visible) however the block exits.

    Failing to enter display mode is fatal and propagates TerminalError.
    Failing to restore is only logged, so an exception raised inside the block
    is the one the caller sees.
    """

    def __init__(self, surface: Surface) -> None:
        self._surface = surface

    def __enter__(self) -> Surface:
        self._surface.clear()
        self._surface.hide_cursor()
        self._surface.refresh()
        return self._surface

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        for name, command in (
            ("clear", self._surface.clear),
            ("show cursor", self._surface.show_cursor),
            ("refresh", self._surface.refresh),
        ):
            try:
                command()
            except TerminalError as e:
                logger.warning("terminal restore failed (%s): %s", name, e)
