"""Interactive editor event loop.

This module provides the EditorApp that ties together:
- KeyDecoder: raw bytes to key events
- ScreenRenderer: full-screen frames written in one call
- EditorState: cursor, geometry and document for the session
"""

from __future__ import annotations

import logging
import signal
from typing import Optional

from rawedit.cli.core.geometry import GeometryResolver
from rawedit.cli.core.input import ARROW_KEYS, Key, KeyDecoder, KeyEvent
from rawedit.cli.core.terminal import TerminalDevice, TerminalModeController
from rawedit.core.config import EditorConfig
from rawedit.core.constants import CLEAR_SCREEN, CURSOR_HOME
from rawedit.core.document import Document
from rawedit.core.state import EditorState
from rawedit.render.screen import ScreenRenderer

logger = logging.getLogger(__name__)


class EditorApp:
    """Render, read, dispatch until the user quits.

    Keyboard Controls:
        Ctrl-Q: Quit
        Arrow keys: Move cursor one cell
        Home / End: Start / end of the row
        Page Up / Page Down: Move a screen height up / down
    """

    def __init__(
        self,
        state: EditorState,
        device: TerminalDevice,
        terminal: TerminalModeController,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.state = state
        self.device = device
        self.terminal = terminal
        self.config = config or EditorConfig()

        self.input = KeyDecoder(device)
        self.renderer = ScreenRenderer(self.config)
        self.running = False
        self.exit_code = 0

    def run(self) -> int:
        """Main loop. Returns the process exit status."""
        self.running = True
        while self.running:
            self.renderer.refresh(self.state, self.device)
            self.dispatch(self.input.next_key())
        return self.exit_code

    def dispatch(self, event: KeyEvent) -> None:
        """Apply one key event to the session."""
        if event.code == self.config.quit_key:
            self.quit()
            return

        key = event.key
        if key is Key.HOME:
            self.state.cursor.x = 0
        elif key is Key.END:
            self.state.cursor.x = self.state.screen.cols - 1
        elif key in (Key.PAGE_UP, Key.PAGE_DOWN):
            step = Key.UP if key is Key.PAGE_UP else Key.DOWN
            for _ in range(self.state.screen.rows):
                self.move_cursor(step)
        elif key in ARROW_KEYS:
            self.move_cursor(key)
        else:
            logger.debug("ignored key %r", event.raw)

    def move_cursor(self, key: Key) -> None:
        """Move one cell, clamped to the screen."""
        cursor = self.state.cursor
        max_x = self.state.screen.cols
        max_y = self.state.screen.rows
        if not self.config.inclusive_clamp:
            max_x -= 1
            max_y -= 1

        if key is Key.LEFT and cursor.x > 0:
            cursor.x -= 1
        elif key is Key.RIGHT and cursor.x < max_x:
            cursor.x += 1
        elif key is Key.UP and cursor.y > 0:
            cursor.y -= 1
        elif key is Key.DOWN and cursor.y < max_y:
            cursor.y += 1

    def quit(self) -> None:
        """Clear the screen, restore the terminal and stop the loop."""
        self.device.write(CLEAR_SCREEN + CURSOR_HOME)
        self.terminal.leave()
        self.running = False
        self.exit_code = 0
        logger.info("quit requested")


# Signals that should still restore the terminal on the way out
EXIT_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


def _exit_on_signal(signum: int, frame: object) -> None:
    logger.info("received signal %d, exiting", signum)
    raise SystemExit(1)


def run_editor(
    config: Optional[EditorConfig] = None,
    document: Optional[Document] = None,
    device: Optional[TerminalDevice] = None,
) -> int:
    """Set up the terminal, discover its size and run the editor.

    Raises TerminalError or GeometryError on fatal failures; the terminal
    mode is restored before either propagates.
    """
    config = config or EditorConfig()
    device = device or TerminalDevice()
    document = document if document is not None else Document()
    terminal = TerminalModeController(device.fd_in, timeout_ds=config.read_timeout_ds)

    previous = {signum: signal.signal(signum, _exit_on_signal) for signum in EXIT_SIGNALS}
    try:
        with terminal:
            resolver = GeometryResolver(
                device,
                buffer_size=config.probe_buffer_size,
                separator=config.cursor_report_separator,
            )
            state = EditorState(screen=resolver.resolve(), document=document)
            logger.info("editor started at %dx%d", state.screen.rows, state.screen.cols)
            return EditorApp(state, device, terminal, config).run()
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
