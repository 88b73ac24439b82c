"""Full-screen terminal UI for ogit.

Renders the session with prompt_toolkit and feeds key presses and text
lines to the Controller, one turn at a time.
"""

import logging
from typing import Any

from prompt_toolkit import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.filters import Condition
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import (
    ConditionalContainer,
    Dimension,
    HSplit,
    VSplit,
    Window,
)
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.layout.layout import Layout
from prompt_toolkit.layout.processors import ConditionalProcessor, PasswordProcessor
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from ogit.core.driver import Controller
from ogit.core.engine import LoopControl
from ogit.core.presentation import (
    OgitColors,
    ViewModel,
    is_secret_input,
    panel_text,
    prompt_for,
    render,
)
from ogit.domain.config import OgitConfig

logger = logging.getLogger(__name__)

# Rows taken by the separator and the input line
_CHROME_ROWS = 2
_DEFAULT_ROWS = 24


class OgitUI:
    """Interactive git controller UI using prompt_toolkit."""

    def __init__(
        self,
        controller: Controller,
        config: OgitConfig,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        """Initialize the UI.

        Args:
            controller: Controller owning the session.
            config: ogit configuration (display and remote settings).
            input: prompt_toolkit input, the terminal when None.
            output: prompt_toolkit output, the terminal when None.
        """
        self.controller = controller
        self.config = config
        self.view: ViewModel = render(controller.session, 0, _DEFAULT_ROWS)
        self._build_ui(input, output)

    def _build_ui(self, input: Input | None, output: Output | None) -> None:
        """Build the prompt_toolkit UI layout."""
        self.input_buffer = Buffer(multiline=False)

        @Condition
        def collecting() -> bool:
            return self.controller.session.mode.collects_text

        @Condition
        def secret() -> bool:
            return is_secret_input(self.controller.session.mode)

        self.collecting = collecting

        base_window = Window(
            content=FormattedTextControl(self._get_base_text, focusable=False),
            wrap_lines=False,
        )
        panel_window = Window(
            content=FormattedTextControl(self._get_panel_text, focusable=False),
            height=self._panel_height,
            wrap_lines=True,
        )
        self.input_window = Window(
            content=BufferControl(
                buffer=self.input_buffer,
                input_processors=[ConditionalProcessor(PasswordProcessor(), secret)],
            ),
            height=Dimension.exact(1),
        )

        main_container = HSplit([
            base_window,
            Window(height=Dimension.exact(1), char="─", style="class:separator"),
            panel_window,
            ConditionalContainer(
                VSplit([
                    Window(
                        content=FormattedTextControl(self._get_prompt_text),
                        dont_extend_width=True,
                    ),
                    self.input_window,
                ]),
                filter=collecting,
            ),
        ])

        style = Style.from_dict(OgitColors.get_prompt_toolkit_style())

        self.app: Application[Any] = Application(
            layout=Layout(main_container),
            key_bindings=self._create_key_bindings(),
            style=style,
            full_screen=True,
            mouse_support=False,
            input=input,
            output=output,
        )

    def _create_key_bindings(self) -> KeyBindings:
        """Create key bindings for the UI.

        Returns:
            KeyBindings object.
        """
        kb = KeyBindings()
        keys_active = ~self.collecting

        @kb.add(Keys.Any, filter=keys_active)
        @kb.add("up", filter=keys_active)
        @kb.add("down", filter=keys_active)
        def key_press(event: KeyPressEvent) -> None:
            key = event.key_sequence[0].key
            name = key.value if isinstance(key, Keys) else key
            self._apply(self.controller.handle_key(name, self.view.top_line, self.view.height))

        @kb.add("enter", filter=self.collecting)
        def submit(event: KeyPressEvent) -> None:
            text = self.input_buffer.text
            self.input_buffer.reset()
            self._apply(self.controller.submit_text(text))

        @kb.add("escape", filter=self.collecting, eager=True)
        def cancel(event: KeyPressEvent) -> None:
            self.input_buffer.reset()
            self._apply(self.controller.cancel_input())

        @kb.add("c-c")
        def interrupt(event: KeyPressEvent) -> None:
            logger.debug("Interrupted, leaving the UI")
            self.app.exit()

        return kb

    def _apply(self, control: LoopControl) -> None:
        """Update the view after a turn, or stop on TERMINATE."""
        if control == LoopControl.TERMINATE:
            self.app.exit()
            return
        self.view = render(self.controller.session, self.view.top_line, self._base_height())
        if self.controller.session.mode.collects_text:
            self.app.layout.focus(self.input_window)
        self.app.invalidate()

    def _rows(self) -> int:
        try:
            return self.app.output.get_size().rows
        except OSError:
            return _DEFAULT_ROWS

    def _panel_lines(self) -> int:
        text = "".join(fragment[1] for fragment in self._get_panel_text())
        return text.count("\n")

    def _panel_height(self) -> Dimension:
        rows = self._panel_lines()
        return Dimension(min=0, max=max(0, self._rows() // 2), preferred=rows)

    def _base_height(self) -> int:
        panel = min(self._panel_lines(), self._rows() // 2)
        return max(1, self._rows() - panel - _CHROME_ROWS)

    def _get_base_text(self) -> list[tuple[str, str]]:
        return self.view.fragments()

    def _get_panel_text(self) -> list[tuple[str, str]]:
        return panel_text(
            self.controller.session.mode,
            remote_name=self.config.remote.name,
            default_branch=self.config.remote.default_branch,
            syntax_highlighting=self.config.display.syntax_highlighting,
        )

    def _get_prompt_text(self) -> list[tuple[str, str]]:
        return [("class:prompt", prompt_for(self.controller.session.mode))]

    def run(self, mute_logging: bool = True) -> None:
        """Run the UI until the user quits.

        Logging to the terminal would corrupt the full-screen display, so it
        is disabled while the UI runs unless logs go to a file.

        Args:
            mute_logging: Disable logging for the duration of the run.
        """
        self.view = render(self.controller.session, 0, self._base_height())
        if mute_logging:
            logging.disable(logging.CRITICAL)
        try:
            self.app.run()
        finally:
            if mute_logging:
                logging.disable(logging.NOTSET)
