"""Interactive read-dispatch loop for recipebook."""

from .dispatcher import CommandDispatcher
from .logger import get_logger
from .parser import parse_command

logger = get_logger("console")


class InteractiveConsole:
    """Reads commands one line at a time until exit or end of input."""

    def __init__(self, dispatcher: CommandDispatcher):
        self.dispatcher = dispatcher
        self.ui = dispatcher.ui

    def run(self) -> None:
        """Main console loop."""
        self.ui.show_welcome(len(self.dispatcher.recipes))
        logger.info("Interactive session started")

        while True:
            try:
                user_input = self.ui.read_line()

                # Handle empty input
                if not user_input:
                    continue

                if self.dispatcher.execute(parse_command(user_input)):
                    break

            except EOFError:
                logger.info("End of input")
                self.ui.show_exit()
                break
            except KeyboardInterrupt:
                self.ui.console.print("\n[yellow]Interrupted[/yellow]")
                self.ui.show_exit()
                break

        logger.info("Interactive session ended")
