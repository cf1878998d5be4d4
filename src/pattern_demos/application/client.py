"""Bridge client."""
import sys

from pattern_demos.domain.bridge.figure import Figure


class Client:
    """
    Depends only on the Figure abstraction, so any figure configured with any
    color and material can be handed to it.
    """

    def run(self, figure: Figure) -> None:
        """Write the figure's text to stdout verbatim, without adding a newline."""
        sys.stdout.write(figure.operation())
