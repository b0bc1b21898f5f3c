import os
from contextlib import contextmanager

import progressbar  # type: ignore


class _NoBar:
    update = staticmethod(lambda _: None)


@contextmanager
def maybeProgressBar(show, sourceCount, prefix="Sources: "):
    """
    A context manager to maybe show a progress bar over the input sources.

    The bar is only drawn if C{show} is true and standard error is a
    terminal, so that it never ends up in redirected diagnostic output.

    @param show: If C{True}, yield a progress bar, else an object with an
        C{update} method that does nothing.
    @param sourceCount: The C{int} number of input sources to be counted.
    @param prefix: A C{str} prefix, to appear at the start of the bar.
    """
    if show and os.isatty(2):
        widgets = [
            progressbar.SimpleProgress(format="%(value_s)s/%(max_value_s)s"),
            " ",
            progressbar.Bar(marker="#"),
            " ",
            progressbar.Timer(format="Elapsed: %(elapsed)s"),
        ]
        with progressbar.ProgressBar(
            max_value=sourceCount, widgets=widgets, prefix=prefix
        ) as bar:
            yield bar
    else:
        yield _NoBar
