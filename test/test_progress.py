from unittest import TestCase
from unittest.mock import patch

import progressbar  # type: ignore

from readcount.progress import maybeProgressBar


class TestMaybeProgressBar(TestCase):
    """
    Tests for the readcount.progress.maybeProgressBar context manager.
    """

    def testNotShown(self):
        """
        If no bar is wanted, the yielded object must have an update method
        that does nothing.
        """
        with maybeProgressBar(False, 3) as bar:
            self.assertFalse(isinstance(bar, progressbar.ProgressBar))
            bar.update(1)

    def testNotATerminal(self):
        """
        If standard error is not a terminal, no bar must be shown even if
        one is wanted.
        """
        with patch("readcount.progress.os.isatty", return_value=False):
            with maybeProgressBar(True, 3) as bar:
                self.assertFalse(isinstance(bar, progressbar.ProgressBar))

    def testShown(self):
        """
        If a bar is wanted and standard error is a terminal, a progress bar
        must be yielded.
        """
        with patch("readcount.progress.os.isatty", return_value=True):
            with maybeProgressBar(True, 2) as bar:
                self.assertTrue(isinstance(bar, progressbar.ProgressBar))
                bar.update(1)
                bar.update(2)
