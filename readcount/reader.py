from typing import Optional

from readcount.errors import IoFailureError, TruncatedRecordError


class LineReader:
    """
    Read lines one at a time from an input source, keeping the per-source
    and run-wide line counts up to date.

    @param fp: An open file handle. Binary handles are decoded as UTF-8
        (undecodable bytes are passed through via C{surrogateescape}).
    @param source: The L{readcount.counter.InputSource} being read.
    @param context: The L{readcount.counter.RunContext} of the run.
    """

    def __init__(self, fp, source, context):
        self.fp = fp
        self.source = source
        self.context = context

    def readLine(self) -> Optional[str]:
        """
        Read the next line.

        @raise IoFailureError: If the underlying read fails.
        @return: The C{str} line with its terminator removed, or C{None} at
            the end of the input.
        """
        try:
            line = self.fp.readline()
        except OSError as e:
            raise IoFailureError(
                "Failed to read from file %r after line %d: %s"
                % (self.source.name, self.source.lines, e)
            )

        if not line:
            return None

        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="surrogateescape")

        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]

        self.source.lines += 1
        self.context.lines += 1

        return line

    def skipLines(self, count: int) -> None:
        """
        Read and discard lines that must be present.

        @param count: The C{int} number of lines to discard.
        @raise TruncatedRecordError: If the input ends before C{count} lines
            have been read.
        """
        for _ in range(count):
            if self.readLine() is None:
                raise TruncatedRecordError(
                    "File %r ended after line %d, in the middle of a record "
                    "(file truncated?)." % (self.source.name, self.source.lines)
                )
