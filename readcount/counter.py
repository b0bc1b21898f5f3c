import sys
from contextlib import contextmanager

from readcount.errors import InvalidConfigurationError, UnopenableSourceError
from readcount.formats import CollapseMode, Format, bodyLineCount, detectFormat
from readcount.ids import countId
from readcount.progress import maybeProgressBar
from readcount.reader import LineReader

STDIN_NAMES = ("stdin", "-")


class InputSource:
    """
    An input source and its counts.

    @param name: The C{str} file name, or 'stdin' or '-' for standard input.
    @param format_: The L{Format} of the source, if known in advance.
    """

    def __init__(self, name, format_=Format.UNDETERMINED):
        self.name = name
        self.format = format_
        self.lines = 0
        self.reads = 0
        self.sequences = 0

    def __repr__(self):
        return "<InputSource %r: %d lines, %d sequences, %d reads>" % (
            self.name,
            self.lines,
            self.sequences,
            self.reads,
        )

    @property
    def isStdin(self):
        return self.name in STDIN_NAMES


class RunContext:
    """
    Hold the configuration and the accumulated totals of a counting run.

    The collapse mode is shared by all sources in the run. If it is not
    configured, it is decided by the first read id seen and then never
    changes.

    @param format_: The L{Format} to assume for all sources, or
        C{Format.UNDETERMINED} to detect the format of each source.
    @param collapseMode: The L{CollapseMode} of the run, or
        C{CollapseMode.UNDETERMINED} to detect it.
    @param verbose: If C{True}, print diagnostics to C{logfp}.
    @param logfp: A file handle for diagnostic output. Defaults to
        C{sys.stderr} (looked up when a message is printed).
    """

    def __init__(
        self,
        format_=Format.UNDETERMINED,
        collapseMode=CollapseMode.UNDETERMINED,
        verbose=False,
        logfp=None,
    ):
        self.format = format_
        self.collapseMode = collapseMode
        self.verbose = verbose
        self._logfp = logfp
        self.lines = 0
        self.reads = 0
        self.sequences = 0
        self.sources = []

    def log(self, *msg):
        if self.verbose:
            print(*msg, file=self._logfp or sys.stderr)

    def resolveCollapseMode(self, collapseMode):
        """
        Fix the collapse mode for the rest of the run.

        @param collapseMode: Either C{CollapseMode.COLLAPSED} or
            C{CollapseMode.NOT_COLLAPSED}.
        @raise ValueError: If the mode has already been set, or if
            C{collapseMode} is C{CollapseMode.UNDETERMINED}.
        """
        if self.collapseMode is not CollapseMode.UNDETERMINED:
            raise ValueError(
                "Collapse mode is already %s." % self.collapseMode.name
            )
        if collapseMode is CollapseMode.UNDETERMINED:
            raise ValueError("Cannot resolve collapse mode to UNDETERMINED.")
        self.collapseMode = collapseMode


def countReadsInStream(fp, source, context):
    """
    Count the reads in an open input stream.

    @param fp: An open file handle (binary or text).
    @param source: The L{InputSource} that C{fp} belongs to.
    @param context: The L{RunContext} of the run.
    @raise ReadCountError: On any format or read error.
    """
    reader = LineReader(fp, source, context)

    while True:
        line = reader.readLine()

        if line is None:
            if source.lines == 0:
                context.log("File %r is empty." % source.name)
            return

        if source.format is Format.UNDETERMINED:
            source.format = detectFormat(line, source.name)
            context.log(
                "Type auto-detection: %s (%r)." % (source.format.name, source.name)
            )

        countId(line, source, context)
        reader.skipLines(bodyLineCount(source.format))


@contextmanager
def openSource(source):
    """
    Open an input source for binary reading.

    Standard input is yielded as is (and left open). Named files are closed
    when the context exits, however it exits.

    @param source: An L{InputSource}.
    @raise UnopenableSourceError: If the file cannot be opened.
    """
    if source.isStdin:
        yield sys.stdin.buffer
    else:
        try:
            fp = open(source.name, "rb")
        except OSError as e:
            raise UnopenableSourceError(
                "Failed to open file %r: %s" % (source.name, e.strerror or e)
            )
        with fp:
            yield fp


def countReadsInSource(name, context):
    """
    Count the reads in one named input source.

    @param name: The C{str} file name, or 'stdin' or '-' for standard input.
    @param context: The L{RunContext} of the run.
    @raise ReadCountError: On any open, format, or read error.
    @return: The L{InputSource}, with its counts.
    """
    source = InputSource(name, context.format)
    context.sources.append(source)
    context.log("Reading from %r..." % name)

    with openSource(source) as fp:
        countReadsInStream(fp, source, context)

    context.log(
        "File %r: %d lines, %d sequences, %d reads."
        % (name, source.lines, source.sequences, source.reads)
    )

    return source


def countReads(names, context, progress=False):
    """
    Count the reads in a list of input sources, in order.

    @param names: A C{list} of C{str} file names ('stdin' or '-' means
        standard input).
    @param context: The L{RunContext} of the run.
    @param progress: If C{True}, show a progress bar over the sources on
        standard error (when it is a terminal).
    @raise InvalidConfigurationError: If C{names} is empty.
    @raise ReadCountError: On any error in any source.
    @return: The C{int} total number of reads in all sources.
    """
    names = list(names)

    if not names:
        raise InvalidConfigurationError(
            "No input files given. Use 'stdin' (or '-') to read from "
            "standard input."
        )

    with maybeProgressBar(progress, len(names)) as bar:
        for count, name in enumerate(names, start=1):
            countReadsInSource(name, context)
            bar.update(count)

    return context.reads
