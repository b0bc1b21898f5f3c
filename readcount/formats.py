from enum import Enum

from readcount.errors import InvalidConfigurationError, UnrecognizedFormatError


class Format(Enum):
    """
    The format of an input source. UNDETERMINED until either configured or
    detected from the first line of the source.
    """

    UNDETERMINED = "auto"
    FASTA = "fasta"
    FASTQ = "fastq"


class CollapseMode(Enum):
    """
    Whether read ids are collapsed (of the form NNN-NNN, where the second
    number is the count of reads the record stands for).
    """

    UNDETERMINED = "auto"
    COLLAPSED = "collapsed"
    NOT_COLLAPSED = "not-collapsed"


SIGILS = {
    Format.FASTA: ">",
    Format.FASTQ: "@",
}

_BODY_LINE_COUNTS = {
    Format.FASTA: 1,
    Format.FASTQ: 3,
}

FORMAT_NAMES = tuple(f.value for f in Format)
COLLAPSE_MODE_NAMES = tuple(m.value for m in CollapseMode)

# Spellings accepted in addition to the enum values.
_COLLAPSE_MODE_ALIASES = {
    "notCollapsed": CollapseMode.NOT_COLLAPSED,
    "nocollapsed": CollapseMode.NOT_COLLAPSED,
}


def parseFormat(name):
    """
    Convert a format name to a L{Format}.

    @param name: A C{str}, one of 'auto', 'fasta', or 'fastq'.
    @raise InvalidConfigurationError: If C{name} is not a known format.
    @return: A L{Format} instance.
    """
    try:
        return Format(name)
    except ValueError:
        raise InvalidConfigurationError(
            "Unknown input format %r. Use one of %s."
            % (name, ", ".join(FORMAT_NAMES))
        )


def parseCollapseMode(name):
    """
    Convert a collapse mode name to a L{CollapseMode}.

    @param name: A C{str}, one of 'auto', 'collapsed', or 'not-collapsed'.
    @raise InvalidConfigurationError: If C{name} is not a known mode.
    @return: A L{CollapseMode} instance.
    """
    if name in _COLLAPSE_MODE_ALIASES:
        return _COLLAPSE_MODE_ALIASES[name]

    try:
        return CollapseMode(name)
    except ValueError:
        raise InvalidConfigurationError(
            "Unknown collapse mode %r. Use one of %s."
            % (name, ", ".join(COLLAPSE_MODE_NAMES))
        )


def detectFormat(line: str, sourceName: str) -> Format:
    """
    Decide whether a source is FASTA or FASTQ from its first line.

    @param line: The C{str} first line of the source.
    @param sourceName: The C{str} name of the source, for error messages.
    @raise UnrecognizedFormatError: If C{line} is empty or does not start
        with '>' or '@'.
    @return: A L{Format} instance.
    """
    if not line:
        raise UnrecognizedFormatError(
            "File %r has an empty first line (cannot detect FASTA or "
            "FASTQ)." % sourceName
        )

    if line[0] == ">":
        return Format.FASTA
    elif line[0] == "@":
        return Format.FASTQ
    else:
        raise UnrecognizedFormatError(
            "File %r does not look like FASTA or FASTQ. First line is %r."
            % (sourceName, line)
        )


def bodyLineCount(format_: Format) -> int:
    """
    How many lines follow the id line of a record.

    @param format_: A L{Format}, either FASTA or FASTQ.
    @raise ValueError: If C{format_} is UNDETERMINED.
    @return: The C{int} number of lines (1 for FASTA, 3 for FASTQ).
    """
    try:
        return _BODY_LINE_COUNTS[format_]
    except KeyError:
        raise ValueError("No record framing for format %r." % (format_,))
