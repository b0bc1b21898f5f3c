from readcount.counter import RunContext
from readcount.errors import InvalidConfigurationError
from readcount.formats import (
    COLLAPSE_MODE_NAMES,
    FORMAT_NAMES,
    parseCollapseMode,
    parseFormat,
)


def addCountCommandLineOptions(parser):
    """
    Add read-counting command-line options to an argparse parser.

    @param parser: An C{argparse.ArgumentParser} instance.
    """
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILENAME",
        help=(
            "The FASTA or FASTQ files to count reads in. Use 'stdin' (or '-') "
            "to read from standard input."
        ),
    )

    # A mutually exclusive group for --format, --fasta, or --fastq.
    group = parser.add_mutually_exclusive_group()

    group.add_argument(
        "--format",
        default="auto",
        metavar="FORMAT",
        help=(
            "The input format. Possible choices: %s. With 'auto', the format "
            "of each file is detected from its first line."
            % ", ".join(FORMAT_NAMES)
        ),
    )

    group.add_argument(
        "--fasta",
        dest="format",
        action="store_const",
        const="fasta",
        help="If specified, input will be treated as FASTA.",
    )

    group.add_argument(
        "--fastq",
        dest="format",
        action="store_const",
        const="fastq",
        help="If specified, input will be treated as FASTQ.",
    )

    group = parser.add_mutually_exclusive_group()

    group.add_argument(
        "--collapse",
        default="auto",
        metavar="MODE",
        help=(
            "Whether read ids are collapsed (i.e., of the form NNN-NNN, where "
            "the second number is the count of reads the sequence stands "
            "for). Possible choices: %s. With 'auto', the first read id "
            "decides for all files." % ", ".join(COLLAPSE_MODE_NAMES)
        ),
    )

    group.add_argument(
        "--collapsed",
        dest="collapse",
        action="store_const",
        const="collapsed",
        help="If specified, read ids must be collapsed.",
    )

    group.add_argument(
        "--notCollapsed",
        dest="collapse",
        action="store_const",
        const="not-collapsed",
        help="If specified, each sequence counts as one read.",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        default=False,
        action="store_true",
        help="Print diagnostic information to standard error.",
    )

    parser.add_argument(
        "--progress",
        default=False,
        action="store_true",
        help="Show a progress bar over the input files on standard error.",
    )


def parseCountCommandLineOptions(args, logfp=None):
    """
    Examine parsed command-line options and set up a counting run.

    @param args: An argparse namespace, as returned by the argparse
        C{parse_args} function.
    @param logfp: A file handle for diagnostic output, or C{None} for
        standard error.
    @raise InvalidConfigurationError: If no files are given or an option
        value is not recognized.
    @return: A 2-C{tuple} of the C{list} of input file names and a
        L{readcount.counter.RunContext}.
    """
    if not args.files:
        raise InvalidConfigurationError(
            "Missing input file names. Use 'stdin' (or '-') to read from "
            "standard input. See --help for more details."
        )

    context = RunContext(
        format_=parseFormat(args.format),
        collapseMode=parseCollapseMode(args.collapse),
        verbose=args.verbose,
        logfp=logfp,
    )

    return list(args.files), context
