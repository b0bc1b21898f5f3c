#!/usr/bin/env python

import sys
import argparse

from readcount.counter import countReads
from readcount.errors import ReadCountError
from readcount.options import (
    addCountCommandLineOptions,
    parseCountCommandLineOptions,
)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description=(
            "Count the reads in FASTA or FASTQ files and print the total to "
            "standard output. Sequences whose ids are of the form NNN-NNN "
            "(collapsed reads) count as NNN reads (the second number)."
        ),
    )

    addCountCommandLineOptions(parser)
    args = parser.parse_args()

    try:
        files, context = parseCountCommandLineOptions(args)
        total = countReads(files, context, progress=args.progress)
    except ReadCountError as e:
        sys.exit(str(e))

    print(total, end="")
