import re
from collections import namedtuple
from typing import Optional

from readcount.errors import MalformedCollapsedIdError, SigilMismatchError
from readcount.formats import SIGILS, CollapseMode

# Read ids are parsed as unsigned 64-bit integers. Anything bigger is
# rejected rather than wrapped.
MAX_ID_NUMBER = 2**64 - 1

_collapsedIdRegex = re.compile(r"([0-9]+)-([0-9]+)")

CollapsedId = namedtuple("CollapsedId", ("first", "count"))


def parseCollapsedId(body: str) -> Optional[CollapsedId]:
    """
    Parse a collapsed read id of the form NNN-NNN.

    @param body: The C{str} read id, without its leading '>' or '@'.
    @return: A C{CollapsedId} whose C{count} is the number of reads the
        record stands for, or C{None} if C{body} is not a collapsed read id
        or either of its numbers is out of range.
    """
    match = _collapsedIdRegex.fullmatch(body)
    if match is None:
        return None

    first, count = map(int, match.groups())

    if first > MAX_ID_NUMBER or count > MAX_ID_NUMBER:
        return None

    return CollapsedId(first, count)


def countId(line: str, source, context) -> int:
    """
    Count the reads represented by a record's id line, adding them (and one
    sequence) to the source and run totals.

    If the run's collapse mode is not yet known, it is decided here from
    this id, and the decision holds for the rest of the run.

    @param line: The C{str} id line, including its leading '>' or '@'.
    @param source: The L{readcount.counter.InputSource} being read. Its
        format must already be FASTA or FASTQ.
    @param context: The L{readcount.counter.RunContext} of the run.
    @raise SigilMismatchError: If C{line} is empty or does not start with
        the character required by the source format.
    @raise MalformedCollapsedIdError: If ids are collapsed but C{line} is
        not a collapsed id.
    @return: The C{int} number of reads counted for this record.
    """
    if not line:
        raise SigilMismatchError(
            "File %r line %d is empty." % (source.name, source.lines)
        )

    sigil = SIGILS[source.format]

    if line[0] != sigil:
        raise SigilMismatchError(
            "File %r line %d: expecting %s with %r, got %r."
            % (source.name, source.lines, source.format.name, sigil, line)
        )

    body = line[1:]

    if context.collapseMode is CollapseMode.UNDETERMINED:
        if parseCollapsedId(body) is None:
            context.resolveCollapseMode(CollapseMode.NOT_COLLAPSED)
            context.log("Detected non-collapsed read ids in %r." % source.name)
        else:
            context.resolveCollapseMode(CollapseMode.COLLAPSED)
            context.log("Detected collapsed read ids in %r." % source.name)

    if context.collapseMode is CollapseMode.COLLAPSED:
        collapsedId = parseCollapsedId(body)
        if collapsedId is None:
            raise MalformedCollapsedIdError(
                "File %r line %d: expecting collapsed read id, got %r."
                % (source.name, source.lines, line)
            )
        count = collapsedId.count
    else:
        count = 1

    source.reads += count
    source.sequences += 1
    context.reads += count
    context.sequences += 1

    return count
