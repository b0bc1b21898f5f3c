class ReadCountError(Exception):
    """Base class for all errors that abort a read-counting run."""


class InvalidConfigurationError(ReadCountError):
    """No input sources were given, or an option value is not recognized."""


class UnopenableSourceError(ReadCountError):
    """A named input source could not be opened for reading."""


class IoFailureError(ReadCountError):
    """Reading from an input source failed other than by reaching its end."""


class UnrecognizedFormatError(ReadCountError):
    """The first line of an input source is neither FASTA nor FASTQ."""


class SigilMismatchError(ReadCountError):
    """A read id line does not start with the character its format requires."""


class MalformedCollapsedIdError(ReadCountError):
    """A read id is not of the collapsed NNN-NNN form."""


class TruncatedRecordError(ReadCountError):
    """An input source ended in the middle of a record."""
