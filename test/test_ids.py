from io import StringIO
from unittest import TestCase

from readcount.counter import InputSource, RunContext
from readcount.errors import MalformedCollapsedIdError, SigilMismatchError
from readcount.formats import CollapseMode, Format
from readcount.ids import MAX_ID_NUMBER, CollapsedId, countId, parseCollapsedId


class TestParseCollapsedId(TestCase):
    """
    Test the parseCollapsedId function.
    """

    def testCollapsed(self):
        """
        A collapsed id must be parsed into its two numbers.
        """
        self.assertEqual(CollapsedId(1, 5), parseCollapsedId("1-5"))

    def testCountIsSecondNumber(self):
        """
        The count of a collapsed id must be its second number.
        """
        self.assertEqual(3, parseCollapsedId("20-3").count)

    def testZeroCount(self):
        """
        A zero count is valid.
        """
        self.assertEqual(CollapsedId(7, 0), parseCollapsedId("7-0"))

    def testLeadingZeroes(self):
        """
        Numbers with leading zeroes must be accepted.
        """
        self.assertEqual(CollapsedId(1, 12), parseCollapsedId("001-0012"))

    def testNotCollapsed(self):
        """
        Ids that are not exactly two dash-separated numbers must not parse.
        """
        for body in (
            "",
            "read1",
            "1",
            "1-",
            "-5",
            "1-5-7",
            "1-5 extra",
            " 1-5",
            "1-5\n",
            "+1-5",
            "1--5",
            "a-5",
            "1-5a",
            "1_5",
        ):
            self.assertIsNone(parseCollapsedId(body), body)

    def testNonASCIIDigits(self):
        """
        Digits outside ASCII must not be accepted.
        """
        self.assertIsNone(parseCollapsedId("١-٥"))

    def testLargestNumbers(self):
        """
        Numbers up to the largest unsigned 64-bit value must be accepted.
        """
        body = "%d-%d" % (MAX_ID_NUMBER, MAX_ID_NUMBER)
        self.assertEqual(
            CollapsedId(MAX_ID_NUMBER, MAX_ID_NUMBER), parseCollapsedId(body)
        )

    def testFirstNumberOverflow(self):
        """
        A first number that does not fit in 64 bits must not parse.
        """
        self.assertIsNone(parseCollapsedId("%d-5" % (MAX_ID_NUMBER + 1)))

    def testCountOverflow(self):
        """
        A count that does not fit in 64 bits must not parse.
        """
        self.assertIsNone(parseCollapsedId("5-%d" % (MAX_ID_NUMBER + 1)))


class TestCountId(TestCase):
    """
    Test the countId function.
    """

    def makeSource(self, format_=Format.FASTA, lines=1):
        source = InputSource("file.fasta", format_)
        source.lines = lines
        return source

    def testAutoDetectCollapsed(self):
        """
        With an undetermined collapse mode, a collapsed id must set the mode
        to collapsed and count the number of reads given in the id.
        """
        context = RunContext()
        source = self.makeSource()
        self.assertEqual(5, countId(">1-5", source, context))
        self.assertIs(CollapseMode.COLLAPSED, context.collapseMode)
        self.assertEqual(5, source.reads)
        self.assertEqual(1, source.sequences)
        self.assertEqual(5, context.reads)
        self.assertEqual(1, context.sequences)

    def testAutoDetectNotCollapsed(self):
        """
        With an undetermined collapse mode, an id that is not collapsed must
        set the mode to not collapsed and count one read.
        """
        context = RunContext()
        source = self.makeSource()
        self.assertEqual(1, countId(">read1", source, context))
        self.assertIs(CollapseMode.NOT_COLLAPSED, context.collapseMode)
        self.assertEqual(1, source.reads)
        self.assertEqual(1, source.sequences)

    def testFASTQ(self):
        """
        A FASTQ id must be counted.
        """
        context = RunContext()
        source = self.makeSource(Format.FASTQ)
        self.assertEqual(4, countId("@3-4", source, context))

    def testZeroCount(self):
        """
        A collapsed id with a zero count must count no reads but still
        count one sequence.
        """
        context = RunContext()
        source = self.makeSource()
        self.assertEqual(0, countId(">3-0", source, context))
        self.assertEqual(0, context.reads)
        self.assertEqual(1, context.sequences)

    def testNotCollapsedModeIgnoresCollapsedIds(self):
        """
        When ids are not collapsed, an id that looks collapsed must count
        as just one read.
        """
        context = RunContext(collapseMode=CollapseMode.NOT_COLLAPSED)
        source = self.makeSource()
        self.assertEqual(1, countId(">1-5", source, context))
        self.assertEqual(1, context.reads)

    def testCollapsedModeRejectsOtherIds(self):
        """
        When ids are collapsed, an id that is not collapsed must result in a
        MalformedCollapsedIdError giving the file name and line number.
        """
        context = RunContext(collapseMode=CollapseMode.COLLAPSED)
        source = self.makeSource(lines=7)
        error = (
            r"^File 'file\.fasta' line 7: expecting collapsed read id, "
            r"got '>read1'\.$"
        )
        self.assertRaisesRegex(
            MalformedCollapsedIdError, error, countId, ">read1", source, context
        )
        self.assertEqual(0, context.reads)
        self.assertEqual(0, context.sequences)

    def testCollapsedModeRejectsOverflow(self):
        """
        When ids are collapsed, an id whose count does not fit in 64 bits
        must result in a MalformedCollapsedIdError.
        """
        context = RunContext(collapseMode=CollapseMode.COLLAPSED)
        source = self.makeSource()
        self.assertRaises(
            MalformedCollapsedIdError,
            countId,
            ">1-%d" % (MAX_ID_NUMBER + 1),
            source,
            context,
        )

    def testModeIsOnlyDetectedOnce(self):
        """
        Once detected, the collapse mode must not change, so a later
        non-collapsed id is an error.
        """
        context = RunContext()
        source = self.makeSource()
        countId(">1-5", source, context)
        self.assertRaises(
            MalformedCollapsedIdError, countId, ">read2", source, context
        )
        self.assertIs(CollapseMode.COLLAPSED, context.collapseMode)

    def testNotCollapsedModeIsOnlyDetectedOnce(self):
        """
        Once non-collapsed ids are detected, a later collapsed-looking id
        must count as one read.
        """
        context = RunContext()
        source = self.makeSource()
        countId(">read1", source, context)
        countId(">1-5", source, context)
        self.assertEqual(2, context.reads)
        self.assertIs(CollapseMode.NOT_COLLAPSED, context.collapseMode)

    def testEmptyLine(self):
        """
        An empty id line must result in a SigilMismatchError.
        """
        context = RunContext()
        source = self.makeSource(lines=3)
        error = r"^File 'file\.fasta' line 3 is empty\.$"
        self.assertRaisesRegex(SigilMismatchError, error, countId, "", source, context)

    def testWrongSigil(self):
        """
        A FASTQ id in a FASTA file must result in a SigilMismatchError, and
        must not decide the collapse mode.
        """
        context = RunContext()
        source = self.makeSource(lines=3)
        error = (
            r"^File 'file\.fasta' line 3: expecting FASTA with '>', "
            r"got '@1-5'\.$"
        )
        self.assertRaisesRegex(
            SigilMismatchError, error, countId, "@1-5", source, context
        )
        self.assertIs(CollapseMode.UNDETERMINED, context.collapseMode)

    def testWrongSigilFASTQ(self):
        """
        A FASTA id in a FASTQ file must result in a SigilMismatchError.
        """
        context = RunContext()
        source = self.makeSource(Format.FASTQ)
        self.assertRaises(SigilMismatchError, countId, ">id", source, context)

    def testVerboseDetection(self):
        """
        When verbose, detecting the collapse mode must be reported.
        """
        logfp = StringIO()
        context = RunContext(verbose=True, logfp=logfp)
        countId(">1-5", self.makeSource(), context)
        self.assertEqual(
            "Detected collapsed read ids in 'file.fasta'.\n", logfp.getvalue()
        )

    def testQuietDetection(self):
        """
        When not verbose, detecting the collapse mode must not be reported.
        """
        logfp = StringIO()
        context = RunContext(logfp=logfp)
        countId(">read1", self.makeSource(), context)
        self.assertEqual("", logfp.getvalue())
