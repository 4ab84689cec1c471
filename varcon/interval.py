from .constants import STRAND
from .error import InvalidCoordinateError


class GenomePosition:
    """
    a single base on one strand of a chromosome

    Positions are always stored zero-based. On the reverse strand the offset counts from the end of the
    contig, so that ``pos`` on one strand is ``contig_length - pos - 1`` on the other.
    """

    def __init__(self, ref_dict, strand, chr, pos):
        """
        Args:
            ref_dict (ReferenceDictionary): provides the contig lengths used for strand conversion
            strand (STRAND): the strand the offset is given on
            chr (int): the contig id in the reference dictionary
            pos (int): zero-based offset on the given strand

        Example:
            >>> GenomePosition(ref_dict, '+', 1, 909767)
        """
        pos = int(pos)
        if pos < 0:
            raise AttributeError('genome position cannot be negative', pos)
        self.ref_dict = ref_dict
        self.strand = STRAND.enforce(strand)
        self.chr = chr
        self.pos = pos

    @classmethod
    def from_one_based(cls, ref_dict, strand, chr, pos):
        """
        build a position from a one-based display coordinate

        Example:
            >>> GenomePosition.from_one_based(ref_dict, '+', 1, 909768).pos
            909767
        """
        return cls(ref_dict, strand, chr, int(pos) - 1)

    def with_strand(self, strand):
        """
        Returns:
            GenomePosition: the same base expressed on the given strand
        """
        if strand == self.strand:
            return self
        return GenomePosition(
            self.ref_dict, strand, self.chr, self.ref_dict.contig_length[self.chr] - self.pos - 1)

    def shifted(self, delta):
        """
        the position moved towards the 3' end of its strand for positive delta and towards the 5' end otherwise
        """
        return GenomePosition(self.ref_dict, self.strand, self.chr, self.pos + delta)

    def difference_to(self, other):
        """
        Returns:
            int: ``self.pos - other.pos`` after moving other onto the strand of the current position

        Raises:
            InvalidCoordinateError: the positions are on different chromosomes
        """
        if self.chr != other.chr:
            raise InvalidCoordinateError('coordinates are on different chromosomes', self, other)
        return self.pos - other.with_strand(self.strand).pos

    def _normalized(self, other):
        if self.chr != other.chr:
            raise InvalidCoordinateError('cannot compare positions on different chromosomes', self, other)
        return other.with_strand(self.strand)

    def __lt__(self, other):
        return self.pos < self._normalized(other).pos

    def __le__(self, other):
        return self.pos <= self._normalized(other).pos

    def __gt__(self, other):
        return self.pos > self._normalized(other).pos

    def __ge__(self, other):
        return self.pos >= self._normalized(other).pos

    def __eq__(self, other):
        if not isinstance(other, GenomePosition):
            return False
        if self.chr != other.chr:
            return False
        return self.pos == other.with_strand(self.strand).pos

    def __hash__(self):
        fwd = self.with_strand(STRAND.POS)
        return hash((fwd.chr, fwd.pos))

    def __str__(self):
        fwd = self.with_strand(STRAND.POS)
        return '{}:{}'.format(self.ref_dict.contig_name[self.chr], fwd.pos + 1)

    def __repr__(self):
        return 'GenomePosition({}:{}{})'.format(self.ref_dict.contig_name[self.chr], self.pos, self.strand)


class GenomeInterval:
    """
    a half-open range of bases on one strand of a chromosome
    """

    def __init__(self, ref_dict, strand, chr, begin, end):
        """
        Args:
            ref_dict (ReferenceDictionary): provides the contig lengths used for strand conversion
            strand (STRAND): the strand the coordinates are given on
            chr (int): the contig id in the reference dictionary
            begin (int): zero-based start (inclusive)
            end (int): zero-based end (exclusive)

        Example:
            >>> GenomeInterval(ref_dict, '+', 1, 100, 200)
        """
        begin = int(begin)
        end = int(end)
        if begin > end:
            raise AttributeError('interval begin > end is not allowed', begin, end)
        if begin < 0:
            raise AttributeError('interval begin cannot be negative', begin)
        self.ref_dict = ref_dict
        self.strand = STRAND.enforce(strand)
        self.chr = chr
        self.begin = begin
        self.end = end

    @classmethod
    def from_one_based(cls, ref_dict, strand, chr, begin, end):
        """
        build an interval from one-based fully closed display coordinates

        Example:
            >>> len(GenomeInterval.from_one_based(ref_dict, '+', 1, 23, 45))
            23
        """
        return cls(ref_dict, strand, chr, int(begin) - 1, end)

    @classmethod
    def from_position(cls, pos, length=1):
        """
        the interval starting at a given position
        """
        return cls(pos.ref_dict, pos.strand, pos.chr, pos.pos, pos.pos + length)

    @property
    def begin_pos(self):
        """:class:`GenomePosition`: the first base of the interval"""
        return GenomePosition(self.ref_dict, self.strand, self.chr, self.begin)

    @property
    def end_pos(self):
        """:class:`GenomePosition`: the base after the last base of the interval"""
        return GenomePosition(self.ref_dict, self.strand, self.chr, self.end)

    def length(self):
        return self.end - self.begin

    def __len__(self):
        return self.length()

    def is_empty(self):
        return self.begin == self.end

    def with_strand(self, strand):
        """
        the interval covering the same bases, expressed on the given strand
        """
        if strand == self.strand:
            return self
        contig_length = self.ref_dict.contig_length[self.chr]
        return GenomeInterval(self.ref_dict, strand, self.chr, contig_length - self.end, contig_length - self.begin)

    def with_more_padding(self, left, right=None):
        """
        the interval grown by the given number of bases on either side, clipped to the contig

        Example:
            >>> GenomeInterval(ref_dict, '+', 1, 100, 101).with_more_padding(2)
            GenomeInterval(1:98-103+)
        """
        right = left if right is None else right
        contig_length = self.ref_dict.contig_length[self.chr]
        return GenomeInterval(
            self.ref_dict, self.strand, self.chr,
            max(0, self.begin - left), min(contig_length, self.end + right))

    def _coerce(self, other):
        if other.chr != self.chr:
            return None
        return other.with_strand(self.strand)

    def __contains__(self, other):
        """
        Args:
            other (GenomePosition or GenomeInterval): the position or interval to check

        Example:
            >>> GenomePosition(ref_dict, '+', 1, 100) in GenomeInterval(ref_dict, '+', 1, 100, 200)
            True
        """
        other = self._coerce(other)
        if other is None:
            return False
        if isinstance(other, GenomeInterval):
            return self.begin <= other.begin and other.end <= self.end
        return self.begin <= other.pos < self.end

    def contains(self, other):
        return other in self

    def is_left_of(self, pos):
        """
        Returns:
            bool: True if the interval lies completely to the left of (5' of) the position
        """
        other = self._coerce(pos)
        if other is None:
            return False
        return self.end <= other.pos

    def is_right_of(self, pos):
        """
        Returns:
            bool: True if the interval lies completely to the right of (3' of) the position
        """
        other = self._coerce(pos)
        if other is None:
            return False
        return other.pos < self.begin

    def overlaps_with(self, other):
        """
        checks if two intervals have any base in common, empty intervals never overlap

        Example:
            >>> GenomeInterval(ref_dict, '+', 1, 1, 10).overlaps_with(GenomeInterval(ref_dict, '+', 1, 9, 11))
            True
            >>> GenomeInterval(ref_dict, '+', 1, 1, 10).overlaps_with(GenomeInterval(ref_dict, '+', 1, 10, 11))
            False
        """
        other = self._coerce(other)
        if other is None or self.is_empty() or other.is_empty():
            return False
        return other.begin < self.end and self.begin < other.end

    def intersection(self, other):
        """
        the intersection of two intervals. Disjoint intervals produce an empty interval

        Example:
            >>> GenomeInterval(ref_dict, '+', 1, 1, 10).intersection(GenomeInterval(ref_dict, '+', 1, 5, 50))
            GenomeInterval(1:5-10+)
        """
        other = self._coerce(other)
        if other is None:
            raise InvalidCoordinateError('cannot intersect intervals on different chromosomes', self, other)
        begin = max(self.begin, other.begin)
        end = max(begin, min(self.end, other.end))
        return GenomeInterval(self.ref_dict, self.strand, self.chr, begin, end)

    def __and__(self, other):
        return self.intersection(other)

    def key(self):
        fwd = self.with_strand(STRAND.POS)
        return (fwd.chr, fwd.begin, fwd.end)

    def __eq__(self, other):
        if not isinstance(other, GenomeInterval):
            return False
        return self.key() == other.key()

    def __lt__(self, other):
        return self.key() < other.key()

    def __hash__(self):
        return hash(self.key())

    def __str__(self):
        fwd = self.with_strand(STRAND.POS)
        return '{}:{}-{}'.format(self.ref_dict.contig_name[self.chr], fwd.begin + 1, fwd.end)

    def __repr__(self):
        return 'GenomeInterval({}:{}-{}{})'.format(
            self.ref_dict.contig_name[self.chr], self.begin, self.end, self.strand)
