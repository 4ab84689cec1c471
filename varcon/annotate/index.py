import itertools

import numpy as np

from ..constants import STRAND
from ..util import logger


class IntervalIndex:
    """
    static index over half-open intervals answering overlap and nearest neighbour queries

    The index is built once and never modified. Items are sorted by their begin coordinate; the running maximum of
    the end coordinates bounds the items that can reach a query, so overlap queries only scan candidate items.

    Example:
        >>> index = IntervalIndex([(10, 20, 'a'), (15, 40, 'b'), (50, 60, 'c')])
        >>> index.overlapping(18, 19)
        ['a', 'b']
    """

    def __init__(self, items):
        """
        Args:
            items (list of tuple of int, int and object): (begin, end, value) triples. Begins are inclusive and ends
                exclusive
        """
        items = sorted(items, key=lambda x: (x[0], x[1]))
        self._values = [value for _, _, value in items]
        self._begins = np.array([begin for begin, _, _ in items], dtype=np.int64)
        self._ends = np.array([end for _, end, _ in items], dtype=np.int64)
        if np.any(self._ends < self._begins):
            raise AttributeError('interval begin > end is not allowed')
        self._max_ends = np.maximum.accumulate(self._ends) if items else self._ends
        self._end_order = np.argsort(self._ends, kind='stable')
        self._sorted_ends = self._ends[self._end_order]

    def __len__(self):
        return len(self._values)

    def overlapping(self, begin, end):
        """
        Returns:
            list: the values of all intervals sharing at least one position with [begin, end). Empty queries and
            empty intervals never overlap anything
        """
        if begin >= end or not self._values:
            return []
        # candidates start before the end of the query and some interval up to them reaches past its begin
        first = int(np.searchsorted(self._max_ends, begin, side='right'))
        last = int(np.searchsorted(self._begins, end, side='left'))
        if first >= last:
            return []
        mask = (self._ends[first:last] > begin) & (self._ends[first:last] > self._begins[first:last])
        return [self._values[first + i] for i in np.flatnonzero(mask)]

    def nearest_left_of(self, pos):
        """
        Returns:
            list: the values of the intervals ending closest to (at or before) the position, all tied intervals are
            returned
        """
        count = int(np.searchsorted(self._sorted_ends, pos, side='right'))
        if count == 0:
            return []
        best = self._sorted_ends[count - 1]
        first = int(np.searchsorted(self._sorted_ends, best, side='left'))
        return [self._values[i] for i in sorted(self._end_order[first:count])]

    def nearest_right_of(self, pos):
        """
        Returns:
            list: the values of the intervals starting closest to (after) the position, all tied intervals are
            returned
        """
        first = int(np.searchsorted(self._begins, pos, side='right'))
        if first >= len(self._values):
            return []
        last = int(np.searchsorted(self._begins, self._begins[first], side='right'))
        return self._values[first:last]


class TranscriptDatabase:
    """
    the transcripts to annotate against, indexed by chromosome

    Transcript footprints are indexed on the forward strand. The database is immutable after construction and may
    be shared between threads.
    """

    def __init__(self, ref_dict, transcripts):
        """
        Args:
            ref_dict (ReferenceDictionary): the reference dictionary the transcripts are defined against
            transcripts (list of TranscriptModel): the transcripts

        Example:
            >>> database = TranscriptDatabase(ref_dict, [transcript1, transcript2])
        """
        self.ref_dict = ref_dict
        self.transcripts = tuple(sorted(transcripts))
        self.indexes = {}
        by_chr = sorted(self.transcripts, key=lambda t: t.chr)
        for chr, group in itertools.groupby(by_chr, key=lambda t: t.chr):
            items = []
            for transcript in group:
                region = transcript.tx_region.with_strand(STRAND.POS)
                items.append((region.begin, region.end, transcript))
            self.indexes[chr] = IntervalIndex(items)
            logger.debug('indexed {} transcripts on {}'.format(len(items), ref_dict.contig_name[chr]))

    def get_transcript(self, accession):
        """
        Raises:
            KeyError: there is no transcript with the given accession
        """
        for transcript in self.transcripts:
            if transcript.accession == accession:
                return transcript
        raise KeyError('no transcript with the given accession', accession)

    def _index(self, chr):
        return self.indexes.get(self.ref_dict.resolve(chr), IntervalIndex([]))

    def overlapping(self, interval):
        """
        Args:
            interval (GenomeInterval): the interval, on either strand

        Returns:
            list of TranscriptModel: the transcripts whose transcribed region overlaps the interval
        """
        fwd = interval.with_strand(STRAND.POS)
        return self._index(fwd.chr).overlapping(fwd.begin, fwd.end)

    def nearest_left_of(self, pos):
        """
        Returns:
            list of TranscriptModel: the transcripts ending nearest to the position on its forward strand 5' side
        """
        fwd = pos.with_strand(STRAND.POS)
        return self._index(fwd.chr).nearest_left_of(fwd.pos)

    def nearest_right_of(self, pos):
        """
        Returns:
            list of TranscriptModel: the transcripts beginning nearest to the position on its forward strand 3' side
        """
        fwd = pos.with_strand(STRAND.POS)
        return self._index(fwd.chr).nearest_right_of(fwd.pos)

    def __len__(self):
        return len(self.transcripts)
