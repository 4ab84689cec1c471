from ..interval import GenomeInterval


class TranscriptModel:
    """
    one transcript: its genomic footprint, coding region, exon structure and spliced sequence

    All intervals are stored on the strand of the transcript. Exons are kept in transcript order (5' to 3').
    """

    def __init__(
        self, accession, gene_symbol, tx_region, cds_region, exon_regions, sequence,
        gene_id=None, transcript_support_level=0
    ):
        """
        Args:
            accession (str): the transcript accession (ex. uc001acf.3)
            gene_symbol (str): the gene symbol of the transcript (ex. PLEKHN1)
            tx_region (GenomeInterval): the transcribed region, its strand is the strand of the transcript
            cds_region (GenomeInterval): the coding region including the start and stop codon, empty for non-coding
                transcripts
            exon_regions (list of GenomeInterval): the exons of the transcript
            sequence (str): the spliced transcript sequence
            gene_id (str): the gene id (ex. HGNC:1234)
            transcript_support_level (int): the support level of the transcript

        Raises:
            AttributeError: the intervals are on different chromosomes, the exons overlap, or the sequence length
                does not match the exons

        Example:
            >>> TranscriptModel(
            ...     'uc001acf.3', 'PLEKHN1', tx_region, cds_region, exon_regions, sequence, gene_id='HGNC:25284')
        """
        strand = tx_region.strand
        self.accession = accession
        self.gene_symbol = gene_symbol
        self.gene_id = gene_id
        self.tx_region = tx_region
        self.cds_region = cds_region.with_strand(strand)
        self.exon_regions = tuple(sorted([exon.with_strand(strand) for exon in exon_regions], key=lambda x: x.begin))
        self.sequence = str(sequence).upper()
        self.transcript_support_level = int(transcript_support_level)
        self._check_consistency()

    def _check_consistency(self):
        for region in (self.cds_region, ) + self.exon_regions:
            if region.chr != self.chr:
                raise AttributeError('transcript regions must be on the same chromosome', self.accession, region)
        if not self.exon_regions:
            raise AttributeError('transcript requires at least one exon', self.accession)
        for prev, curr in zip(self.exon_regions, self.exon_regions[1:]):
            if prev.end > curr.begin:
                raise AttributeError('exons cannot overlap', self.accession, prev, curr)
        if self.exon_regions[0].begin < self.tx_region.begin or self.exon_regions[-1].end > self.tx_region.end:
            raise AttributeError('exons must be within the transcribed region', self.accession)
        if len(self.sequence) != self.transcript_length():
            raise AttributeError(
                'sequence length does not match the exons', self.accession, len(self.sequence),
                self.transcript_length())
        if self.is_coding and not any([exon.overlaps_with(self.cds_region) for exon in self.exon_regions]):
            raise AttributeError('coding region does not overlap any exon', self.accession)

    @property
    def strand(self):
        return self.tx_region.strand

    @property
    def chr(self):
        return self.tx_region.chr

    @property
    def ref_dict(self):
        return self.tx_region.ref_dict

    @property
    def is_coding(self):
        """bool: True if the transcript has a coding region"""
        return not self.cds_region.is_empty()

    @property
    def exon_count(self):
        return len(self.exon_regions)

    def transcript_length(self):
        """
        Returns:
            int: the sum of the exon lengths
        """
        return sum([len(exon) for exon in self.exon_regions])

    def cds_transcript_length(self):
        """
        Returns:
            int: the length of the coding part of the exons
        """
        return sum([len(exon.intersection(self.cds_region)) for exon in self.exon_regions])

    def intron_region(self, i):
        """
        Args:
            i (int): zero-based index of the intron, intron i lies between exon i and exon i + 1

        Returns:
            GenomeInterval: the intron region on the strand of the transcript

        Raises:
            IndexError: there is no such intron
        """
        if i < 0 or i + 1 >= len(self.exon_regions):
            raise IndexError('intron index out of range', i, self.accession)
        left, right = self.exon_regions[i], self.exon_regions[i + 1]
        return GenomeInterval(self.ref_dict, self.strand, self.chr, left.end, right.begin)

    def intron_regions(self):
        return [self.intron_region(i) for i in range(len(self.exon_regions) - 1)]

    def key(self):
        return (
            self.accession, self.gene_symbol, self.gene_id, self.tx_region, self.cds_region, self.exon_regions,
            self.sequence, self.transcript_support_level)

    def __eq__(self, other):
        if not isinstance(other, TranscriptModel):
            return False
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __lt__(self, other):
        if self.gene_id is not None and other.gene_id is not None and self.gene_id != other.gene_id:
            return self.gene_id < other.gene_id
        if self.gene_symbol != other.gene_symbol:
            return self.gene_symbol < other.gene_symbol
        return self.accession < other.accession

    def __str__(self):
        return '{}({})'.format(self.accession, self.tx_region)

    def __repr__(self):
        return 'TranscriptModel({}, {}, {})'.format(self.accession, self.gene_symbol, repr(self.tx_region))


class TranscriptPosition:
    """
    a zero-based offset into the spliced sequence of a transcript
    """

    def __init__(self, accession, pos):
        """
        Args:
            accession (str): the accession of the transcript the offset refers to
            pos (int): zero-based offset from the 5' end of the spliced transcript
        """
        pos = int(pos)
        if pos < 0:
            raise AttributeError('transcript position cannot be negative', pos)
        self.accession = accession
        self.pos = pos

    def shifted(self, delta):
        return self.__class__(self.accession, self.pos + delta)

    def key(self):
        return (self.accession, self.pos)

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return False
        return self.key() == other.key()

    def __lt__(self, other):
        return self.key() < other.key()

    def __hash__(self):
        return hash((self.__class__.__name__, ) + self.key())

    def __str__(self):
        return '{}:{}'.format(self.accession, self.pos + 1)

    def __repr__(self):
        return '{}({}:{})'.format(self.__class__.__name__, self.accession, self.pos)


class CDSPosition(TranscriptPosition):
    """
    a zero-based offset into the coding sequence of a transcript, counted from the first base of the start codon
    """

    @property
    def codon(self):
        """int: zero-based index of the codon containing the position"""
        return self.pos // 3

    @property
    def frame(self):
        """int: the offset of the position within its codon"""
        return self.pos % 3


class TranscriptInterval:
    """
    a half-open range of offsets into the spliced sequence of a transcript
    """
    position_type = TranscriptPosition

    def __init__(self, accession, begin, end):
        begin = int(begin)
        end = int(end)
        if begin > end:
            raise AttributeError('interval begin > end is not allowed', begin, end)
        self.accession = accession
        self.begin = begin
        self.end = end

    @property
    def begin_pos(self):
        return self.position_type(self.accession, self.begin)

    @property
    def end_pos(self):
        return self.position_type(self.accession, self.end)

    def __len__(self):
        return self.end - self.begin

    def is_empty(self):
        return self.begin == self.end

    def __contains__(self, pos):
        return pos.accession == self.accession and self.begin <= pos.pos < self.end

    def key(self):
        return (self.accession, self.begin, self.end)

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return False
        return self.key() == other.key()

    def __hash__(self):
        return hash((self.__class__.__name__, ) + self.key())

    def __repr__(self):
        return '{}({}:{}-{})'.format(self.__class__.__name__, self.accession, self.begin, self.end)


class CDSInterval(TranscriptInterval):
    """
    a half-open range of offsets into the coding sequence of a transcript
    """
    position_type = CDSPosition
