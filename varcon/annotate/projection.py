"""
conversion of positions between the genome, transcript and CDS coordinate systems of a transcript

All functions take the transcript explicitly. Genome positions may be given on either strand, they are converted to
the strand of the transcript before projecting.
"""
from ..error import ProjectionError
from ..interval import GenomePosition
from .genomic import CDSPosition, TranscriptPosition

INVALID_INTRON_ID = -1
""":class:`int`: returned by :func:`locate_intron` when a position is not intronic"""


def _on_transcript_strand(transcript, pos):
    if pos.chr != transcript.chr:
        raise ProjectionError('position is not on the chromosome of the transcript', pos, transcript.accession)
    return pos.with_strand(transcript.strand)


def _check_accession(transcript, pos):
    if pos.accession != transcript.accession:
        raise ProjectionError('position does not refer to the transcript', pos, transcript.accession)


def genome_to_transcript_pos(transcript, pos):
    """
    Args:
        transcript (TranscriptModel): the transcript to project onto
        pos (GenomePosition): the genome position

    Returns:
        TranscriptPosition: the offset of the position in the spliced transcript

    Raises:
        ProjectionError: the position is not exonic
    """
    pos = _on_transcript_strand(transcript, pos)
    tx_pos = 0
    for exon in transcript.exon_regions:
        if exon.begin <= pos.pos < exon.end:
            return TranscriptPosition(transcript.accession, tx_pos + pos.pos - exon.begin)
        tx_pos += len(exon)
    raise ProjectionError('position does not lie in an exon', pos, transcript.accession)


def transcript_to_genome_pos(transcript, tx_pos):
    """
    Returns:
        GenomePosition: the genome position (on the strand of the transcript) of a transcript offset

    Raises:
        ProjectionError: the offset lies outside the spliced transcript
    """
    _check_accession(transcript, tx_pos)
    offset = tx_pos.pos
    for exon in transcript.exon_regions:
        if offset < len(exon):
            return GenomePosition(transcript.ref_dict, transcript.strand, transcript.chr, exon.begin + offset)
        offset -= len(exon)
    raise ProjectionError('transcript position lies past the end of the transcript', tx_pos)


def cds_begin_transcript_pos(transcript):
    """
    Returns:
        TranscriptPosition: the transcript offset of the first base of the start codon

    Raises:
        ProjectionError: the transcript is non-coding
    """
    if not transcript.is_coding:
        raise ProjectionError('transcript is non-coding', transcript.accession)
    return genome_to_transcript_pos(transcript, transcript.cds_region.begin_pos)


def genome_to_cds_pos(transcript, pos):
    """
    Returns:
        CDSPosition: the offset of the position in the coding sequence

    Raises:
        ProjectionError: the position does not lie in the coding part of an exon
    """
    pos = _on_transcript_strand(transcript, pos)
    if pos not in transcript.cds_region:
        raise ProjectionError('position does not lie in the coding region', pos, transcript.accession)
    tx_pos = genome_to_transcript_pos(transcript, pos)
    return CDSPosition(transcript.accession, tx_pos.pos - cds_begin_transcript_pos(transcript).pos)


def cds_to_genome_pos(transcript, cds_pos):
    """
    Returns:
        GenomePosition: the genome position (on the strand of the transcript) of a CDS offset

    Raises:
        ProjectionError: the offset lies outside the coding sequence
    """
    _check_accession(transcript, cds_pos)
    if cds_pos.pos >= transcript.cds_transcript_length():
        raise ProjectionError('CDS position lies past the end of the coding sequence', cds_pos)
    tx_pos = cds_begin_transcript_pos(transcript).shifted(cds_pos.pos)
    return transcript_to_genome_pos(transcript, tx_pos)


def transcript_to_cds_pos(transcript, tx_pos):
    _check_accession(transcript, tx_pos)
    cds_pos = tx_pos.pos - cds_begin_transcript_pos(transcript).pos
    if cds_pos < 0 or cds_pos >= transcript.cds_transcript_length():
        raise ProjectionError('transcript position lies outside the coding sequence', tx_pos)
    return CDSPosition(transcript.accession, cds_pos)


def locate_intron(transcript, pos):
    """
    Returns:
        int: zero-based index of the intron containing the position, :data:`INVALID_INTRON_ID` if the position is
        not intronic

    Example:
        >>> locate_intron(transcript, GenomePosition.from_one_based(ref_dict, '+', 1, 909768))
        13
    """
    pos = _on_transcript_strand(transcript, pos)
    for i, (left, right) in enumerate(zip(transcript.exon_regions, transcript.exon_regions[1:])):
        if left.end <= pos.pos < right.begin:
            return i
    return INVALID_INTRON_ID


def project_genome_to_transcript_pos(transcript, pos):
    """
    project a genome position onto the transcript, moving positions which cannot be projected to the nearest
    transcript offset in the 3' direction

    - positions upstream of the transcript project to the first transcript base
    - positions downstream of the transcript project past the last transcript base
    - intronic positions project to the first base of the next exon

    Returns:
        TranscriptPosition: the clamped transcript offset
    """
    pos = _on_transcript_strand(transcript, pos)
    if pos.pos < transcript.tx_region.begin:
        return TranscriptPosition(transcript.accession, 0)
    elif pos.pos >= transcript.tx_region.end:
        return TranscriptPosition(transcript.accession, transcript.transcript_length())
    tx_pos = 0
    for exon in transcript.exon_regions:
        if pos.pos < exon.begin:
            return TranscriptPosition(transcript.accession, tx_pos)
        elif pos.pos < exon.end:
            return TranscriptPosition(transcript.accession, tx_pos + pos.pos - exon.begin)
        tx_pos += len(exon)
    return TranscriptPosition(transcript.accession, tx_pos)


def transcript_starting_at_cds(transcript):
    """
    Returns:
        str: the transcript sequence from the first base of the start codon to the 3' end of the transcript
    """
    return transcript.sequence[cds_begin_transcript_pos(transcript).pos:]


def cds_sequence(transcript):
    """
    Returns:
        str: the coding sequence including the start and stop codons
    """
    begin = cds_begin_transcript_pos(transcript).pos
    return transcript.sequence[begin:begin + transcript.cds_transcript_length()]


def intron_distances(transcript, pos):
    """
    distances from an intronic position to the flanking exons, in transcript direction

    Returns:
        tuple of int and int: the number of bases from the last base of the upstream exon to the position and from
        the position to the first base of the downstream exon

    Raises:
        ProjectionError: the position is not intronic

    Example:
        >>> intron_distances(transcript, GenomePosition.from_one_based(ref_dict, '+', 1, 909768))
        (24, 54)
    """
    pos = _on_transcript_strand(transcript, pos)
    intron = locate_intron(transcript, pos)
    if intron == INVALID_INTRON_ID:
        raise ProjectionError('position is not intronic', pos, transcript.accession)
    upstream = transcript.exon_regions[intron]
    downstream = transcript.exon_regions[intron + 1]
    return (pos.pos - (upstream.end - 1), downstream.begin - pos.pos)
