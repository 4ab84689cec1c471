"""
rendering of genome positions and nucleotide changes in HGVS notation

Positions are rendered relative to the coding region of coding transcripts (``c.``) and relative to the transcript
start for non-coding transcripts (``n.``). Changes without a transcript are rendered on the forward strand of the
genome (``g.``).
"""
from ..constants import GENOME_CHANGE_TYPE, STRAND, reverse_complement
from ..error import ProjectionError
from .projection import INVALID_INTRON_ID, genome_to_transcript_pos, locate_intron, transcript_to_genome_pos
from .genomic import TranscriptPosition


def _coding_region(transcript):
    # non-coding transcripts are numbered as if the whole transcript was coding
    if transcript.is_coding:
        return transcript.cds_region
    return transcript.tx_region


def hgvs_prefix(transcript):
    """
    Example:
        >>> hgvs_prefix(coding_transcript)
        'c.'
    """
    return 'c.' if transcript.is_coding else 'n.'


def _exonic_position_string(transcript, pos):
    region = _coding_region(transcript)
    try:
        cds_begin = genome_to_transcript_pos(transcript, region.begin_pos).pos
        cds_last = genome_to_transcript_pos(transcript, region.end_pos.shifted(-1)).pos
        tx_pos = genome_to_transcript_pos(transcript, pos).pos
    except ProjectionError as err:
        raise AssertionError('exonic position must project onto the transcript', str(err))
    if pos in region:
        return str(tx_pos - cds_begin + 1)
    elif region.is_right_of(pos):
        return '-{}'.format(cds_begin - tx_pos)
    return '*{}'.format(tx_pos - cds_last)


def _intronic_position_string(transcript, pos):
    intron = locate_intron(transcript, pos)
    if intron == INVALID_INTRON_ID:
        raise AssertionError('position must be intronic', pos, transcript.accession)
    exon_end = transcript.exon_regions[intron].end_pos
    next_exon_begin = transcript.exon_regions[intron + 1].begin_pos
    if pos.difference_to(exon_end) < next_exon_begin.difference_to(pos):
        return '{}+{}'.format(
            _exonic_position_string(transcript, exon_end.shifted(-1)), pos.difference_to(exon_end) + 1)
    return '{}-{}'.format(
        _exonic_position_string(transcript, next_exon_begin), next_exon_begin.difference_to(pos))


def cdna_position_string(transcript, pos):
    """
    render a genome position relative to the coding region of a transcript

    Args:
        transcript (TranscriptModel): the transcript
        pos (GenomePosition): the position, on either strand

    Returns:
        str: the HGVS position (ex. ``123``, ``-12``, ``*45``, ``91+24``, ``92-7``)

    Note:
        in an intron, the zero-based distance to the end of the preceding exon is compared with the distance to the
        start of the following exon. The central base of an odd-length intron (ex. c.10+3 or c.11-3) is anchored
        to the preceding exon
    """
    pos = pos.with_strand(transcript.strand)
    region = _coding_region(transcript)
    if transcript.tx_region.is_right_of(pos):
        tx_cds_begin = genome_to_transcript_pos(transcript, region.begin_pos).pos
        return '-{}'.format(tx_cds_begin + transcript.tx_region.begin_pos.difference_to(pos))
    elif transcript.tx_region.is_left_of(pos):
        return '*{}'.format(pos.difference_to(region.end_pos) + 1)
    if any([pos in exon for exon in transcript.exon_regions]):
        return _exonic_position_string(transcript, pos)
    return _intronic_position_string(transcript, pos)


def cdna_range_string(transcript, first, last):
    """
    render a range of genome positions, a single position is rendered once

    Args:
        first (GenomePosition): the 5' position of the range (in transcript direction)
        last (GenomePosition): the 3' position of the range (in transcript direction)
    """
    first_str = cdna_position_string(transcript, first)
    if first == last:
        return first_str
    return '{}_{}'.format(first_str, cdna_position_string(transcript, last))


def duplicated_interval(transcript, change):
    """
    checks if an insertion duplicates the transcript bases immediately 5' of the insertion point

    Args:
        transcript (TranscriptModel): the transcript
        change (GenomeChange): the insertion, on the strand of the transcript

    Returns:
        tuple of GenomePosition and GenomePosition: the first and last duplicated bases, None if the insertion is
        not a duplication
    """
    if change.ref or not change.alt or change.pos.pos == 0:
        return None
    try:
        last = genome_to_transcript_pos(transcript, change.pos.shifted(-1))
    except ProjectionError:
        return None
    begin = last.pos + 1 - len(change.alt)
    if begin < 0 or transcript.sequence[begin:last.pos + 1] != change.alt:
        return None
    first = transcript_to_genome_pos(transcript, TranscriptPosition(transcript.accession, begin))
    return (first, transcript_to_genome_pos(transcript, last))


def is_inversion(ref, alt):
    """
    Example:
        >>> is_inversion('ACG', 'CGT')
        True
    """
    return len(ref) > 1 and len(ref) == len(alt) and alt == reverse_complement(ref)


def nucleotide_change_string(transcript, change, change_type=None):
    """
    render a small change relative to a transcript

    Args:
        transcript (TranscriptModel): the transcript
        change (GenomeChange): the change, on either strand
        change_type (GENOME_CHANGE_TYPE): the shape of the change, derived from the alleles when not given

    Returns:
        str: the HGVS nucleotide description (ex. ``c.91+24A>G``, ``c.12_14del``, ``c.3_4insT``, ``n.5dup``)
    """
    change = change.with_strand(transcript.strand)
    change_type = change.get_type() if change_type is None else change_type
    prefix = hgvs_prefix(transcript)
    if change_type == GENOME_CHANGE_TYPE.INSERTION:
        dup = duplicated_interval(transcript, change)
        if dup:
            return '{}{}dup'.format(prefix, cdna_range_string(transcript, *dup))
        right = change.pos
        left = right.shifted(-1) if right.pos > 0 else right
        return '{}{}_{}ins{}'.format(
            prefix, cdna_position_string(transcript, left), cdna_position_string(transcript, right), change.alt)
    interval = change.get_genome_interval()
    positions = cdna_range_string(transcript, interval.begin_pos, interval.end_pos.shifted(-1))
    if change_type == GENOME_CHANGE_TYPE.SNV:
        return '{}{}{}>{}'.format(prefix, positions, change.ref, change.alt)
    elif change_type == GENOME_CHANGE_TYPE.DELETION:
        return '{}{}del'.format(prefix, positions)
    elif is_inversion(change.ref, change.alt):
        return '{}{}inv'.format(prefix, positions)
    return '{}{}delins{}'.format(prefix, positions, change.alt)


def genomic_change_string(change):
    """
    render a change on the forward strand of the genome with one-based positions

    Example:
        >>> genomic_change_string(GenomeChange.from_one_based(ref_dict, '1', 100, 'A', 'G'))
        'g.100A>G'
    """
    change = change.with_strand(STRAND.POS)
    begin = change.pos.pos + 1
    if not change.ref:
        return 'g.{}_{}ins{}'.format(begin - 1, begin, change.alt)
    positions = str(begin) if len(change.ref) == 1 else '{}_{}'.format(begin, begin + len(change.ref) - 1)
    if len(change.ref) == 1 and len(change.alt) == 1:
        return 'g.{}{}>{}'.format(positions, change.ref, change.alt)
    elif not change.alt:
        return 'g.{}del'.format(positions)
    elif is_inversion(change.ref, change.alt):
        return 'g.{}inv'.format(positions)
    return 'g.{}delins{}'.format(positions, change.alt)
