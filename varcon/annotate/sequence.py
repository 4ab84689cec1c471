"""
application of a genome change to the sequence of a transcript
"""
from ..error import ProjectionError
from .projection import cds_begin_transcript_pos, genome_to_transcript_pos, project_genome_to_transcript_pos


def _transcript_edit(transcript, change):
    """
    Returns:
        tuple of int, int and str: the transcript offsets of the replaced range and the replacement sequence, None if
        the change does not touch the exonic sequence
    """
    change = change.with_strand(transcript.strand)
    interval = change.get_genome_interval()
    if interval.is_empty():
        # insertions only alter the transcript when the insertion point lies in an exon
        try:
            tx_pos = genome_to_transcript_pos(transcript, interval.begin_pos).pos
        except ProjectionError:
            return None
        return (tx_pos, tx_pos, change.alt)
    begin = project_genome_to_transcript_pos(transcript, interval.begin_pos).pos
    end = project_genome_to_transcript_pos(transcript, interval.end_pos).pos
    if begin >= end:
        return None
    return (begin, end, change.alt)


def transcript_with_change(transcript, change):
    """
    the spliced transcript sequence with the change applied

    Changes outside the exonic sequence leave the sequence unaltered. Range changes partially overlapping the exons
    only alter the exonic part of the range.

    Args:
        transcript (TranscriptModel): the transcript
        change (GenomeChange): the change, on either strand

    Returns:
        str: the altered transcript sequence
    """
    edit = _transcript_edit(transcript, change)
    if edit is None:
        return transcript.sequence
    begin, end, alt = edit
    return transcript.sequence[:begin] + alt + transcript.sequence[end:]


def cds_with_change(transcript, change, to_transcript_end=False):
    """
    the coding sequence with the change applied

    Args:
        transcript (TranscriptModel): the coding transcript
        change (GenomeChange): the change, on either strand
        to_transcript_end (bool): extend the sequence to the 3' end of the transcript. Used when scanning past the
            original stop codon

    Returns:
        str: the altered coding sequence
    """
    cds_begin = cds_begin_transcript_pos(transcript).pos
    cds_end = cds_begin + transcript.cds_transcript_length()
    edit = _transcript_edit(transcript, change)
    delta = 0
    if edit is not None:
        begin, end, alt = edit
        delta = len(alt) - (end - begin)
        if end <= cds_begin:
            cds_begin += delta
        if begin >= cds_end:
            delta = 0
    seq = transcript_with_change(transcript, change)
    if to_transcript_end:
        return seq[cds_begin:]
    return seq[cds_begin:cds_end + delta]
