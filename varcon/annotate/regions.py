"""
predicates checking the overlap of a genome interval with the features of a transcript

Every predicate takes the transcript and a :class:`~varcon.interval.GenomeInterval` on either strand. Empty
intervals never overlap anything, so point checks for insertions are made with the bases flanking the insertion
point.
"""
from ..error import ProjectionError
from ..interval import GenomeInterval
from .constants import DEFAULTS, SPLICE_REGION_EXON_BASES, SPLICE_REGION_INTRON_BASES, SPLICE_SITE_RADIUS
from .genomic import CDSPosition
from .projection import cds_to_genome_pos


def _interval(transcript, begin, end):
    return GenomeInterval(transcript.ref_dict, transcript.strand, transcript.chr, max(0, begin), max(0, begin, end))


def _any_overlap(regions, interval):
    return any([region.overlaps_with(interval) for region in regions])


def lies_in_exon(transcript, interval):
    return _any_overlap(transcript.exon_regions, interval)


def cds_exon_regions(transcript):
    """
    Returns:
        list of GenomeInterval: the coding part of each exon, exons without coding bases are left out
    """
    result = []
    for exon in transcript.exon_regions:
        region = exon.intersection(transcript.cds_region)
        if not region.is_empty():
            result.append(region)
    return result


def lies_in_cds_exon(transcript, interval):
    return _any_overlap(cds_exon_regions(transcript), interval)


def lies_in_intron(transcript, interval):
    return _any_overlap(transcript.intron_regions(), interval)


def overlaps_with_cds(transcript, interval):
    return transcript.cds_region.overlaps_with(interval)


def overlaps_with_cds_intron(transcript, interval):
    """
    Returns:
        bool: True if the interval overlaps the part of an intron lying between the first and last coding base
    """
    introns = [intron.intersection(transcript.cds_region) for intron in transcript.intron_regions()]
    return _any_overlap(introns, interval)


def five_prime_utr_region(transcript):
    return _interval(transcript, transcript.tx_region.begin, transcript.cds_region.begin)


def three_prime_utr_region(transcript):
    return _interval(transcript, transcript.cds_region.end, transcript.tx_region.end)


def overlaps_with_five_prime_utr(transcript, interval):
    if not transcript.is_coding:
        return False
    return five_prime_utr_region(transcript).overlaps_with(interval)


def overlaps_with_three_prime_utr(transcript, interval):
    if not transcript.is_coding:
        return False
    return three_prime_utr_region(transcript).overlaps_with(interval)


def upstream_region(transcript, flank_length=DEFAULTS.flank_length):
    """
    Returns:
        GenomeInterval: the flank 5' of the transcript (in transcript direction), clipped to the contig
    """
    return _interval(transcript, transcript.tx_region.begin - flank_length, transcript.tx_region.begin)


def downstream_region(transcript, flank_length=DEFAULTS.flank_length):
    """
    Returns:
        GenomeInterval: the flank 3' of the transcript (in transcript direction), clipped to the contig
    """
    contig_length = transcript.ref_dict.contig_length[transcript.chr]
    return _interval(
        transcript, transcript.tx_region.end, min(contig_length, transcript.tx_region.end + flank_length))


def overlaps_with_upstream_region(transcript, interval, flank_length=DEFAULTS.flank_length):
    return upstream_region(transcript, flank_length).overlaps_with(interval)


def overlaps_with_downstream_region(transcript, interval, flank_length=DEFAULTS.flank_length):
    return downstream_region(transcript, flank_length).overlaps_with(interval)


def splice_donor_sites(transcript):
    """
    the first intronic bases 3' of each exon except the last

    Returns:
        list of GenomeInterval: the splice donor sites in transcript order
    """
    result = []
    for intron in transcript.intron_regions():
        result.append(_interval(transcript, intron.begin, min(intron.end, intron.begin + SPLICE_SITE_RADIUS)))
    return result


def splice_acceptor_sites(transcript):
    """
    the last intronic bases 5' of each exon except the first. In introns too short to hold both sites, the donor
    site takes precedence

    Returns:
        list of GenomeInterval: the splice acceptor sites in transcript order
    """
    result = []
    for intron, donor in zip(transcript.intron_regions(), splice_donor_sites(transcript)):
        result.append(_interval(transcript, max(donor.end, intron.end - SPLICE_SITE_RADIUS), intron.end))
    return result


def splice_regions(transcript):
    """
    the exonic bases next to each splice site and the intronic bases between the splice site and the limit of the
    splice region. The regions never overlap the donor and acceptor sites

    Returns:
        list of GenomeInterval: the splice regions, two per intron side
    """
    result = []
    donors = splice_donor_sites(transcript)
    acceptors = splice_acceptor_sites(transcript)
    for i, intron in enumerate(transcript.intron_regions()):
        left_exon = transcript.exon_regions[i]
        right_exon = transcript.exon_regions[i + 1]
        donor, acceptor = donors[i], acceptors[i]
        result.append(_interval(
            transcript, max(left_exon.begin, intron.begin - SPLICE_REGION_EXON_BASES), intron.begin))
        result.append(_interval(
            transcript, donor.end, min(acceptor.begin, intron.begin + SPLICE_REGION_INTRON_BASES)))
        result.append(_interval(
            transcript, max(donor.end, intron.end - SPLICE_REGION_INTRON_BASES), acceptor.begin))
        result.append(_interval(transcript, intron.end, min(right_exon.end, intron.end + SPLICE_REGION_EXON_BASES)))
    return [region for region in result if not region.is_empty()]


def overlaps_with_splice_donor_site(transcript, interval):
    return _any_overlap(splice_donor_sites(transcript), interval)


def overlaps_with_splice_acceptor_site(transcript, interval):
    return _any_overlap(splice_acceptor_sites(transcript), interval)


def overlaps_with_splice_region(transcript, interval):
    return _any_overlap(splice_regions(transcript), interval)


def _codon_sites(transcript, cds_offsets):
    result = []
    for offset in cds_offsets:
        try:
            pos = cds_to_genome_pos(transcript, CDSPosition(transcript.accession, offset))
        except ProjectionError:
            continue
        result.append(GenomeInterval.from_position(pos))
    return result


def translational_start_site(transcript):
    """
    Returns:
        list of GenomeInterval: the single base intervals of the start codon, empty for non-coding transcripts
    """
    if not transcript.is_coding:
        return []
    return _codon_sites(transcript, range(0, 3))


def translational_stop_site(transcript):
    """
    Returns:
        list of GenomeInterval: the single base intervals of the stop codon, empty for non-coding transcripts
    """
    if not transcript.is_coding:
        return []
    cds_length = transcript.cds_transcript_length()
    return _codon_sites(transcript, range(max(0, cds_length - 3), cds_length))


def overlaps_with_translational_start_site(transcript, interval):
    return _any_overlap(translational_start_site(transcript), interval)


def overlaps_with_translational_stop_site(transcript, interval):
    return _any_overlap(translational_stop_site(transcript), interval)
