"""
classification of a genome change against a single transcript

There is one builder per shape of change (:attr:`~varcon.constants.GENOME_CHANGE_TYPE`). The small change builders
share the same top level dispatch (:func:`_build_small_change`) and only differ in how the coding part of the
transcript is annotated. Structural changes are described at the genomic level only.
"""
from ..constants import ANNOTATION_MESSAGE, CODON_SIZE, GENOME_CHANGE_TYPE, RANK_TYPE, STOP_AA, STRAND, translate
from ..error import InvalidGenomeChange, ProjectionError
from ..interval import GenomeInterval
from ..util import logger
from .constants import DEFAULTS, VariantType
from .hgvs import (
    cdna_position_string, duplicated_interval, genomic_change_string, hgvs_prefix, is_inversion,
    nucleotide_change_string
)
from .projection import (
    INVALID_INTRON_ID, cds_sequence, genome_to_cds_pos, genome_to_transcript_pos, intron_distances, locate_intron
)
from .protein import (
    NO_PROTEIN_CHANGE, START_LOSS_PROTEIN_CHANGE, UNKNOWN_PROTEIN_CHANGE, extension_string, first_difference,
    protein_change_string, substitution_string
)
from .regions import (
    lies_in_cds_exon, lies_in_exon, lies_in_intron, overlaps_with_cds, overlaps_with_cds_intron,
    overlaps_with_downstream_region, overlaps_with_five_prime_utr, overlaps_with_splice_acceptor_site,
    overlaps_with_splice_donor_site, overlaps_with_splice_region, overlaps_with_three_prime_utr,
    overlaps_with_translational_start_site, overlaps_with_translational_stop_site, overlaps_with_upstream_region
)
from .sequence import cds_with_change, transcript_with_change
from .variant import Annotation, AnnotationLocation


SYMBOLIC_SV_TYPES = {
    'DEL': VariantType.SV_DELETION,
    'INS': VariantType.SV_INSERTION,
    'DUP': VariantType.SV_INSERTION,
    'INV': VariantType.SV_INVERSION,
}


def overlap_interval(change):
    """
    the interval used to test a change for overlap with transcript features

    Insertions do not cover any reference base, they are tested with the two bases flanking the insertion point

    Args:
        change (GenomeChange): the change

    Returns:
        GenomeInterval: the interval on the strand of the change
    """
    interval = change.get_genome_interval()
    if interval.is_empty():
        return GenomeInterval(
            interval.ref_dict, interval.strand, interval.chr, max(0, interval.begin - 1), interval.end + 1)
    return interval


def annotation_location(transcript, change):
    """
    the exon or intron containing the first base of the change (in transcript direction). For insertions this is
    the base 3' of the insertion point

    Returns:
        AnnotationLocation: the location of the change
    """
    pos = change.with_strand(transcript.strand).pos
    for i, exon in enumerate(transcript.exon_regions):
        if pos in exon:
            return AnnotationLocation(RANK_TYPE.EXON, i + 1, transcript.exon_count)
    intron = locate_intron(transcript, pos)
    if intron != INVALID_INTRON_ID:
        return AnnotationLocation(
            RANK_TYPE.INTRON, intron + 1, transcript.exon_count - 1, distances=intron_distances(transcript, pos))
    return AnnotationLocation(RANK_TYPE.UNDEFINED)


def splice_variant_types(transcript, interval):
    """
    the splice site type overlapped by the interval. Donor and acceptor sites and the splice region are disjoint, at
    most one type is returned

    Returns:
        list of VariantType: the splice variant type, ncRNA types for non-coding transcripts
    """
    if overlaps_with_splice_donor_site(transcript, interval):
        return [VariantType.SPLICE_DONOR if transcript.is_coding else VariantType.ncRNA_SPLICE_DONOR]
    elif overlaps_with_splice_acceptor_site(transcript, interval):
        return [VariantType.SPLICE_ACCEPTOR if transcript.is_coding else VariantType.ncRNA_SPLICE_ACCEPTOR]
    elif overlaps_with_splice_region(transcript, interval):
        return [VariantType.SPLICE_REGION if transcript.is_coding else VariantType.ncRNA_SPLICE_REGION]
    return []


def _non_coding_protein_change(types):
    if VariantType.SPLICE_DONOR in types or VariantType.SPLICE_ACCEPTOR in types:
        return UNKNOWN_PROTEIN_CHANGE
    return NO_PROTEIN_CHANGE


def build_intergenic_annotation(transcript, change):
    """
    annotation of a change too far from the transcript to affect it, or of a change without any transcript nearby
    """
    if transcript is None:
        return Annotation(None, change, [VariantType.INTERGENIC], nt_hgvs=genomic_change_string(change))
    return Annotation(
        transcript, change, [VariantType.INTERGENIC], AnnotationLocation(),
        nt_hgvs=nucleotide_change_string(transcript, change))


def _build_flank(transcript, change, interval, flank_length):
    types = []
    if overlaps_with_upstream_region(transcript, interval, flank_length):
        types.append(VariantType.UPSTREAM)
    if overlaps_with_downstream_region(transcript, interval, flank_length):
        types.append(VariantType.DOWNSTREAM)
    return Annotation(
        transcript, change, types, AnnotationLocation(), nt_hgvs=nucleotide_change_string(transcript, change))


def _build_non_coding(transcript, change, interval, flank_length):
    if not transcript.tx_region.overlaps_with(interval):
        if overlaps_with_upstream_region(transcript, interval, flank_length) or \
                overlaps_with_downstream_region(transcript, interval, flank_length):
            return _build_flank(transcript, change, interval, flank_length)
        return build_intergenic_annotation(transcript, change)
    types = []
    if lies_in_exon(transcript, interval):
        types.append(VariantType.ncRNA_EXONIC)
    if lies_in_intron(transcript, interval):
        types.append(VariantType.ncRNA_INTRONIC)
    types.extend(splice_variant_types(transcript, interval))
    return Annotation(
        transcript, change, types, annotation_location(transcript, change),
        nt_hgvs=nucleotide_change_string(transcript, change))


def _build_intronic(transcript, change, interval):
    types = [VariantType.INTRONIC] + splice_variant_types(transcript, interval)
    return Annotation(
        transcript, change, types, annotation_location(transcript, change),
        nt_hgvs=nucleotide_change_string(transcript, change), protein_hgvs=_non_coding_protein_change(types))


def _build_utr(transcript, change, interval):
    types = []
    if overlaps_with_five_prime_utr(transcript, interval):
        types.append(VariantType.UTR5)
    if overlaps_with_three_prime_utr(transcript, interval):
        types.append(VariantType.UTR3)
    if not lies_in_exon(transcript, interval):
        types.append(VariantType.INTRONIC)
    types.extend(splice_variant_types(transcript, interval))
    return Annotation(
        transcript, change, types, annotation_location(transcript, change),
        nt_hgvs=nucleotide_change_string(transcript, change), protein_hgvs=_non_coding_protein_change(types))


def _build_transcript_ablation(transcript, change):
    return Annotation(
        transcript, change, [VariantType.TRANSCRIPT_ABLATION], AnnotationLocation(),
        nt_hgvs=nucleotide_change_string(transcript, change),
        protein_hgvs=START_LOSS_PROTEIN_CHANGE if transcript.is_coding else None)


def _build_small_change(transcript, change, lies_in_coding_exon, build_coding, flank_length, protein_three_letter):
    """
    top level dispatch shared by all small change builders, checked in order

    1. the change removes the whole transcript
    2. the transcript is non-coding
    3. the change lies in the coding part of an exon (tested by ``lies_in_coding_exon``)
    4. the change lies in an intron between the first and last coding base
    5. the change lies in a UTR
    6. the change lies in the upstream or downstream flank
    7. the change is intergenic

    Args:
        transcript (TranscriptModel): the transcript, None if there is no transcript near the change
        change (GenomeChange): the change
        lies_in_coding_exon (callable): ``(transcript, change, interval) -> bool``
        build_coding (callable): ``(transcript, change, interval, protein_three_letter) -> Annotation``

    Returns:
        Annotation: the annotation of the change with respect to the transcript
    """
    if transcript is None:
        return build_intergenic_annotation(None, change)
    original = change
    change = change.with_strand(transcript.strand)
    interval = overlap_interval(change)
    logger.debug('annotating {} against {}'.format(change, transcript.accession))

    if change.ref and change.get_genome_interval().contains(transcript.tx_region):
        annotation = _build_transcript_ablation(transcript, change)
    elif not transcript.is_coding:
        annotation = _build_non_coding(transcript, change, interval, flank_length)
    elif lies_in_coding_exon(transcript, change, interval):
        annotation = build_coding(transcript, change, interval, protein_three_letter)
    elif overlaps_with_cds_intron(transcript, interval) and overlaps_with_cds(transcript, interval):
        annotation = _build_intronic(transcript, change, interval)
    elif overlaps_with_five_prime_utr(transcript, interval) or overlaps_with_three_prime_utr(transcript, interval):
        annotation = _build_utr(transcript, change, interval)
    elif overlaps_with_upstream_region(transcript, interval, flank_length) or \
            overlaps_with_downstream_region(transcript, interval, flank_length):
        annotation = _build_flank(transcript, change, interval, flank_length)
    else:
        annotation = build_intergenic_annotation(transcript, change)
    annotation.change = original
    return annotation


def _snv_lies_in_coding_exon(transcript, change, interval):
    return lies_in_cds_exon(transcript, interval) and interval in transcript.cds_region


def _build_snv_coding(transcript, change, interval, protein_three_letter):
    messages = []
    try:
        tx_pos = genome_to_transcript_pos(transcript, change.pos)
        cds_pos = genome_to_cds_pos(transcript, change.pos)
    except ProjectionError as err:
        raise AssertionError('coding exon position must project onto the transcript', str(err))

    # the transcript sequence is authoritative, it may differ from the reference genome
    codon_begin = tx_pos.pos - cds_pos.frame
    codon = transcript.sequence[codon_begin:codon_begin + CODON_SIZE]
    if len(codon) < CODON_SIZE:
        messages.append(ANNOTATION_MESSAGE.WARNING_INCOMPLETE_CODON)
        codon = codon + 'N' * (CODON_SIZE - len(codon))
    wt_nt = codon[cds_pos.frame]
    if wt_nt != change.ref:
        messages.append(ANNOTATION_MESSAGE.WARNING_REF_DOES_NOT_MATCH_GENOME)
    var_codon = codon[:cds_pos.frame] + change.alt + codon[cds_pos.frame + 1:]
    wt_aa = translate(codon)
    var_aa = translate(var_codon)

    nt_hgvs = '{}{}{}>{}'.format(
        hgvs_prefix(transcript), cdna_position_string(transcript, change.pos), wt_nt, change.alt)
    protein_hgvs = substitution_string(wt_aa, var_aa, cds_pos.codon, protein_three_letter)

    if wt_aa == var_aa:
        types = [VariantType.SYNONYMOUS]
    elif wt_aa == STOP_AA:
        types = [VariantType.STOPLOSS]
    elif var_aa == STOP_AA:
        types = [VariantType.STOPGAIN]
    else:
        types = [VariantType.MISSENSE]

    if overlaps_with_translational_start_site(transcript, interval):
        types = [VariantType.START_LOSS]
        protein_hgvs = START_LOSS_PROTEIN_CHANGE
    elif overlaps_with_translational_stop_site(transcript, interval):
        if wt_aa == var_aa:
            types.append(VariantType.STOP_RETAINED)
        else:
            types.append(VariantType.STOPLOSS)
            var_protein = translate(cds_with_change(transcript, change, to_transcript_end=True))
            extension = extension_string(var_protein, cds_pos.codon)
            if extension.endswith('?'):
                messages.append(ANNOTATION_MESSAGE.WARNING_NO_STOP_CODON)
            protein_hgvs += extension
    types.extend(splice_variant_types(transcript, interval))

    return Annotation(
        transcript, change, types, annotation_location(transcript, change),
        nt_hgvs=nt_hgvs, protein_hgvs=protein_hgvs, messages=messages)


def _build_indel_coding(transcript, change, interval, change_type, protein_three_letter):
    messages = []
    frameshift = (len(transcript_with_change(transcript, change)) - len(transcript.sequence)) % CODON_SIZE != 0
    wt_protein = translate(cds_sequence(transcript))
    var_protein = translate(cds_with_change(transcript, change, to_transcript_end=True))

    if change_type == GENOME_CHANGE_TYPE.INSERTION:
        if duplicated_interval(transcript, change):
            types = [VariantType.FS_DUPLICATION if frameshift else VariantType.NON_FS_DUPLICATION]
        else:
            types = [VariantType.FS_INSERTION if frameshift else VariantType.NON_FS_INSERTION]
    elif change_type == GENOME_CHANGE_TYPE.DELETION:
        types = [VariantType.FS_DELETION if frameshift else VariantType.NON_FS_DELETION]
    else:
        types = [VariantType.FS_SUBSTITUTION if frameshift else VariantType.NON_FS_SUBSTITUTION]

    protein_hgvs = protein_change_string(wt_protein, var_protein, frameshift, protein_three_letter)
    if protein_hgvs.endswith('*?'):
        messages.append(ANNOTATION_MESSAGE.WARNING_NO_STOP_CODON)
    difference = first_difference(wt_protein, var_protein)
    if difference is not None:
        _, wt_aa, var_aa = difference
        if var_aa == STOP_AA and wt_aa != STOP_AA:
            types.append(VariantType.STOPGAIN)
        elif wt_aa == STOP_AA:
            types.append(VariantType.STOPLOSS)

    if overlaps_with_translational_start_site(transcript, interval):
        types.append(VariantType.START_LOSS)
        protein_hgvs = START_LOSS_PROTEIN_CHANGE
    elif overlaps_with_translational_stop_site(transcript, interval) and difference is None:
        types.append(VariantType.STOP_RETAINED)
    types.extend(splice_variant_types(transcript, interval))

    return Annotation(
        transcript, change, types, annotation_location(transcript, change),
        nt_hgvs=nucleotide_change_string(transcript, change, change_type), protein_hgvs=protein_hgvs,
        messages=messages)


def _insertion_lies_in_coding_exon(transcript, change, interval):
    # both bases flanking the insertion point must be coding
    return all([
        lies_in_cds_exon(transcript, GenomeInterval.from_position(interval.begin_pos)),
        lies_in_cds_exon(transcript, GenomeInterval.from_position(change.pos))
    ])


def _range_lies_in_coding_exon(transcript, change, interval):
    return lies_in_cds_exon(transcript, interval)


def _check_shape(change, expected_type):
    if change.is_symbolic or change.get_type() != expected_type:
        raise InvalidGenomeChange('change does not describe a {}'.format(expected_type), str(change))


def build_snv_annotation(
    transcript, change, flank_length=DEFAULTS.flank_length, protein_three_letter=DEFAULTS.protein_three_letter
):
    """
    annotate a single nucleotide change

    Args:
        transcript (TranscriptModel): the transcript, None if no transcript is near the change
        change (GenomeChange): the change
        flank_length (int): the size of the upstream/downstream flank
        protein_three_letter (bool): render protein changes with three letter amino acid codes

    Raises:
        InvalidGenomeChange: the change is not a single base substitution

    Returns:
        Annotation: the annotation of the change

    Example:
        >>> change = GenomeChange.from_one_based(ref_dict, '1', 909768, 'A', 'G')
        >>> build_snv_annotation(transcript, change).effects
        (<VariantType.INTRONIC: ...>,)
    """
    _check_shape(change, GENOME_CHANGE_TYPE.SNV)
    return _build_small_change(
        transcript, change, _snv_lies_in_coding_exon, _build_snv_coding, flank_length, protein_three_letter)


def build_insertion_annotation(
    transcript, change, flank_length=DEFAULTS.flank_length, protein_three_letter=DEFAULTS.protein_three_letter
):
    """
    annotate an insertion, insertions repeating the preceding transcript bases are annotated as duplications

    Raises:
        InvalidGenomeChange: the change is not an insertion
    """
    _check_shape(change, GENOME_CHANGE_TYPE.INSERTION)

    def build_coding(transcript, change, interval, protein_three_letter):
        return _build_indel_coding(transcript, change, interval, GENOME_CHANGE_TYPE.INSERTION, protein_three_letter)

    return _build_small_change(
        transcript, change, _insertion_lies_in_coding_exon, build_coding, flank_length, protein_three_letter)


def build_deletion_annotation(
    transcript, change, flank_length=DEFAULTS.flank_length, protein_three_letter=DEFAULTS.protein_three_letter
):
    """
    annotate a deletion

    Raises:
        InvalidGenomeChange: the change is not a deletion
    """
    _check_shape(change, GENOME_CHANGE_TYPE.DELETION)

    def build_coding(transcript, change, interval, protein_three_letter):
        return _build_indel_coding(transcript, change, interval, GENOME_CHANGE_TYPE.DELETION, protein_three_letter)

    return _build_small_change(
        transcript, change, _range_lies_in_coding_exon, build_coding, flank_length, protein_three_letter)


def build_block_substitution_annotation(
    transcript, change, flank_length=DEFAULTS.flank_length, protein_three_letter=DEFAULTS.protein_three_letter
):
    """
    annotate the replacement of a block of reference bases, small inversions are rendered as ``inv``

    Raises:
        InvalidGenomeChange: the change is not a block substitution
    """
    _check_shape(change, GENOME_CHANGE_TYPE.BLOCK_SUBSTITUTION)

    def build_coding(transcript, change, interval, protein_three_letter):
        return _build_indel_coding(
            transcript, change, interval, GENOME_CHANGE_TYPE.BLOCK_SUBSTITUTION, protein_three_letter)

    return _build_small_change(
        transcript, change, _range_lies_in_coding_exon, build_coding, flank_length, protein_three_letter)


def structural_variant_type(change):
    """
    Returns:
        VariantType: the SV_* variant type of a structural change, from its symbolic type or its alleles
    """
    if change.is_symbolic:
        return SYMBOLIC_SV_TYPES.get(change.symbolic_type, VariantType.SV_SUBSTITUTION)
    elif is_inversion(change.ref, change.alt):
        return VariantType.SV_INVERSION
    elif not change.ref:
        return VariantType.SV_INSERTION
    elif not change.alt:
        return VariantType.SV_DELETION
    return VariantType.SV_SUBSTITUTION


def structural_change_string(change):
    """
    coarse genomic description of a structural change, inserted sequences are abbreviated to their first and last
    two bases

    Example:
        >>> structural_change_string(GenomeChange(GenomePosition(ref_dict, '+', 1, 99), '', 'ACGTACGT'))
        'g.99_100insAC..GT'
    """
    change = change.with_strand(STRAND.POS)
    begin = change.pos.pos
    end = begin + len(change.ref)
    variant_type = structural_variant_type(change)
    if change.is_symbolic:
        alt = change.alt
    else:
        alt = '{}..{}'.format(change.alt[:2], change.alt[-2:])

    if variant_type == VariantType.SV_INVERSION:
        return 'g.{}_{}inv'.format(begin + 1, end)
    elif variant_type == VariantType.SV_INSERTION and not change.is_symbolic:
        return 'g.{}_{}ins{}'.format(begin, begin + 1, alt)
    elif variant_type == VariantType.SV_INSERTION:
        return 'g.{}_{}{}'.format(begin + 1, end, 'dup' if change.symbolic_type == 'DUP' else 'ins')
    elif variant_type == VariantType.SV_DELETION:
        return 'g.{}_{}del'.format(begin + 1, end)
    return 'g.{}_{}delins{}'.format(begin + 1, end, alt)


def build_structural_annotation(transcript, change, **kwargs):
    """
    annotate a structural change. No attempt is made to model the consequence on the transcript sequence

    Args:
        transcript (TranscriptModel): the transcript overlapping the change, None for intergenic changes
        change (GenomeChange): the change

    Returns:
        Annotation: annotation with an SV_* variant type, or INTERGENIC without a transcript
    """
    if transcript is None:
        types = [VariantType.INTERGENIC]
    else:
        types = [structural_variant_type(change)]
    return Annotation(
        transcript, change, types, AnnotationLocation(RANK_TYPE.UNDEFINED),
        nt_hgvs=structural_change_string(change))


BUILDERS = {
    GENOME_CHANGE_TYPE.SNV: build_snv_annotation,
    GENOME_CHANGE_TYPE.INSERTION: build_insertion_annotation,
    GENOME_CHANGE_TYPE.DELETION: build_deletion_annotation,
    GENOME_CHANGE_TYPE.BLOCK_SUBSTITUTION: build_block_substitution_annotation,
    GENOME_CHANGE_TYPE.STRUCTURAL: build_structural_annotation,
}
""":class:`dict` of callable by :attr:`~varcon.constants.GENOME_CHANGE_TYPE`: the builder for each shape of change"""


def build_annotation(
    transcript, change,
    flank_length=DEFAULTS.flank_length,
    sv_min_size=DEFAULTS.sv_min_size,
    protein_three_letter=DEFAULTS.protein_three_letter
):
    """
    annotate a change against a transcript with the builder matching the shape of the change

    Args:
        transcript (TranscriptModel): the transcript, None if no transcript is near the change
        change (GenomeChange): the change
        flank_length (int): the size of the upstream/downstream flank
        sv_min_size (int): the allele length at or above which a change is structural
        protein_three_letter (bool): render protein changes with three letter amino acid codes

    Returns:
        Annotation: the annotation of the change
    """
    change_type = change.get_type(sv_min_size)
    builder = BUILDERS[change_type]
    return builder(transcript, change, flank_length=flank_length, protein_three_letter=protein_three_letter)
