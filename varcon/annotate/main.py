from ..change import GenomeChange
from ..constants import GENOME_CHANGE_TYPE, STRAND
from ..error import AnnotationError, UnknownChromosomeError
from ..interval import GenomePosition
from ..util import logger
from .builders import build_annotation, build_structural_annotation, overlap_interval
from .constants import DEFAULTS, VariantType
from .variant import AnnotationList


def _flanking_transcripts(database, change):
    interval = change.get_genome_interval()
    transcripts = database.nearest_left_of(interval.begin_pos) + database.nearest_right_of(interval.begin_pos)
    return sorted(set(transcripts))


def change_on_database_reference(database, change):
    """
    express a change against the reference dictionary of the database. Contigs are matched by name, contig ids are
    only meaningful within the reference dictionary that assigned them

    Returns:
        GenomeChange: the change on the forward strand of the matching database contig

    Raises:
        UnknownChromosomeError: no contig of the database has the name of the change contig, or the contig lengths
            differ
    """
    if change.pos.ref_dict is database.ref_dict:
        database.ref_dict.resolve(change.chr)
        return change
    name = change.pos.ref_dict.contig_name[change.chr]
    chr = database.ref_dict.resolve(name)
    if database.ref_dict.contig_length[chr] != change.pos.ref_dict.contig_length[change.chr]:
        raise UnknownChromosomeError('contig length does not match the reference dictionary', name)
    fwd = change.with_strand(STRAND.POS)
    return GenomeChange(GenomePosition(database.ref_dict, STRAND.POS, chr, fwd.pos.pos), fwd.ref, fwd.alt)


def annotate_change(
    database, change,
    flank_length=DEFAULTS.flank_length,
    sv_min_size=DEFAULTS.sv_min_size,
    protein_three_letter=DEFAULTS.protein_three_letter
):
    """
    annotate a genome change against all transcripts it may affect

    The change is annotated against every transcript overlapping it. When no transcript overlaps a small change, the
    nearest transcripts on either side are annotated instead and the change is reported as upstream/downstream when
    it lies in their flank. Changes which are not near any transcript get a single intergenic annotation.

    Args:
        database (TranscriptDatabase): the transcripts to annotate against
        change (GenomeChange): the change
        flank_length (int): the size of the upstream/downstream flank
        sv_min_size (int): the allele length at or above which a change is structural
        protein_three_letter (bool): render protein changes with three letter amino acid codes

    Returns:
        AnnotationList: the annotations, most severe first

    Raises:
        UnknownChromosomeError: the chromosome name of the change is not in the reference dictionary of the database
        AnnotationError: no annotation could be produced

    Example:
        >>> change = GenomeChange.from_one_based(database.ref_dict, '1', 909768, 'A', 'G')
        >>> annotate_change(database, change).highest_impact.effects
        (<VariantType.INTRONIC: ...>,)
    """
    original = change
    change = change_on_database_reference(database, change)
    kwargs = dict(flank_length=flank_length, sv_min_size=sv_min_size, protein_three_letter=protein_three_letter)
    change_type = change.get_type(sv_min_size)
    transcripts = database.overlapping(overlap_interval(change))
    annotations = [build_annotation(transcript, change, **kwargs) for transcript in transcripts]

    if not transcripts:
        if change_type == GENOME_CHANGE_TYPE.STRUCTURAL:
            annotations.append(build_structural_annotation(None, change))
        else:
            for transcript in _flanking_transcripts(database, change):
                annotation = build_annotation(transcript, change, **kwargs)
                if annotation.most_severe_effect != VariantType.INTERGENIC:
                    annotations.append(annotation)
            if not annotations:
                annotations.append(build_annotation(None, change, **kwargs))
    if not annotations:
        raise AnnotationError('no annotation could be produced for the change', str(change))
    logger.debug('{} annotations for {}'.format(len(annotations), change))
    return AnnotationList(original, annotations)


def annotate_changes(database, changes, skip_unknown_chromosomes=False, log_every=10000, **kwargs):
    """
    annotate a stream of genome changes

    Args:
        database (TranscriptDatabase): the transcripts to annotate against
        changes (iterable of GenomeChange): the changes
        skip_unknown_chromosomes (bool): skip (with a warning) changes on chromosomes missing from the reference
            dictionary instead of raising an error
        log_every (int): log progress after this many changes
        **kwargs: passed to :func:`annotate_change`

    Yields:
        AnnotationList: the annotations of each change, in input order
    """
    count = 0
    skipped = 0
    for change in changes:
        try:
            result = annotate_change(database, change, **kwargs)
        except UnknownChromosomeError as err:
            if not skip_unknown_chromosomes:
                raise err
            skipped += 1
            logger.warning('skipping change on unknown chromosome: {}'.format(err))
            continue
        count += 1
        if log_every and count % log_every == 0:
            logger.info('annotated {} changes'.format(count))
        yield result
    logger.info('annotated {} changes ({} skipped)'.format(count, skipped))
