from enum import Enum
import functools

from ..constants import PUTATIVE_IMPACT, cast_boolean
from ..util import WeakNamespace, positive_int


DEFAULTS = WeakNamespace()
"""
- :term:`flank_length` the number of bases up/downstream of a transcript where a change is annotated as
  upstream/downstream rather than intergenic
- :term:`sv_min_size` the allele length (in base pairs) at or above which a change is annotated as a structural
  variant
- :term:`protein_three_letter` flag to indicate if protein changes should be rendered with three letter amino acid
  codes
"""
DEFAULTS.add('flank_length', 1000, cast_type=positive_int)
DEFAULTS.add('sv_min_size', 1000, cast_type=positive_int)
DEFAULTS.add('protein_three_letter', False, cast_type=cast_boolean)

SPLICE_SITE_RADIUS = 2
""":class:`int`: number of intronic bases adjacent to an exon boundary making up the splice donor/acceptor site"""

SPLICE_REGION_EXON_BASES = 3
""":class:`int`: number of exonic bases adjacent to an exon boundary that are part of the splice region"""

SPLICE_REGION_INTRON_BASES = 8
""":class:`int`: the intronic splice region extends from the end of the splice site up to this many bases from the
exon boundary"""


@functools.total_ordering
class VariantType(Enum):
    """
    the classification of a change with respect to a transcript

    Members are declared from most to least severe. The declaration order is the total order used for sorting,
    members sharing a :attr:`priority_level` keep their relative declaration order.

    Each member carries (priority level, display name, sequence ontology term, sequence ontology accession). The
    accession is None where the ontology defines no dedicated term.
    """
    TRANSCRIPT_ABLATION = (1, 'transcript ablation', 'transcript_ablation', 'SO:0001893')
    SV_DELETION = (1, '1k+ deletion', 'deletion', 'SO:0000159')
    SV_INSERTION = (1, '1k+ insertion', 'insertion', 'SO:0000667')
    SV_SUBSTITUTION = (1, '1k+ substitution', 'substitution', 'SO:1000002')
    SV_INVERSION = (1, '1k+ inversion', 'inversion', 'SO:1000036')
    SPLICE_DONOR = (1, 'splice donor', 'splice_donor_variant', 'SO:0001575')
    SPLICE_ACCEPTOR = (1, 'splice acceptor', 'splice_acceptor_variant', 'SO:0001574')
    STOPGAIN = (1, 'stopgain', 'stop_gained', 'SO:0001587')
    FS_DUPLICATION = (1, 'frameshift duplication', 'frameshift_duplication', None)
    FS_INSERTION = (1, 'frameshift elongation', 'frameshift_elongation', 'SO:0001909')
    FS_DELETION = (1, 'frameshift truncation', 'frameshift_truncation', 'SO:0001910')
    FS_SUBSTITUTION = (1, 'frameshift substitution', 'frameshift_substitution', None)
    STOPLOSS = (1, 'stoploss', 'stop_lost', 'SO:0001578')
    START_LOSS = (1, 'startloss', 'start_lost', 'SO:0002012')
    NON_FS_DUPLICATION = (1, 'inframe duplication', 'inframe_duplication', None)
    NON_FS_INSERTION = (1, 'inframe insertion', 'inframe_insertion', 'SO:0001821')
    NON_FS_DELETION = (1, 'inframe deletion', 'inframe_deletion', 'SO:0001822')
    NON_FS_SUBSTITUTION = (1, 'inframe substitution', 'inframe_substitution', None)
    MISSENSE = (1, 'missense', 'missense_variant', 'SO:0001583')
    SPLICE_REGION = (1, 'splice region', 'splice_region_variant', 'SO:0001630')
    STOP_RETAINED = (1, 'stop retained', 'stop_retained', 'SO:0001567')
    ncRNA_EXONIC = (2, 'ncRNA exonic', 'non_coding_exon_variant', 'SO:0001792')
    ncRNA_SPLICE_DONOR = (2, 'ncRNA splice donor', 'non_coding_splice_donor_variant', None)
    ncRNA_SPLICE_ACCEPTOR = (2, 'ncRNA splice acceptor', 'non_coding_splice_acceptor_variant', None)
    ncRNA_SPLICE_REGION = (2, 'ncRNA splice region', 'non_coding_splice_region_variant', None)
    UTR3 = (3, 'UTR3', '3_prime_UTR_variant', 'SO:0001624')
    UTR5 = (4, 'UTR5', '5_prime_UTR_variant', 'SO:0001623')
    SYNONYMOUS = (5, 'synonymous', 'synonymous_variant', 'SO:0001819')
    INTRONIC = (6, 'intronic', 'intron_variant', 'SO:0001627')
    ncRNA_INTRONIC = (7, 'ncRNA intronic', 'non_coding_intron_variant', None)
    DOWNSTREAM = (8, 'downstream', 'downstream_gene_variant', 'SO:0001632')
    UPSTREAM = (8, 'upstream', 'upstream_gene_variant', 'SO:0001631')
    INTERGENIC = (9, 'intergenic', 'intergenic_variant', 'SO:0001628')
    ERROR = (10, 'error', 'error', None)

    def __init__(self, priority_level, display_name, so_term, so_id):
        self.priority_level = priority_level
        self.display_name = display_name
        self.so_term = so_term
        self.so_id = so_id

    @property
    def order(self):
        """int: the position of the member in the severity order"""
        return _VARIANT_TYPE_ORDER[self]

    @property
    def putative_impact(self):
        """
        Returns:
            PUTATIVE_IMPACT: coarse impact bucket of the variant type

        Example:
            >>> VariantType.MISSENSE.putative_impact
            'HIGH'
        """
        if self.priority_level <= 2:
            return PUTATIVE_IMPACT.HIGH
        elif self in {VariantType.SYNONYMOUS, VariantType.INTRONIC, VariantType.ncRNA_INTRONIC}:
            return PUTATIVE_IMPACT.LOW
        return PUTATIVE_IMPACT.MODIFIER

    @property
    def is_top_priority(self):
        return self.priority_level == 1

    @property
    def is_sv(self):
        return self in {
            VariantType.SV_DELETION, VariantType.SV_INSERTION, VariantType.SV_SUBSTITUTION, VariantType.SV_INVERSION}

    def __lt__(self, other):
        if not isinstance(other, VariantType):
            return NotImplemented
        return self.order < other.order

    def __str__(self):
        return self.so_term


_VARIANT_TYPE_ORDER = {variant_type: i for i, variant_type in enumerate(VariantType)}


def most_severe(variant_types):
    """
    Returns:
        VariantType: the most severe of the given variant types

    Example:
        >>> most_severe([VariantType.INTRONIC, VariantType.SPLICE_REGION])
        <VariantType.SPLICE_REGION: ...>
    """
    return min(variant_types)
