import re

from .constants import GENOME_CHANGE_TYPE, STRAND, reverse_complement
from .error import InvalidGenomeChange
from .interval import GenomeInterval, GenomePosition

SYMBOLIC_ALLELE_PATTERN = re.compile(r'^<([A-Z]+)(:[A-Z0-9:_]+)?>$')


def common_prefix_length(first, second):
    """
    Example:
        >>> common_prefix_length('ACGT', 'ACTT')
        2
    """
    count = 0
    for left, right in zip(first, second):
        if left != right:
            break
        count += 1
    return count


def common_suffix_length(first, second):
    """
    Example:
        >>> common_suffix_length('ACGT', 'AGT')
        2
    """
    return common_prefix_length(first[::-1], second[::-1])


class GenomeChange:
    """
    a reference allele at a genome position replaced by an alternate allele

    The alleles are canonicalized on construction: any common prefix is removed (moving the position to the
    right) and then any common suffix is removed. Two changes describing the same edit with different padding
    are equal after construction.
    """

    def __init__(self, pos, ref, alt):
        """
        Args:
            pos (GenomePosition): the position of the first reference base (or the insertion point)
            ref (str): the reference allele, given on the strand of pos
            alt (str): the alternate allele, given on the strand of pos. Symbolic alleles (ex. ``<DEL>``) are kept
                as-is and mark the change as structural

        Raises:
            InvalidGenomeChange: reference and alternate alleles are identical

        Example:
            >>> GenomeChange(GenomePosition(ref_dict, '+', 1, 99), 'CA', 'CG')
            GenomeChange(1:101A>G+)
        """
        ref = str(ref).upper()
        alt = str(alt).upper()
        if SYMBOLIC_ALLELE_PATTERN.match(alt):
            self.pos = pos
            self.ref = ref
            self.alt = alt
            return

        prefix = common_prefix_length(ref, alt)
        ref, alt = ref[prefix:], alt[prefix:]
        suffix = common_suffix_length(ref, alt)
        if suffix:
            ref, alt = ref[:len(ref) - suffix], alt[:len(alt) - suffix]
        if not ref and not alt:
            raise InvalidGenomeChange('reference and alternate alleles are identical', str(pos))
        self.pos = pos.shifted(prefix)
        self.ref = ref
        self.alt = alt

    @classmethod
    def from_one_based(cls, ref_dict, chr, pos, ref, alt, strand=STRAND.POS):
        """
        build a change from a one-based display position, as given in a variant call

        Example:
            >>> GenomeChange.from_one_based(ref_dict, '1', 909768, 'A', 'G')
        """
        chr = ref_dict.resolve(chr)
        return cls(GenomePosition.from_one_based(ref_dict, strand, chr, pos), ref, alt)

    @property
    def chr(self):
        return self.pos.chr

    @property
    def strand(self):
        return self.pos.strand

    @property
    def is_symbolic(self):
        return bool(SYMBOLIC_ALLELE_PATTERN.match(self.alt))

    @property
    def symbolic_type(self):
        """
        Returns:
            str: the type given in a symbolic alternate allele (ex. ``DEL`` for ``<DEL:ME>``), None otherwise
        """
        match = SYMBOLIC_ALLELE_PATTERN.match(self.alt)
        return match.group(1) if match else None

    def get_genome_interval(self):
        """
        Returns:
            GenomeInterval: the reference bases affected by the change, empty for insertions
        """
        return GenomeInterval.from_position(self.pos, len(self.ref))

    def with_strand(self, strand):
        """
        the same change expressed on the given strand, alleles are reverse complemented when the strand flips

        Example:
            >>> change = GenomeChange(GenomePosition(ref_dict, '+', 1, 99), 'AC', '')
            >>> change.with_strand('-').ref
            'GT'
        """
        if strand == self.strand:
            return self
        interval = self.get_genome_interval().with_strand(strand)
        result = GenomeChange.__new__(GenomeChange)
        result.pos = interval.begin_pos
        result.ref = reverse_complement(self.ref)
        result.alt = self.alt if self.is_symbolic else reverse_complement(self.alt)
        return result

    def get_type(self, sv_min_size=None):
        """
        the shape of the change

        Args:
            sv_min_size (int): allele length at or above which the change is structural, structural size is
                ignored when not given

        Returns:
            GENOME_CHANGE_TYPE: the shape of the edit
        """
        if self.is_symbolic:
            return GENOME_CHANGE_TYPE.STRUCTURAL
        if sv_min_size is not None and max(len(self.ref), len(self.alt)) >= sv_min_size:
            return GENOME_CHANGE_TYPE.STRUCTURAL
        if len(self.ref) == 1 and len(self.alt) == 1:
            return GENOME_CHANGE_TYPE.SNV
        elif not self.ref:
            return GENOME_CHANGE_TYPE.INSERTION
        elif not self.alt:
            return GENOME_CHANGE_TYPE.DELETION
        return GENOME_CHANGE_TYPE.BLOCK_SUBSTITUTION

    def key(self):
        fwd = self.with_strand(STRAND.POS)
        return (fwd.pos.chr, fwd.pos.pos, fwd.ref, fwd.alt)

    def __eq__(self, other):
        if not isinstance(other, GenomeChange):
            return False
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __str__(self):
        fwd = self.with_strand(STRAND.POS)
        return '{}{}>{}'.format(fwd.pos, fwd.ref if fwd.ref else '-', fwd.alt if fwd.alt else '-')

    def __repr__(self):
        return 'GenomeChange({}{}>{}{})'.format(
            self.pos, self.ref if self.ref else '-', self.alt if self.alt else '-', self.strand)
