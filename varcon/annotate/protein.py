"""
rendering of protein level changes in HGVS notation

The wild-type and variant proteins are compared after truncating each at its first stop codon. The stop codon is
always rendered as ``*``, including in three letter mode.
"""
from Bio.SeqUtils import seq3

from ..constants import STOP_AA
from ..change import common_prefix_length, common_suffix_length

UNKNOWN_PROTEIN_CHANGE = 'p.?'
NO_PROTEIN_CHANGE = 'p.='
START_LOSS_PROTEIN_CHANGE = 'p.0?'


def amino_acid_code(aa, three_letter=False):
    """
    Example:
        >>> amino_acid_code('K', three_letter=True)
        'Lys'
        >>> amino_acid_code('*', three_letter=True)
        '*'
    """
    if aa == STOP_AA or not three_letter:
        return aa
    return seq3(aa)


def _aa_seq(seq, three_letter):
    return ''.join([amino_acid_code(aa, three_letter) for aa in seq])


def truncate_at_stop(protein):
    """
    Returns:
        str: the protein up to and including its first stop codon, the full protein if there is no stop

    Example:
        >>> truncate_at_stop('MKL*AA*')
        'MKL*'
    """
    index = protein.find(STOP_AA)
    return protein if index < 0 else protein[:index + 1]


def first_difference(wt_protein, var_protein):
    """
    Returns:
        tuple of int, str and str: the index and the wild-type and variant amino acids at the first position where
        the proteins differ, None if the proteins are identical. Amino acids past the end of a protein are None

    Example:
        >>> first_difference('MKLV*', 'MK*')
        (2, 'L', '*')
    """
    wt_protein = truncate_at_stop(wt_protein)
    var_protein = truncate_at_stop(var_protein)
    if wt_protein == var_protein:
        return None
    index = common_prefix_length(wt_protein, var_protein)
    return (
        index,
        wt_protein[index] if index < len(wt_protein) else None,
        var_protein[index] if index < len(var_protein) else None
    )


def substitution_string(wt_aa, var_aa, aa_index, three_letter=False):
    """
    Args:
        wt_aa (str): the wild-type amino acid
        var_aa (str): the variant amino acid
        aa_index (int): zero-based index of the amino acid in the protein

    Example:
        >>> substitution_string('K', 'R', 40)
        'p.K41R'
    """
    if wt_aa == var_aa:
        return NO_PROTEIN_CHANGE
    return 'p.{}{}{}'.format(
        amino_acid_code(wt_aa, three_letter), aa_index + 1, amino_acid_code(var_aa, three_letter))


def extension_string(var_protein, aa_index):
    """
    the suffix describing how far the variant protein runs past a lost stop codon

    Args:
        var_protein (str): the variant protein translated from the start codon to the end of the transcript
        aa_index (int): zero-based index of the lost stop codon

    Example:
        >>> extension_string('MKLAAQ*', 3)
        'ext*3'
    """
    stop = var_protein.find(STOP_AA, aa_index)
    if stop < 0:
        return 'ext*?'
    return 'ext*{}'.format(stop - aa_index)


def _range(protein, begin, end, three_letter):
    first = '{}{}'.format(amino_acid_code(protein[begin], three_letter), begin + 1)
    if end - begin == 1:
        return first
    return '{}_{}{}'.format(first, amino_acid_code(protein[end - 1], three_letter), end)


def protein_change_string(wt_protein, var_protein, frameshift=False, three_letter=False):
    """
    compare the wild-type and variant protein and render the change

    Args:
        wt_protein (str): the wild-type protein, translated from the coding sequence
        var_protein (str): the variant protein, translated from the altered sequence starting at the start codon and
            extending to the end of the transcript
        frameshift (bool): the change alters the reading frame
        three_letter (bool): render three letter amino acid codes

    Returns:
        str: the HGVS protein description

    Example:
        >>> protein_change_string('MKLV*', 'MKV*')
        'p.L3del'
        >>> protein_change_string('MKLV*', 'MKRGGAA*', frameshift=True)
        'p.L3Rfs*6'
    """
    wt_protein = truncate_at_stop(wt_protein)
    var_full = var_protein
    var_protein = truncate_at_stop(var_protein)
    if wt_protein == var_protein:
        return NO_PROTEIN_CHANGE
    first = common_prefix_length(wt_protein, var_protein)
    if first >= len(wt_protein) or first >= len(var_protein):
        return UNKNOWN_PROTEIN_CHANGE
    wt_aa = wt_protein[first]
    var_aa = var_protein[first]

    if var_aa == STOP_AA:
        return 'p.{}{}*'.format(amino_acid_code(wt_aa, three_letter), first + 1)
    elif wt_aa == STOP_AA:
        return '{}{}'.format(substitution_string(wt_aa, var_aa, first, three_letter), extension_string(var_full, first))
    elif frameshift:
        stop = var_protein.find(STOP_AA, first)
        length = '?' if stop < 0 else stop - first + 1
        return '{}fs*{}'.format(substitution_string(wt_aa, var_aa, first, three_letter), length)

    # in-frame: trim the common suffix, never past the common prefix
    suffix = min(common_suffix_length(wt_protein, var_protein), len(wt_protein) - first, len(var_protein) - first)
    wt_end = len(wt_protein) - suffix
    var_end = len(var_protein) - suffix
    inserted = _aa_seq(var_protein[first:var_end], three_letter)

    if wt_end - first == 1 and var_end - first == 1:
        return substitution_string(wt_aa, var_aa, first, three_letter)
    elif var_end == first:
        return 'p.{}del'.format(_range(wt_protein, first, wt_end, three_letter))
    elif wt_end == first:
        length = var_end - first
        if first >= length and var_protein[first:var_end] == wt_protein[first - length:first]:
            return 'p.{}dup'.format(_range(wt_protein, first - length, first, three_letter))
        if first == 0:
            return UNKNOWN_PROTEIN_CHANGE
        return 'p.{}{}_{}{}ins{}'.format(
            amino_acid_code(wt_protein[first - 1], three_letter), first,
            amino_acid_code(wt_protein[first], three_letter), first + 1, inserted)
    return 'p.{}delins{}'.format(_range(wt_protein, first, wt_end, three_letter), inserted)
