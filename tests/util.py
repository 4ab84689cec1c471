import itertools

from varcon.annotate.base import ReferenceDictionary
from varcon.annotate.genomic import TranscriptModel
from varcon.change import GenomeChange
from varcon.constants import STRAND
from varcon.interval import GenomeInterval


REF_DICT = ReferenceDictionary([('chr1', 249250621), ('chr2', 243199373), ('fake', 10000)], aliases={'ref1': 'chr1'})


def filler_sequence(length):
    """deterministic sequence without any stop codon in the first frame"""
    return ''.join(itertools.islice(itertools.cycle('GCA'), length))


def build_transcript(
    accession, gene_symbol, strand, exons, cds=None, chr='fake', sequence=None, ref_dict=REF_DICT, gene_id=None
):
    """
    Args:
        exons (list of tuple of int and int): one-based, fully closed exon coordinates on the forward strand
        cds (tuple of int and int): one-based, fully closed coding region on the forward strand, None for non-coding
        sequence (str): the spliced transcript sequence (in transcript direction), filler sequence when not given
    """
    chr_id = ref_dict.resolve(chr)
    exon_regions = [GenomeInterval.from_one_based(ref_dict, STRAND.POS, chr_id, start, end) for start, end in exons]
    tx_region = GenomeInterval.from_one_based(
        ref_dict, STRAND.POS, chr_id, min([s for s, _ in exons]), max([e for _, e in exons])).with_strand(strand)
    if cds:
        cds_region = GenomeInterval.from_one_based(ref_dict, STRAND.POS, chr_id, cds[0], cds[1])
    else:
        end = tx_region.with_strand(STRAND.POS).end
        cds_region = GenomeInterval(ref_dict, STRAND.POS, chr_id, end, end)
    if sequence is None:
        sequence = filler_sequence(sum([len(e) for e in exon_regions]))
    return TranscriptModel(accession, gene_symbol, tx_region, cds_region, exon_regions, sequence, gene_id=gene_id)


def make_change(pos, ref, alt, chr='fake', strand=STRAND.POS, ref_dict=REF_DICT):
    """genome change from a one-based position"""
    return GenomeChange.from_one_based(ref_dict, chr, pos, ref, alt, strand=strand)
