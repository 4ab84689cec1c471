"""
small hand-built transcripts on the ``fake`` contig

``plus_transcript`` (TX_PLUS, + strand)::

    exon 1  1001-1050  5' UTR 1001-1020, start codon 1021-1023
    intron  1051-1100
    exon 2  1101-1160  coding
    intron  1161-1200
    exon 3  1201-1300  coding 1201-1230 (stop codon 1228-1230), 3' UTR 1231-1300

``minus_transcript`` (TX_MINUS, - strand, overlaps exon 3 of TX_PLUS)::

    exon 1  1401-1500  5' UTR 1481-1500, start codon 1478-1480
    intron  1251-1400
    exon 2  1151-1250  coding 1181-1250 (stop codon 1181-1183), 3' UTR 1151-1180

``non_coding_transcript`` (TX_NC, + strand)::

    exon 1  5001-5100
    intron  5101-5200
    exon 2  5201-5300
"""
from ..util import build_transcript


PLUS_UTR5 = 'C' * 20
PLUS_CDS = 'ATG' + 'AAA' * 9 + 'CTG' * 20 + 'GCA' * 9 + 'TAA'
PLUS_UTR3 = 'GGC' * 5 + 'TGA' + 'C' * 52

MINUS_UTR5 = 'C' * 20
MINUS_CDS = 'ATG' + 'GAA' * 48 + 'TAG'
MINUS_UTR3 = 'T' * 30


def plus_transcript():
    return build_transcript(
        'TX_PLUS', 'GENEP', '+', [(1001, 1050), (1101, 1160), (1201, 1300)], cds=(1021, 1230),
        sequence=PLUS_UTR5 + PLUS_CDS + PLUS_UTR3, gene_id='HGNC:1')


def minus_transcript():
    return build_transcript(
        'TX_MINUS', 'GENEM', '-', [(1401, 1500), (1151, 1250)], cds=(1181, 1480),
        sequence=MINUS_UTR5 + MINUS_CDS + MINUS_UTR3, gene_id='HGNC:2')


def non_coding_transcript():
    return build_transcript('TX_NC', 'GENENC', '+', [(5001, 5100), (5201, 5300)], gene_id='HGNC:3')
