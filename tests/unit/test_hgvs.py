import pytest

from varcon.annotate.hgvs import (
    cdna_position_string, cdna_range_string, duplicated_interval, genomic_change_string, hgvs_prefix, is_inversion,
    nucleotide_change_string
)
from varcon.interval import GenomePosition

from ..util import REF_DICT, build_transcript, make_change
from .mock import minus_transcript, non_coding_transcript, plus_transcript


def gpos(pos):
    return GenomePosition.from_one_based(REF_DICT, '+', REF_DICT.resolve('fake'), pos)


class TestCdnaPositionString:
    def test_coding(self):
        transcript = plus_transcript()
        assert cdna_position_string(transcript, gpos(1021)) == '1'
        assert cdna_position_string(transcript, gpos(1050)) == '30'
        assert cdna_position_string(transcript, gpos(1101)) == '31'
        assert cdna_position_string(transcript, gpos(1201)) == '91'
        assert cdna_position_string(transcript, gpos(1230)) == '120'

    def test_utr(self):
        transcript = plus_transcript()
        assert cdna_position_string(transcript, gpos(1001)) == '-20'
        assert cdna_position_string(transcript, gpos(1020)) == '-1'
        assert cdna_position_string(transcript, gpos(1231)) == '*1'
        assert cdna_position_string(transcript, gpos(1300)) == '*70'

    def test_flanks(self):
        transcript = plus_transcript()
        assert cdna_position_string(transcript, gpos(1000)) == '-21'
        assert cdna_position_string(transcript, gpos(950)) == '-71'
        assert cdna_position_string(transcript, gpos(1301)) == '*71'
        assert cdna_position_string(transcript, gpos(1310)) == '*80'

    def test_intronic(self):
        transcript = plus_transcript()
        assert cdna_position_string(transcript, gpos(1051)) == '30+1'
        assert cdna_position_string(transcript, gpos(1075)) == '30+25'
        assert cdna_position_string(transcript, gpos(1076)) == '31-25'
        assert cdna_position_string(transcript, gpos(1100)) == '31-1'

    def test_intronic_in_utr(self):
        transcript = build_transcript('T1', 'G1', '+', [(1001, 1050), (1101, 1200)], cds=(1110, 1180))
        assert cdna_position_string(transcript, gpos(1075)) == '-10+25'

    def test_central_intron_base_is_anchored_to_the_previous_exon(self):
        transcript = build_transcript('T1', 'G1', '+', [(1, 10), (16, 20)])
        assert cdna_position_string(transcript, gpos(12)) == '10+2'
        assert cdna_position_string(transcript, gpos(13)) == '10+3'
        assert cdna_position_string(transcript, gpos(14)) == '11-2'

    def test_minus_strand(self):
        transcript = minus_transcript()
        assert cdna_position_string(transcript, gpos(1480)) == '1'
        assert cdna_position_string(transcript, gpos(1480).with_strand('-')) == '1'
        assert cdna_position_string(transcript, gpos(1500)) == '-20'
        assert cdna_position_string(transcript, gpos(1250)) == '81'
        assert cdna_position_string(transcript, gpos(1300)) == '81-50'
        assert cdna_position_string(transcript, gpos(1600)) == '-120'
        assert cdna_position_string(transcript, gpos(1100)) == '*81'

    def test_non_coding(self):
        transcript = non_coding_transcript()
        assert cdna_position_string(transcript, gpos(5001)) == '1'
        assert cdna_position_string(transcript, gpos(5150)) == '100+50'
        assert cdna_position_string(transcript, gpos(4990)) == '-11'
        assert cdna_position_string(transcript, gpos(5310)) == '*10'

    def test_range(self):
        transcript = plus_transcript()
        assert cdna_range_string(transcript, gpos(1021), gpos(1023)) == '1_3'
        assert cdna_range_string(transcript, gpos(1021), gpos(1021)) == '1'


class TestHgvsPrefix:
    def test_prefix(self):
        assert hgvs_prefix(plus_transcript()) == 'c.'
        assert hgvs_prefix(non_coding_transcript()) == 'n.'


class TestDuplication:
    def test_is_inversion(self):
        assert is_inversion('ACG', 'CGT')
        assert is_inversion('CT', 'AG')
        assert not is_inversion('A', 'T')
        assert not is_inversion('AC', 'AC')
        assert not is_inversion('AC', 'GTT')

    def test_duplicated_interval(self):
        transcript = plus_transcript()
        first, last = duplicated_interval(transcript, make_change(1030, 'A', 'AAAA'))
        assert (first.pos, last.pos) == (1027, 1029)

    def test_not_duplicated(self):
        transcript = plus_transcript()
        assert duplicated_interval(transcript, make_change(1030, 'A', 'AT')) is None
        assert duplicated_interval(transcript, make_change(1000, 'A', 'AC')) is None
        assert duplicated_interval(transcript, make_change(1030, 'A', 'G')) is None


class TestNucleotideChangeString:
    def test_snv(self):
        assert nucleotide_change_string(plus_transcript(), make_change(1024, 'A', 'G')) == 'c.4A>G'
        assert nucleotide_change_string(minus_transcript(), make_change(1480, 'T', 'C')) == 'c.1A>G'
        assert nucleotide_change_string(non_coding_transcript(), make_change(5001, 'G', 'T')) == 'n.1G>T'

    def test_deletion(self):
        transcript = plus_transcript()
        assert nucleotide_change_string(transcript, make_change(1103, 'GCTG', 'G')) == 'c.34_36del'
        assert nucleotide_change_string(transcript, make_change(1103, 'GC', 'G')) == 'c.34del'

    def test_insertion(self):
        transcript = plus_transcript()
        assert nucleotide_change_string(transcript, make_change(1030, 'A', 'AT')) == 'c.10_11insT'
        assert nucleotide_change_string(minus_transcript(), make_change(1225, 'C', 'CA')) == 'c.105_106insT'

    def test_duplication(self):
        transcript = plus_transcript()
        assert nucleotide_change_string(transcript, make_change(1030, 'A', 'AAAA')) == 'c.8_10dup'
        assert nucleotide_change_string(transcript, make_change(1030, 'A', 'AA')) == 'c.10dup'

    def test_block_substitution(self):
        transcript = plus_transcript()
        assert nucleotide_change_string(transcript, make_change(1104, 'CT', 'AG')) == 'c.34_35inv'
        assert nucleotide_change_string(transcript, make_change(1104, 'CT', 'GGG')) == 'c.34_35delinsGGG'

    def test_intronic(self):
        assert nucleotide_change_string(plus_transcript(), make_change(1075, 'A', 'G')) == 'c.30+25A>G'


class TestGenomicChangeString:
    @pytest.mark.parametrize('change,expected', [
        ((100, 'A', 'G'), 'g.100A>G'),
        ((100, 'ACG', 'A'), 'g.101_102del'),
        ((100, 'AC', 'A'), 'g.101del'),
        ((100, 'A', 'AC'), 'g.100_101insC'),
        ((100, 'AC', 'GT'), 'g.100_101inv'),
        ((100, 'AC', 'T'), 'g.100_101delinsT'),
    ])
    def test_forward(self, change, expected):
        assert genomic_change_string(make_change(*change)) == expected

    def test_minus_strand_change(self):
        assert genomic_change_string(make_change(100, 'A', 'G', strand='-')) == 'g.9901T>C'
