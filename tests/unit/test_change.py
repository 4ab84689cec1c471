import pytest

from varcon.change import GenomeChange, common_prefix_length, common_suffix_length
from varcon.constants import GENOME_CHANGE_TYPE, STRAND
from varcon.error import InvalidGenomeChange, UnknownChromosomeError
from varcon.interval import GenomePosition

from ..util import REF_DICT, make_change


class TestCommonAffixes:
    def test_prefix(self):
        assert common_prefix_length('ACGT', 'ACTT') == 2
        assert common_prefix_length('', 'ACTT') == 0
        assert common_prefix_length('AC', 'ACTT') == 2

    def test_suffix(self):
        assert common_suffix_length('ACGT', 'AGT') == 2
        assert common_suffix_length('ACGT', 'A') == 0


class TestCanonicalization:
    def test_snv(self):
        change = make_change(100, 'A', 'g')
        assert change.pos.pos == 99
        assert change.ref == 'A'
        assert change.alt == 'G'

    def test_strip_prefix(self):
        change = make_change(100, 'CA', 'CG')
        assert change.pos.pos == 100
        assert (change.ref, change.alt) == ('A', 'G')

    def test_strip_suffix(self):
        change = make_change(100, 'AC', 'GC')
        assert change.pos.pos == 99
        assert (change.ref, change.alt) == ('A', 'G')

    def test_prefix_before_suffix(self):
        change = make_change(100, 'AAA', 'AA')
        assert change.pos.pos == 101
        assert (change.ref, change.alt) == ('A', '')

    def test_vcf_insertion(self):
        change = make_change(100, 'A', 'ACG')
        assert change.pos.pos == 100
        assert (change.ref, change.alt) == ('', 'CG')

    def test_vcf_deletion(self):
        change = make_change(100, 'ACG', 'A')
        assert change.pos.pos == 100
        assert (change.ref, change.alt) == ('CG', '')

    def test_identical_alleles_error(self):
        with pytest.raises(InvalidGenomeChange):
            make_change(100, 'ACG', 'ACG')

    def test_padding_does_not_matter(self):
        assert make_change(100, 'CA', 'CG') == make_change(101, 'A', 'G')
        assert make_change(99, 'TACG', 'TA') == make_change(101, 'CG', '')

    def test_idempotent(self):
        for change in [
            make_change(100, 'CA', 'CG'), make_change(100, 'A', 'ACG'), make_change(100, 'ACGT', 'AGGT'),
            make_change(100, 'ACG', 'A', strand='-')
        ]:
            again = GenomeChange(change.pos, change.ref, change.alt)
            assert again == change
            assert (again.pos.pos, again.ref, again.alt) == (change.pos.pos, change.ref, change.alt)

    def test_symbolic_alleles_are_kept(self):
        change = make_change(100, 'A', '<DEL>')
        assert change.pos.pos == 99
        assert change.ref == 'A'
        assert change.alt == '<DEL>'
        assert change.is_symbolic
        assert change.symbolic_type == 'DEL'
        assert make_change(100, 'A', '<INS:ME:ALU>').symbolic_type == 'INS'
        assert make_change(100, 'A', 'G').symbolic_type is None

    def test_unknown_chromosome_error(self):
        with pytest.raises(UnknownChromosomeError):
            make_change(100, 'A', 'G', chr='chr99')

    def test_chromosome_alias(self):
        assert make_change(100, 'A', 'G', chr='ref1').chr == REF_DICT.resolve('1')


class TestWithStrand:
    def test_snv(self):
        change = make_change(100, 'A', 'G').with_strand(STRAND.NEG)
        assert change.strand == STRAND.NEG
        assert change.pos.pos == 9900
        assert (change.ref, change.alt) == ('T', 'C')

    def test_deletion(self):
        change = GenomeChange(GenomePosition(REF_DICT, '+', REF_DICT.resolve('fake'), 99), 'AC', '')
        result = change.with_strand('-')
        assert result.ref == 'GT'
        assert result.pos.pos == 9899

    def test_insertion(self):
        change = make_change(100, 'A', 'ACG')
        result = change.with_strand('-')
        assert result.pos.pos == 9900
        assert (result.ref, result.alt) == ('', 'CG')
        assert result.get_genome_interval().is_empty()

    def test_symbolic(self):
        result = make_change(100, 'A', '<DUP>').with_strand('-')
        assert result.ref == 'T'
        assert result.alt == '<DUP>'

    def test_involution(self):
        for change in [
            make_change(100, 'A', 'G'), make_change(100, 'A', 'ACG'), make_change(100, 'ACG', 'A'),
            make_change(100, 'ACGT', 'TT'), make_change(100, 'A', '<INV>')
        ]:
            result = change.with_strand('-').with_strand('+')
            assert result == change
            assert (result.pos.pos, result.ref, result.alt) == (change.pos.pos, change.ref, change.alt)

    def test_equal_across_strands(self):
        change = make_change(100, 'A', 'G')
        assert change.with_strand('-') == change
        assert hash(change.with_strand('-')) == hash(change)


class TestGetType:
    def test_snv(self):
        assert make_change(100, 'A', 'G').get_type() == GENOME_CHANGE_TYPE.SNV

    def test_insertion(self):
        assert make_change(100, 'A', 'AG').get_type() == GENOME_CHANGE_TYPE.INSERTION

    def test_deletion(self):
        assert make_change(100, 'AG', 'A').get_type() == GENOME_CHANGE_TYPE.DELETION

    def test_block_substitution(self):
        assert make_change(100, 'AG', 'CT').get_type() == GENOME_CHANGE_TYPE.BLOCK_SUBSTITUTION
        assert make_change(100, 'A', 'CT').get_type() == GENOME_CHANGE_TYPE.BLOCK_SUBSTITUTION

    def test_structural(self):
        assert make_change(100, 'A', '<DEL>').get_type() == GENOME_CHANGE_TYPE.STRUCTURAL
        change = make_change(100, 'A' * 11, 'A')
        assert change.get_type() == GENOME_CHANGE_TYPE.DELETION
        assert change.get_type(sv_min_size=10) == GENOME_CHANGE_TYPE.STRUCTURAL
        assert change.get_type(sv_min_size=11) == GENOME_CHANGE_TYPE.DELETION

    def test_genome_interval(self):
        interval = make_change(100, 'ACG', 'A').get_genome_interval()
        assert (interval.begin, interval.end) == (100, 102)
        assert make_change(100, 'A', 'AC').get_genome_interval().is_empty()


class TestStr:
    def test_str(self):
        assert str(make_change(100, 'A', 'G')) == 'fake:100A>G'
        assert str(make_change(100, 'A', 'G').with_strand('-')) == 'fake:100A>G'
        assert str(make_change(100, 'AC', 'A')) == 'fake:101C>-'
        assert str(make_change(100, 'A', 'AC')) == 'fake:101->C'
