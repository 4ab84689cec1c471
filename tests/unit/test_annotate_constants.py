from varcon.annotate.constants import VariantType, most_severe
from varcon.constants import PUTATIVE_IMPACT


class TestVariantType:
    def test_declaration_order_is_sort_order(self):
        members = list(VariantType)
        assert sorted(members) == members
        assert sorted(reversed(members)) == members

    def test_priority_levels_do_not_decrease(self):
        levels = [member.priority_level for member in VariantType]
        assert levels == sorted(levels)

    def test_order(self):
        assert VariantType.TRANSCRIPT_ABLATION.order == 0
        assert VariantType.ERROR.order == len(VariantType) - 1
        assert [member.order for member in VariantType] == list(range(len(VariantType)))
        assert VariantType.STOPGAIN < VariantType.MISSENSE
        assert VariantType.UPSTREAM > VariantType.DOWNSTREAM
        assert VariantType.MISSENSE <= VariantType.MISSENSE

    def test_putative_impact(self):
        assert VariantType.MISSENSE.putative_impact == PUTATIVE_IMPACT.HIGH
        assert VariantType.ncRNA_EXONIC.putative_impact == PUTATIVE_IMPACT.HIGH
        assert VariantType.SYNONYMOUS.putative_impact == PUTATIVE_IMPACT.LOW
        assert VariantType.INTRONIC.putative_impact == PUTATIVE_IMPACT.LOW
        assert VariantType.UTR5.putative_impact == PUTATIVE_IMPACT.MODIFIER
        assert VariantType.INTERGENIC.putative_impact == PUTATIVE_IMPACT.MODIFIER

    def test_sequence_ontology(self):
        assert VariantType.MISSENSE.so_term == 'missense_variant'
        assert VariantType.MISSENSE.so_id == 'SO:0001583'
        assert VariantType.START_LOSS.so_id == 'SO:0002012'
        assert VariantType.FS_DUPLICATION.so_id is None
        assert str(VariantType.INTRONIC) == 'intron_variant'

    def test_flags(self):
        assert VariantType.SV_INVERSION.is_sv
        assert not VariantType.FS_DELETION.is_sv
        assert VariantType.SPLICE_REGION.is_top_priority
        assert not VariantType.UTR3.is_top_priority

    def test_most_severe(self):
        assert most_severe([VariantType.INTRONIC, VariantType.SPLICE_REGION]) == VariantType.SPLICE_REGION
        assert most_severe([VariantType.UPSTREAM, VariantType.DOWNSTREAM]) == VariantType.DOWNSTREAM
