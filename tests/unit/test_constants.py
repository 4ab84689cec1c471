import pytest

from varcon.constants import (
    GENOME_CHANGE_TYPE, Namespace, STRAND, cast_boolean, other_strand, reverse_complement, translate
)


class TestNamespace:
    def test_attribute_access(self):
        nspace = Namespace(thing=1, otherthing=2)
        assert nspace.thing == 1
        assert nspace['otherthing'] == 2
        assert nspace.items() == [('thing', 1), ('otherthing', 2)]
        with pytest.raises(AttributeError):
            nspace.missing

    def test_enforce(self):
        assert STRAND.enforce('+') == '+'
        with pytest.raises(KeyError):
            STRAND.enforce('?')

    def test_values(self):
        assert STRAND.values() == ['+', '-']

    def test_env_ignored(self, monkeypatch):
        nspace = Namespace()
        nspace.add('thing', 1)
        monkeypatch.setenv('VARCON_THING', '2')
        assert nspace.thing == 1

    def test_respecify_error(self):
        with pytest.raises(AttributeError):
            Namespace('thing', thing=2)

    def test_private_error(self):
        with pytest.raises(ValueError):
            Namespace(_thing=1)


class TestCastBoolean:
    def test_true(self):
        for value in ['t', 'True', '1', 'yes', '+', True]:
            assert cast_boolean(value)

    def test_false(self):
        for value in ['f', 'FALSE', '0', 'no', '-', False]:
            assert not cast_boolean(value)

    def test_error(self):
        with pytest.raises(TypeError):
            cast_boolean('maybe')


class TestSequenceUtils:
    def test_reverse_complement(self):
        assert reverse_complement('ATCCGGT') == 'ACCGGAT'
        assert reverse_complement('') == ''

    def test_reverse_complement_error(self):
        with pytest.raises(ValueError):
            reverse_complement('AC-T')

    def test_translate(self):
        assert translate('ATGAAATAG') == 'MK*'
        assert translate('ATGAAATA') == 'MK'
        assert translate('CATGAAA', reading_frame=1) == 'MK'

    def test_other_strand(self):
        assert other_strand(STRAND.POS) == STRAND.NEG
        assert other_strand(STRAND.NEG) == STRAND.POS
        with pytest.raises(KeyError):
            other_strand('?')
