import pytest

from varcon.annotate.constants import DEFAULTS
from varcon.util import WeakNamespace, positive_int


class TestPositiveInt:
    def test_valid(self):
        assert positive_int('10') == 10
        assert positive_int(0) == 0

    def test_negative(self):
        with pytest.raises(TypeError):
            positive_int(-1)

    def test_not_an_int(self):
        with pytest.raises(TypeError):
            positive_int('ten')


class TestWeakNamespace:
    def test_env_override(self, monkeypatch):
        nspace = WeakNamespace()
        nspace.add('flank', 10, cast_type=positive_int)
        assert nspace.flank == 10
        monkeypatch.setenv('VARCON_FLANK', '25')
        assert nspace.flank == 25

    def test_env_override_invalid(self, monkeypatch):
        nspace = WeakNamespace()
        nspace.add('flank', 10, cast_type=positive_int)
        monkeypatch.setenv('VARCON_FLANK', '-4')
        with pytest.raises(TypeError):
            nspace.flank

    def test_defaults(self, monkeypatch):
        for name in ['VARCON_FLANK_LENGTH', 'VARCON_SV_MIN_SIZE', 'VARCON_PROTEIN_THREE_LETTER']:
            monkeypatch.delenv(name, raising=False)
        assert DEFAULTS.flank_length == 1000
        assert DEFAULTS.sv_min_size == 1000
        assert DEFAULTS.protein_three_letter is False

    def test_defaults_env(self, monkeypatch):
        monkeypatch.setenv('VARCON_PROTEIN_THREE_LETTER', 'true')
        assert DEFAULTS.protein_three_letter is True
