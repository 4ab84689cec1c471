"""
module responsible for small utility functions and constants used throughout the varcon package
"""
import os
import re

from Bio.Seq import Seq


PROGNAME = 'varcon'


def cast_boolean(input_value):
    value = str(input_value).lower()
    if value in ['t', 'true', '1', 'y', 'yes', '+']:
        return True
    elif value in ['f', 'false', '0', 'n', 'no', '-']:
        return False
    raise TypeError('casting to boolean failed', input_value)


class Namespace:
    """
    Namespace to hold module constants

    Example:
        >>> nspace = Namespace(thing=1, otherthing=2)
        >>> nspace.thing
        1
        >>> nspace.otherthing
        2
    """

    def __init__(self, *pos, **kwargs):
        object.__setattr__(self, '_types', {})
        object.__setattr__(self, '_members', {})
        object.__setattr__(self, '_env_prefix', PROGNAME.upper())

        for k in pos:
            if k in self._members:
                raise AttributeError('Cannot respecify existing attribute', k, self._members[k])
            self[k] = k

        for attr, val in kwargs.items():
            if attr in self._members:
                raise AttributeError('Cannot respecify existing attribute', attr, self._members[attr])
            self[attr] = val

        for attr, value in self._members.items():
            self._set_type(attr, type(value))

    def get_env_name(self, attr):
        """
        Get the name of the corresponding environment variable

        Example:
            >>> nspace = Namespace(a=1)
            >>> nspace.get_env_name('a')
            'VARCON_A'
        """
        return '{}_{}'.format(self._env_prefix, attr).upper()

    def get_env_var(self, attr):
        """
        retrieve the environment variable definition of a given attribute, cast to the type of the attribute
        """
        env = os.environ[self.get_env_name(attr)].strip()
        return self._types.get(attr, str)(env)

    def is_env_overwritable(self, attr):
        """
        Returns:
            bool: True if the variable is overrided by specifying the environment variable equivalent, never for a
            plain namespace
        """
        return False

    def __getattribute__(self, attr):
        try:
            return object.__getattribute__(self, attr)
        except AttributeError as err:
            variables = object.__getattribute__(self, '_members')
            if attr not in variables:
                raise err
            if self.is_env_overwritable(attr):
                try:
                    return self.get_env_var(attr)
                except KeyError:
                    pass
            return variables[attr]

    def items(self):
        """
        Example:
            >>> Namespace(thing=1, otherthing=2).items()
            [('thing', 1), ('otherthing', 2)]
        """
        return [(k, self[k]) for k in self.keys()]

    def __getitem__(self, key):
        return getattr(self, key)

    def __setitem__(self, key, val):
        self.__setattr__(key, val)

    def __setattr__(self, attr, val):
        if attr.startswith('_'):
            raise ValueError('cannot set private', attr)
        object.__getattribute__(self, '_members')[attr] = val

    def keys(self):
        return [k for k in self._members]

    def values(self):
        return [self[k] for k in self._members]

    def enforce(self, value):
        """
        checks that the current namespace has a given value

        Returns:
            the input value

        Raises:
            KeyError: the value did not exist

        Example:
            >>> nspace = Namespace(thing=1, otherthing=2)
            >>> nspace.enforce(1)
            1
            >>> nspace.enforce(3)
            Traceback (most recent call last):
            ....
        """
        if value not in self.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), self.values())
        return value

    def _set_type(self, attr, cast_type):
        if cast_type == bool:
            self._types[attr] = cast_boolean
        else:
            self._types[attr] = cast_type

    def add(self, attr, value, cast_type=None):
        """
        Add an attribute to the name space

        Args:
            attr (str): name of the attribute being added
            value: the value of the attribute
            cast_type (callable): the function to use in casting the environment variable value

        Example:
            >>> nspace = Namespace()
            >>> nspace.add('thing', 1)
        """
        self._set_type(attr, cast_type if cast_type else type(value))
        self[attr] = value


CODON_SIZE = 3
""":class:`int`: the number of bases making up a codon"""

STOP_AA = '*'
""":class:`str`: The amino acid expected to be a stop codon"""


def reverse_complement(s):
    """
    wrapper for the Bio.Seq reverse_complement method

    Args:
        s (str): the input DNA sequence

    Returns:
        :class:`str`: the reverse complement of the input sequence

    Warning:
        assumes the input is a DNA sequence

    Example:
        >>> reverse_complement('ATCCGGT')
        'ACCGGAT'
    """
    input_string = str(s)
    if not re.match('^[A-Za-z]*$', input_string):
        raise ValueError('unexpected sequence format. cannot reverse complement', input_string)
    return str(Seq(input_string).reverse_complement())


def translate(s, reading_frame=0):
    """
    given a DNA sequence, translates it and returns the protein amino acid sequence

    Args:
        s (str): the input DNA sequence
        reading_frame (int): where to start translating the sequence

    Returns:
        str: the amino acid sequence

    Example:
        >>> translate('ATGAAATAG')
        'MK*'
    """
    reading_frame = reading_frame % CODON_SIZE

    temp = s[reading_frame:]
    if len(temp) % 3 == 1:
        temp = temp[:-1]
    elif len(temp) % 3 == 2:
        temp = temp[:-2]
    return str(Seq(temp).translate())


STRAND = Namespace(POS='+', NEG='-')
""":class:`Namespace`: holds controlled vocabulary for allowed strand values

- ``POS``: the positive/forward strand
- ``NEG``: the negative/reverse strand
"""


def other_strand(strand):
    """
    Example:
        >>> other_strand(STRAND.POS)
        '-'
    """
    return STRAND.NEG if STRAND.enforce(strand) == STRAND.POS else STRAND.POS


GENOME_CHANGE_TYPE = Namespace(
    SNV='snv',
    INSERTION='insertion',
    DELETION='deletion',
    BLOCK_SUBSTITUTION='block substitution',
    STRUCTURAL='structural'
)
""":class:`Namespace`: the shape of an edit, selects the annotation builder

- ``SNV``: single reference base replaced by a single alternate base
- ``INSERTION``: empty reference allele
- ``DELETION``: empty alternate allele
- ``BLOCK_SUBSTITUTION``: non-empty alleles, at least one longer than a single base
- ``STRUCTURAL``: large or symbolic edit, annotated at the genomic level only
"""

PUTATIVE_IMPACT = Namespace(HIGH='HIGH', LOW='LOW', MODIFIER='MODIFIER')
""":class:`Namespace`: coarse impact buckets for variant types"""

RANK_TYPE = Namespace(EXON='exon', INTRON='intron', UNDEFINED='undefined')
""":class:`Namespace`: the kind of transcript feature an annotation location is ranked within"""

ANNOTATION_MESSAGE = Namespace(
    WARNING_REF_DOES_NOT_MATCH_GENOME='reference allele does not match the transcript sequence',
    WARNING_INCOMPLETE_CODON='codon runs past the end of the transcript sequence',
    WARNING_NO_STOP_CODON='no downstream stop codon found in the variant sequence',
)
""":class:`Namespace`: advisory messages attached to annotations, never abort processing"""
