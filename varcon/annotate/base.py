import re

from ..error import UnknownChromosomeError


class ReferenceName(str):
    """
    Class for reference sequence names. Ensures that hg19/hg38 chromosome names match.

    Example:
        >>> ReferenceName('chr1') == ReferenceName('1')
        True
    """
    @property
    def normalized(self):
        """str: the name without any leading ``chr`` prefix"""
        return re.sub('^chr', '', str(self))

    def __eq__(self, other):
        return self.normalized == ReferenceName(other).normalized

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.normalized)

    def __lt__(self, other):
        return str.__lt__(self.normalized, ReferenceName(other).normalized)

    def __gt__(self, other):
        return str.__gt__(self.normalized, ReferenceName(other).normalized)

    def __ge__(self, other):
        if self == other:
            return True
        return self.__gt__(other)

    def __le__(self, other):
        if self == other:
            return True
        return self.__lt__(other)


class ReferenceDictionary:
    """
    maps chromosome ids to names and lengths

    Contigs are identified internally by an integer id. Names (and any registered aliases) resolve to the id
    regardless of a ``chr`` prefix.
    """

    def __init__(self, contigs=None, aliases=None):
        """
        Args:
            contigs (list of tuple of str and int): the (name, length) pairs of the contigs, ids are assigned in order
                starting at 1
            aliases (dict of str by str): additional names mapping to an existing contig name

        Example:
            >>> ref_dict = ReferenceDictionary([('chr1', 249250621), ('chr2', 243199373)], aliases={'MT': 'chrM'})
        """
        self.contig_id = {}
        self.contig_name = {}
        self.contig_length = {}
        for name, length in (contigs or []):
            self.add_contig(name, length)
        for alias, name in (aliases or {}).items():
            self.add_alias(alias, name)

    def add_contig(self, name, length, contig_id=None):
        """
        register a new contig

        Returns:
            int: the id of the new contig

        Raises:
            AttributeError: the name or id is already in use
        """
        name = ReferenceName(name)
        if contig_id is None:
            contig_id = max(self.contig_name.keys(), default=0) + 1
        if contig_id in self.contig_name:
            raise AttributeError('contig id is already in use', contig_id, self.contig_name[contig_id])
        if name.normalized in self.contig_id:
            raise AttributeError('contig name is already in use', name)
        self.contig_id[name.normalized] = contig_id
        self.contig_name[contig_id] = name
        self.contig_length[contig_id] = int(length)
        return contig_id

    def add_alias(self, alias, name):
        contig_id = self.resolve(name)
        self.contig_id[ReferenceName(alias).normalized] = contig_id

    def resolve(self, chr):
        """
        get the contig id for a chromosome name or id

        Args:
            chr (str or int): the chromosome name (with or without chr prefix), alias or id

        Raises:
            UnknownChromosomeError: the chromosome is not part of the reference dictionary

        Example:
            >>> ref_dict.resolve('chr1')
            1
            >>> ref_dict.resolve('1')
            1
        """
        if isinstance(chr, int) and not isinstance(chr, bool):
            if chr in self.contig_name:
                return chr
            raise UnknownChromosomeError('unknown chromosome id', chr)
        try:
            return self.contig_id[ReferenceName(chr).normalized]
        except KeyError:
            raise UnknownChromosomeError('unknown chromosome', chr)

    def __contains__(self, chr):
        try:
            self.resolve(chr)
        except UnknownChromosomeError:
            return False
        return True

    def __len__(self):
        return len(self.contig_name)

    def __repr__(self):
        return 'ReferenceDictionary({})'.format(
            ', '.join(['{}={}'.format(self.contig_name[i], self.contig_length[i]) for i in sorted(self.contig_name)]))
