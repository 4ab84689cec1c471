from ..constants import RANK_TYPE
from .constants import most_severe


class AnnotationLocation:
    """
    where a change lies within the exon structure of a transcript
    """

    def __init__(self, rank_type=RANK_TYPE.UNDEFINED, rank=None, total=None, distances=None):
        """
        Args:
            rank_type (RANK_TYPE): the kind of feature the change lies in
            rank (int): one-based number of the exon or intron in transcript order
            total (int): the number of exons (or introns) of the transcript
            distances (tuple of int and int): for intronic changes, the number of bases to the upstream and downstream
                exon (in transcript direction)

        Example:
            >>> AnnotationLocation(RANK_TYPE.INTRON, 14, 15, distances=(24, 54))
        """
        self.rank_type = RANK_TYPE.enforce(rank_type)
        self.rank = rank
        self.total = total
        self.distances = distances

    def key(self):
        return (self.rank_type, self.rank, self.total, self.distances)

    def __eq__(self, other):
        if not isinstance(other, AnnotationLocation):
            return False
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __str__(self):
        if self.rank_type == RANK_TYPE.UNDEFINED:
            return RANK_TYPE.UNDEFINED
        return '{}{}/{}'.format(self.rank_type, self.rank, self.total)

    def __repr__(self):
        return 'AnnotationLocation({})'.format(str(self))


class Annotation:
    """
    the consequence of a genome change on a single transcript
    """

    def __init__(
        self, transcript, change, effects, location=None, nt_hgvs=None, protein_hgvs=None, messages=None
    ):
        """
        Args:
            transcript (TranscriptModel): the transcript, None for intergenic changes far from any transcript
            change (GenomeChange): the annotated change
            effects (list of VariantType): the variant types of the change, duplicates are dropped
            location (AnnotationLocation): the exon/intron the change lies in
            nt_hgvs (str): the HGVS nucleotide description (ex. ``c.91+24A>G``)
            protein_hgvs (str): the HGVS protein description (ex. ``p.K41R``), None where not applicable
            messages (list of ANNOTATION_MESSAGE): advisory messages collected while annotating

        Raises:
            AttributeError: no variant type was given
        """
        if not effects:
            raise AttributeError('an annotation requires at least one variant type', change)
        self.transcript = transcript
        self.change = change
        self.effects = tuple(sorted(set(effects)))
        self.location = location if location is not None else AnnotationLocation()
        self.nt_hgvs = nt_hgvs
        self.protein_hgvs = protein_hgvs
        self.messages = list(dict.fromkeys(messages or []))

    @property
    def accession(self):
        return self.transcript.accession if self.transcript else None

    @property
    def gene_symbol(self):
        return self.transcript.gene_symbol if self.transcript else None

    @property
    def most_severe_effect(self):
        """:class:`VariantType`: the most severe of the variant types"""
        return most_severe(self.effects)

    @property
    def putative_impact(self):
        return self.most_severe_effect.putative_impact

    def sort_key(self):
        """
        key ordering annotations from the most to the least severe. Ties are broken by transcript accession with
        annotations lacking a transcript sorted last
        """
        effect = self.most_severe_effect
        return (effect.priority_level, effect.order, self.transcript is None, self.accession or '')

    def hgvs_description(self):
        """
        Returns:
            str: the accession, nucleotide and protein description joined by colons

        Example:
            >>> annotation.hgvs_description()
            'uc001acf.3:c.1729+24A>G:p.='
        """
        parts = [self.accession, self.nt_hgvs, self.protein_hgvs]
        return ':'.join([p for p in parts if p])

    def to_dict(self):
        return {
            'transcript': self.accession,
            'gene': self.gene_symbol,
            'change': str(self.change),
            'effects': [effect.so_term for effect in self.effects],
            'impact': self.putative_impact,
            'location': str(self.location),
            'nt_hgvs': self.nt_hgvs,
            'protein_hgvs': self.protein_hgvs,
            'messages': list(self.messages),
        }

    def __str__(self):
        return '{}({})'.format('&'.join([effect.so_term for effect in self.effects]), self.hgvs_description())

    def __repr__(self):
        return 'Annotation({}, {}, {})'.format(self.accession, repr(self.change), str(self))


class AnnotationList:
    """
    all annotations of a single genome change, ordered from the most to the least severe
    """

    def __init__(self, change, annotations):
        self.change = change
        self.annotations = sorted(annotations, key=lambda x: x.sort_key())

    @property
    def highest_impact(self):
        """:class:`Annotation`: the most severe annotation, None if the list is empty"""
        return self.annotations[0] if self.annotations else None

    @property
    def effects(self):
        """list of VariantType: the variant types of all annotations, most severe first, without duplicates"""
        return sorted({effect for annotation in self.annotations for effect in annotation.effects})

    def __iter__(self):
        return iter(self.annotations)

    def __len__(self):
        return len(self.annotations)

    def __getitem__(self, index):
        return self.annotations[index]

    def __repr__(self):
        return 'AnnotationList({}, {})'.format(str(self.change), self.annotations)
