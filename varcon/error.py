class AnnotationError(Exception):
    """
    base class for all errors raised while annotating a genome change
    """
    pass


class InvalidGenomeChange(AnnotationError):
    """
    raised when a genome change does not fit the builder it was given to, or does not describe any change at all
    """
    pass


class ProjectionError(AnnotationError, IndexError):
    """
    raised when a position cannot be expressed in the requested coordinate system

    for example converting an intronic genome position to a transcript position
    """
    pass


class UnknownChromosomeError(AnnotationError, KeyError):
    """
    raised when a genome change references a chromosome missing from the reference dictionary
    """
    pass


class InvalidCoordinateError(AnnotationError):
    """
    raised when positions on different chromosomes are compared or subtracted
    """
    pass
