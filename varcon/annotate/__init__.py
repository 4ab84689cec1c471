"""
Sub-package Documentation
==========================

Coordinate Systems
--------------------

Three coordinate systems are used throughout the annotation sub-package. All are zero-based and half-open
internally, one-based display coordinates only appear in the rendered HGVS strings.

- genome coordinates (:class:`~varcon.interval.GenomePosition`) are given on a strand of a chromosome. On the
  reverse strand the offset counts from the end of the contig
- transcript coordinates (:class:`~varcon.annotate.genomic.TranscriptPosition`) are offsets into the spliced
  transcript sequence, counted from its 5' end
- CDS coordinates (:class:`~varcon.annotate.genomic.CDSPosition`) are offsets into the coding sequence, counted
  from the first base of the start codon

Algorithm Overview
----------------------

- resolve the chromosome of the genome change in the reference dictionary
- find the transcripts overlapping the change (or the nearest transcripts on either side)
- dispatch each transcript to the builder matching the shape of the change
- collect the per-transcript annotations into a ranked :class:`~varcon.annotate.variant.AnnotationList`
"""
