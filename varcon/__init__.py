"""
varcon annotates genome changes (SNVs, small indels, block substitutions and structural edits) against a database
of transcript models. For every affected transcript it produces a ranked variant type classification and HGVS-style
nomenclature.
"""
__version__ = '0.1.0'
