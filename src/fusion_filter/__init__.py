"""
filters and deduplicates candidate gene fusion calls from RNA-seq fusion detection
"""
__version__ = '1.0.0'
