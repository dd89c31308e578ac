"""
Gene annotation service.

Accepts an uploaded gene list, queries the ANNOq and PANTHER annotation
services for every gene and returns one combined record per gene.
"""

__version__ = "0.1.0"
