"""
Ingestion module for uploaded gene lists.

This module turns an uploaded delimited-text file into the ordered list of
gene identifiers that the enrichment pipeline queries:
1. Choosing the delimiter from the uploaded filename
2. Decoding the raw bytes
3. Skipping the header row and taking the first column of every data row
"""

from geneannot.ingestion.parser import delimiter_for, parse_genes

__all__ = ["delimiter_for", "parse_genes"]
