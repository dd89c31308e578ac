"""
Enrichment module combining the two annotation services.

For every uploaded gene the pipeline queries ANNOq, then PANTHER with the
identifier ANNOq returned, and merges both answers into one flat record.
"""

from geneannot.enrichment.pipeline import AnnotationPipeline

__all__ = ["AnnotationPipeline"]
