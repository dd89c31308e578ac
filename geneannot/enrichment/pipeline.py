"""
Enrichment pipeline orchestration.

This module coordinates the per-gene query workflow:
Gene ID → ANNOq → PANTHER (keyed by ANNOq's gene ID) → Combined result

Genes are processed strictly one after another. The first failure from
either service aborts the run and no partial results are returned.
"""

import logging
from typing import Iterable, List

from geneannot.annotation import AnnoqClient, PantherClient
from geneannot.core.schemas import CombinedResult

logger = logging.getLogger(__name__)


class AnnotationPipeline:
    """
    Runs both annotation services over an uploaded gene list.

    PANTHER is queried with the identifier ANNOq returns rather than the
    uploaded one, so ANNOq may re-resolve aliases before the second lookup.
    """

    def __init__(self, annoq: AnnoqClient, panther: PantherClient):
        self.annoq = annoq
        self.panther = panther

    def annotate(self, gene_id: str) -> CombinedResult:
        """Query both services for one gene and merge the answers."""
        annoq_record = self.annoq.query(gene_id)

        if annoq_record.gene_id != gene_id:
            logger.info(f"ANNOq resolved '{gene_id}' to '{annoq_record.gene_id}'")

        panther_record = self.panther.query(annoq_record.gene_id)
        return CombinedResult.merge(annoq_record, panther_record)

    def run(self, genes: Iterable[str]) -> List[CombinedResult]:
        """
        Annotate every gene in input order.

        Raises:
            AnnotationServiceError: On the first failing call; earlier results are discarded.
        """
        genes = list(genes)
        logger.info(f"Annotating {len(genes)} gene(s)")

        results = [self.annotate(gene_id) for gene_id in genes]

        logger.info(f"Annotated {len(results)} gene(s)")
        return results
