"""ANNOq annotation client."""

import httpx

from geneannot.annotation.http import fetch_record
from geneannot.core.schemas import AnnoqRecord


class AnnoqClient:
    """Queries ANNOq for the annotation of a single gene."""

    SERVICE = "ANNOq"

    def __init__(self, http: httpx.Client, base_url: str):
        self.http = http
        self.base_url = base_url

    def query(self, gene_id: str) -> AnnoqRecord:
        return fetch_record(self.http, self.SERVICE, self.base_url, gene_id, AnnoqRecord)
