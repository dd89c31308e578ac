"""PANTHER annotation client."""

import httpx

from geneannot.annotation.http import fetch_record
from geneannot.core.schemas import PantherRecord


class PantherClient:
    """Queries PANTHER for supplementary information on a single gene."""

    SERVICE = "PANTHER"

    def __init__(self, http: httpx.Client, base_url: str):
        self.http = http
        self.base_url = base_url

    def query(self, gene_id: str) -> PantherRecord:
        return fetch_record(self.http, self.SERVICE, self.base_url, gene_id, PantherRecord)
