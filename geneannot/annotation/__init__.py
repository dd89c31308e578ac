"""
Annotation module for the external gene annotation services.

Each client wraps exactly one blocking GET against its service and decodes
the JSON body into a fixed-shape record:
- ANNOq: gene identifier -> annotation
- PANTHER: gene identifier -> additional information
"""

from geneannot.annotation.annoq import AnnoqClient
from geneannot.annotation.panther import PantherClient

__all__ = ["AnnoqClient", "PantherClient"]
