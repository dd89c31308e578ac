"""
Session module holding uploaded gene lists between requests.

An upload creates a session and hands its token back to the caller; a
later query presents the token to retrieve the same gene list.
"""

from geneannot.session.store import SessionStore

__all__ = ["SessionStore"]
