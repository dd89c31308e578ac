"""
API module for HTTP interface.

This module contains the FastAPI application and route definitions
for the gene annotation service.

Endpoints:
- Health check
- Gene list upload
- Combined annotation query
"""
