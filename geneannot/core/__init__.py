"""
Core module for shared configuration, schemas, and errors.

This module provides foundational components used across the application:
- Configuration management
- Pydantic schemas for upstream records and API responses
- The exception hierarchy mapped to HTTP error responses
"""
