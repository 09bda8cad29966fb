"""
Core package for the backend service.

This package contains the main application logic and components including:
- Data classes for file records, conversations and charts
- Services for storage, text extraction, context selection and LLM integration
- API routes and endpoints
- A client for the HTTP API
"""
