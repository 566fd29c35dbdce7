"""
Test suite for the M-Pesa Statement Importer.

Architecture: Hexagonal (Ports & Adapters)
Testing Strategy:
- Unit tests: amount/date helpers, line classifier, summary parser, entities
- Adapter tests: PyMuPDF extractor on generated PDFs, stores
- Use case tests: import workflow against an in-memory store
- API tests: FastAPI TestClient with dependency overrides
"""
