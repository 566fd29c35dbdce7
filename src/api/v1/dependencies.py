"""
API Dependencies: Dependency Injection Container
"""

import logging
from functools import lru_cache

from fastapi import Depends

from application.ports.pdf_extractor import IPDFExtractor
from application.ports.statement_parser import IStatementParser
from application.ports.transaction_store import ITransactionStore
from application.use_cases.import_statement import ImportStatementUseCase
from domain.entities.category import Category
from infrastructure.pdf.pymupdf_extractor import PyMuPDFExtractor
from infrastructure.mpesa.statement_parser import MpesaStatementParser
from infrastructure.database.postgres_adapter import PostgresTransactionStore
from infrastructure.database.memory_store import InMemoryTransactionStore
from config import settings

logger = logging.getLogger(__name__)


# Global store instance for connection pooling
_store_instance: ITransactionStore | None = None


def build_memory_store() -> InMemoryTransactionStore:
    """In-process store seeded with the system M-Pesa category"""
    return InMemoryTransactionStore(categories=[
        Category(id=1, name=settings.DEFAULT_CATEGORY_NAME, is_default=True,
                 description="Imported M-Pesa transactions")
    ])


async def get_transaction_store() -> ITransactionStore:
    """Get transaction store implementation (PostgreSQL or in-memory)"""
    global _store_instance

    if _store_instance is None:
        if settings.USE_IN_MEMORY_STORE:
            logger.info("Using in-memory transaction store")
            _store_instance = build_memory_store()
        else:
            store = PostgresTransactionStore(
                connection_string=settings.DATABASE_URL,
                min_pool_size=settings.DATABASE_MIN_SIZE,
                max_pool_size=settings.DATABASE_MAX_SIZE
            )
            await store.connect()
            _store_instance = store

    return _store_instance


async def close_transaction_store():
    """Close transaction store connections"""
    global _store_instance

    if _store_instance is not None:
        await _store_instance.close()
        _store_instance = None


@lru_cache()
def get_pdf_extractor() -> IPDFExtractor:
    """Get PDF extractor implementation"""
    return PyMuPDFExtractor()


@lru_cache()
def get_statement_parser() -> IStatementParser:
    """Get statement parser implementation"""
    return MpesaStatementParser()


def get_import_use_case(
    store: ITransactionStore = Depends(get_transaction_store)
) -> ImportStatementUseCase:
    """Get import statement use case with injected dependencies"""

    return ImportStatementUseCase(
        pdf_extractor=get_pdf_extractor(),
        statement_parser=get_statement_parser(),
        store=store
    )
