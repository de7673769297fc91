"""
Elasticsearch Initialization Module
Creates the entry index on startup and rebuilds it from the store on demand
"""

import logging

import click

logger = logging.getLogger(__name__)


def _resolve_es_repo():
    from .di_container import DIContainer
    from ..repo.es.interfaces import ESEntryRepositoryInterface
    return DIContainer.get_instance().resolve(ESEntryRepositoryInterface.__name__)


def initialize_elasticsearch():
    """
    Ensure the entry index exists with the expected mapping.

    An unreachable cluster is logged and tolerated: the app still starts and
    search/write requests fail until the cluster is back.

    Returns:
        bool: True if the index exists or was created
    """
    try:
        es_repo = _resolve_es_repo()
        if es_repo.ensure_index():
            logger.info(f"[INIT] Elasticsearch index '{es_repo.INDEX_NAME}' ready")
            return True
        logger.warning(f"[INIT] Elasticsearch index '{es_repo.INDEX_NAME}' could not be created")
        return False
    except Exception as es_error:
        logger.warning(f"[INIT] Elasticsearch initialization failed: {es_error}")
        logger.warning("[INIT] Search and entry writes will fail until Elasticsearch is reachable")
        return False


def reindex_entries():
    """
    Drop and rebuild the entry index from the relational store.

    Must run inside an application context.
    """
    from .di_container import DIContainer
    from ..service.entry_service import EntryService

    entry_service = DIContainer.get_instance().resolve(EntryService.__name__)
    return entry_service.reindex_all()


def register_commands(app):
    """Attach the index maintenance commands to ``flask``."""

    @app.cli.command("reindex-entries")
    def reindex_entries_command():
        """Rebuild the Elasticsearch entry index from the database."""
        result = reindex_entries()
        click.echo(f"Indexed {result['indexed']} entries ({result['failed']} failed)")
