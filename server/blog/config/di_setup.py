from ..core.di_container import DIContainer


def setup_dependencies(config, overrides=None):
    """
    Register all dependencies in a fresh container.

    Args:
        config: Application config mapping (ELASTICSEARCH_* settings)
        overrides: Optional {key: implementation} registered last
    """
    from ..repo.postgre.interfaces import EntryInterface, UserInterface
    from ..repo.es.interfaces import ESEntryRepositoryInterface

    from ..repo.postgre.implementations import EntryRepository, UserRepository
    from ..repo.es.es_entry_repository import ESEntryRepository
    from ..core.clients.elasticsearch_client import ElasticsearchClient

    from ..service.entry_service import EntryService
    from ..service.auth_service import AuthService

    DIContainer.reset()
    container = DIContainer.get_instance()

    # PostgreSQL repositories are stateless; one instance each
    container.register(EntryInterface.__name__, EntryRepository())
    container.register(UserInterface.__name__, UserRepository())

    # The ES repository is built on first resolve so startup does not need a client
    es_repo_holder = {}

    def create_es_entry_repository(container):
        if "repo" not in es_repo_holder:
            es_repo_holder["repo"] = ESEntryRepository(
                ElasticsearchClient.get_instance(config),
                index_name=config.get("ELASTICSEARCH_ENTRY_INDEX"),
            )
        return es_repo_holder["repo"]

    container.register(ESEntryRepositoryInterface.__name__, create_es_entry_repository)

    def create_entry_service(container):
        entry_repo = container.resolve(EntryInterface.__name__)
        es_entry_repo = container.resolve(ESEntryRepositoryInterface.__name__)
        return EntryService(entry_repo, es_entry_repo)

    def create_auth_service(container):
        user_repo = container.resolve(UserInterface.__name__)
        return AuthService(user_repo)

    container.register(EntryService.__name__, create_entry_service)
    container.register(AuthService.__name__, create_auth_service)

    for key, implementation in (overrides or {}).items():
        container.register(key, implementation)

    return container


# Initialize the dependency injection system
def init_di(config, overrides=None):
    """Initialize the dependency injection system.
    Call this function from the application factory."""
    return setup_dependencies(config, overrides=overrides)
