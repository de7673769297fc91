class DIContainer:
    """
    Process-wide registry of repositories and services.

    A registration is either an instance (returned as-is), a class
    (instantiated on every resolve) or a factory taking the container.
    """

    _instance = None

    def __init__(self):
        self._dependencies = {}

    @classmethod
    def get_instance(cls):
        """Singleton pattern to get the container instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls):
        """Drop the current container; the next get_instance() starts empty."""
        cls._instance = None

    def register(self, key, implementation):
        """Register (or replace) the implementation for a key."""
        self._dependencies[key] = implementation

    def is_registered(self, key):
        return key in self._dependencies

    def resolve(self, key):
        """Resolve an implementation for a key."""
        if key not in self._dependencies:
            raise KeyError(f"No implementation registered for {key}")

        implementation = self._dependencies[key]

        if isinstance(implementation, type):
            return implementation()

        # Factory functions receive the container so they can resolve their own dependencies
        if callable(implementation):
            return implementation(self)

        return implementation
