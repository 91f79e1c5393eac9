"""
Dependency injection container for langpref.

Builds the single LanguagePreference for the process and hands out its
collaborators by name.
"""

from typing import Dict, Any, Callable, Optional
import structlog
from abc import ABC, abstractmethod

from langpref.config.settings import Settings

logger = structlog.get_logger(__name__)


class Provider(ABC):
    """Base provider class for dependency injection."""

    @abstractmethod
    def provide(self, container: 'DIContainer') -> Any:
        """Provide the dependency."""
        pass


class FactoryProvider(Provider):
    """Factory provider that creates new instances."""

    def __init__(self, factory: Callable, *args, **kwargs):
        self.factory = factory
        self.args = args
        self.kwargs = kwargs

    def provide(self, container: 'DIContainer') -> Any:
        """Create new instance using factory."""
        return self.factory(*self.args, **self.kwargs)


class SingletonProvider(Provider):
    """Singleton provider that caches instances."""

    def __init__(self, factory: Callable, *args, **kwargs):
        self.factory = factory
        self.args = args
        self.kwargs = kwargs
        self._instance = None
        self._created = False

    def provide(self, container: 'DIContainer') -> Any:
        """Get or create singleton instance."""
        if not self._created:
            self._instance = self.factory(*self.args, **self.kwargs)
            self._created = True

        return self._instance


class ValueProvider(Provider):
    """Value provider that returns static values."""

    def __init__(self, value: Any):
        self.value = value

    def provide(self, container: 'DIContainer') -> Any:
        """Return static value."""
        return self.value


class DIContainer:
    """Lightweight dependency injection container."""

    def __init__(self):
        self._providers: Dict[str, Provider] = {}

    def register(self, name: str, provider: Provider):
        """Register a provider with a name."""
        self._providers[name] = provider
        logger.debug("Provider registered", name=name, provider_type=type(provider).__name__)

    def factory(self, name: str, factory: Callable, *args, **kwargs):
        """Register a factory provider."""
        self.register(name, FactoryProvider(factory, *args, **kwargs))

    def singleton(self, name: str, factory: Callable, *args, **kwargs):
        """Register a singleton provider."""
        self.register(name, SingletonProvider(factory, *args, **kwargs))

    def value(self, name: str, value: Any):
        """Register a value provider."""
        self.register(name, ValueProvider(value))

    def get(self, name: str) -> Any:
        """Get dependency by name."""
        if name not in self._providers:
            raise KeyError(f"Provider '{name}' not found")

        return self._providers[name].provide(self)

    def has(self, name: str) -> bool:
        """Check if provider exists."""
        return name in self._providers


class ApplicationContainer:
    """Main application container with pre-configured providers."""

    def __init__(self):
        self.container = DIContainer()
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self, config: Settings):
        """Initialize container with configuration."""
        if self._initialized:
            logger.warning("Container already initialized")
            return

        logger.info("Initializing DI container")

        self._register_localization_providers(config)

        self._initialized = True
        logger.info("DI container initialized successfully")

    def _register_localization_providers(self, config: Settings):
        """Register settings store, device locales and the language preference."""
        from langpref.localization import (
            EnvironmentLocaleProvider,
            JsonFileSettingsStore,
            LanguagePreference,
            PresentationRefresher,
        )

        self.container.singleton("settings_store", JsonFileSettingsStore, config.settings_file)
        self.container.factory("device_locale_provider", EnvironmentLocaleProvider)

        def create_language_preference():
            return LanguagePreference(
                store=self.container.get("settings_store"),
                device_locales=self.container.get("device_locale_provider"),
                preference_key=config.preference_key,
            )

        self.container.singleton("language_preference", create_language_preference)

        # Hosts pass their own root rebuilder when they register the callback
        def create_presentation_refresher(rebuild_root=None):
            return PresentationRefresher(
                rebuild_root=rebuild_root,
                transition_duration=config.transition_duration,
            )

        self.container.value("presentation_refresher_factory", create_presentation_refresher)

    def get(self, name: str) -> Any:
        """Get dependency by name."""
        return self.container.get(name)

    def has(self, name: str) -> bool:
        """Check if dependency exists."""
        return self.container.has(name)

    def shutdown(self):
        """Shutdown container."""
        logger.info("Shutting down DI container")
        self._initialized = False
        logger.info("DI container shutdown complete")


# Global container instance
_global_container: Optional[ApplicationContainer] = None


def initialize_di(config: Settings) -> ApplicationContainer:
    """Initialize the global DI container."""
    global _global_container

    if _global_container is None:
        _global_container = ApplicationContainer()

    _global_container.initialize(config)
    return _global_container


def get_di_container() -> ApplicationContainer:
    """Get the global DI container."""
    if _global_container is None:
        raise RuntimeError("DI container not initialized. Call initialize_di() first.")
    return _global_container


def shutdown_di():
    """Shutdown the global DI container."""
    global _global_container

    if _global_container:
        _global_container.shutdown()
        _global_container = None
