"""Custom exceptions shared by all layers."""


class CatalogError(Exception):
    """Top-level exception for anything raised by this application."""


class RepositoryError(CatalogError):
    """Storage layer could not complete an operation."""


class NotFoundError(CatalogError):
    """Requested record does not exist."""

    def __init__(self, entity: str, record_id: str) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} with id={record_id!r} not found.")


class ConfigurationError(CatalogError):
    """Settings could not be interpreted."""


class NotImplementedFeatureError(CatalogError):
    """Feature is exposed on the API surface but has no implementation yet."""

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"{feature} not yet implemented")
