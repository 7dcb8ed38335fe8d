from .master_configuration_repository import MasterConfigurationRepository

__all__ = [
    'MasterConfigurationRepository',
]
