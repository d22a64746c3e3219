"""Exception hierarchy for ldraw-packer."""


class PackerError(Exception):
    """Base exception for all packing errors."""


class RootNotFoundError(PackerError):
    """The root model could not be read under any search location."""


class MaterialsNotFoundError(PackerError):
    """The materials header (LDConfig.ldr) could not be read."""


class LookupServiceError(PackerError):
    """The identifier lookup service could not be reached or answered garbage."""


class SettingsError(PackerError):
    """The settings file exists but could not be parsed."""
