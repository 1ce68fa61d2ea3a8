"""Configuration schema and loading for carcass and merge documents.

Public API:
    - CarcassDocument: Root model of a carcass configuration file
    - SlabMergeDocument: Root model of a slab merge file
    - load_config / load_config_from_dict: Load a carcass document
    - load_merge_config / load_merge_config_from_dict: Load a merge document
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - validate_config: Layout checks on a loaded carcass document
    - LAYOUT_CHECKS: The same checks as named groups, in report order
    - config_to_*: Convert configuration models to domain objects

Example:
    >>> from pathlib import Path
    >>> from cabinetry.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     doc = load_config(Path("base-600.json"))
    ...     print(f"{doc.cabinet_type.value}: {doc.dimensions.width}mm wide")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinetry.application.config.adapter import (
    config_to_carcass_config,
    config_to_defaults,
    config_to_dimensions,
    config_to_material,
    config_to_slabs,
)
from cabinetry.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_merge_config,
    load_merge_config_from_dict,
)
from cabinetry.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CarcassDocument,
    CarcassFeaturesConfig,
    DefaultsConfig,
    DimensionsConfig,
    DoorMaterialConfig,
    MaterialConfig,
    SlabConfig,
    SlabMergeDocument,
)
from cabinetry.application.config.validator import (
    LAYOUT_CHECKS,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schemas
    "SUPPORTED_VERSIONS",
    "CarcassDocument",
    "CarcassFeaturesConfig",
    "DefaultsConfig",
    "DimensionsConfig",
    "DoorMaterialConfig",
    "MaterialConfig",
    "SlabConfig",
    "SlabMergeDocument",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "load_merge_config",
    "load_merge_config_from_dict",
    # Validation
    "LAYOUT_CHECKS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
    # Adapters
    "config_to_carcass_config",
    "config_to_defaults",
    "config_to_dimensions",
    "config_to_material",
    "config_to_slabs",
]
