import ingestion.categories as categories
from ingestion.listing import unwrap_list

_INGESTION_MODULES = {
    "categories": categories,
}

__all__ = ["get_ingestion_module", "get_available_modules", "unwrap_list"]


def get_ingestion_module(module_name: str):
    """Get an ingestion module by resource name."""
    if module_name not in _INGESTION_MODULES:
        raise ValueError(f"Unknown ingestion module: {module_name}")
    return _INGESTION_MODULES[module_name]


def get_available_modules():
    """Get list of available ingestion modules."""
    return list(_INGESTION_MODULES.keys())
