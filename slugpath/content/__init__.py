from .loader import load_build_config, load_descriptors

__all__ = ["load_build_config", "load_descriptors"]
