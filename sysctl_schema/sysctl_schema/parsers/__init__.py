from .config_loader import LoadedConfig, load_config_file, parse_config_text
from .schema_parser import compile_schema, load_schema_file

__all__ = [
    "LoadedConfig",
    "load_config_file",
    "parse_config_text",
    "compile_schema",
    "load_schema_file",
]
