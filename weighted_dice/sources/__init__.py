"""
Central random source registry and registration decorator.
Use @register_source("name") above a RandomSource subclass to make it selectable from the CLI and scripts.
All source modules in this directory are imported here so registration happens on package import.
"""

SOURCE_MAP = {}

def register_source(name):
	"""
	Decorator to register a random source class under a given name.
	Usage:
		@register_source("mersenne")
		class MersenneTwisterSource(RandomSource): ...
	"""
	def decorator(cls):
		SOURCE_MAP[name] = cls
		return cls
	return decorator

# Import every source module so the registration decorators run
import importlib
import os
import pkgutil

_this_dir = os.path.dirname(__file__)
_pkg_name = __name__
for _, modname, ispkg in pkgutil.iter_modules([_this_dir]):
	if not ispkg and modname not in ("__init__", "base"):
		importlib.import_module(f"{_pkg_name}.{modname}")
