"""
Central roller registry and registration decorator.
Use @register_roller("name") above your roller class to make it available to the CLI and simulation scripts.
All roller modules in this directory are imported here so registration happens on package import.
"""

ROLLER_MAP = {}

def register_roller(name):
	"""
	Decorator to register a roller class under a given name.
	Usage:
		@register_roller("coin")
		class CoinRoller(Roller): ...
	"""
	def decorator(cls):
		ROLLER_MAP[name] = cls
		return cls
	return decorator

# Automatically import all roller modules in this directory to ensure registration decorators run
import importlib
import os
import pkgutil

_this_dir = os.path.dirname(__file__)
_pkg_name = __name__
for _, modname, ispkg in pkgutil.iter_modules([_this_dir]):
	if not ispkg and modname not in ("__init__", "base"):
		importlib.import_module(f"{_pkg_name}.{modname}")
