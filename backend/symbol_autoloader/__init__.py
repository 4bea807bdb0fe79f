__all__ = ["__version__"]

# Package version from installed distribution metadata; a bare source
# checkout falls back to a local dev version string.
try:
	from importlib.metadata import version, PackageNotFoundError
	try:
		__version__ = version("symbol-autoloader")
	except PackageNotFoundError:
		__version__ = "0.0.0+local"
except Exception:
	__version__ = "0.0.0+local"
