# inkwell/managers/__init__.py

"""
Lazy imports - import the cache manager from its own module.

Configuration imports `cache_types` during startup, so this file must stay
free of imports that reach back into `inkwell.configs`.
"""
