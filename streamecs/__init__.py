"""Building blocks for an entity-component-system: entity keys, type lookups, resources, resource bundles and dependency containers."""

__version__ = "0.0.0"