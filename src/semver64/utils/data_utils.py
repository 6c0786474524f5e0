# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


"""
Lazily validated attributes.
"""


class cached_property(object):
    """Property that replaces itself with its value on first access.

    Deleting the instance attribute makes the next access compute it again.
    """
    def __init__(self, func, name=None):
        self.func = func
        self.name = name or func.__name__

    def __get__(self, instance, owner=None):
        if instance is None:
            return self

        result = self.func(instance)
        setattr(instance, self.name, result)
        return result


class LazyAttributeMeta(type):
    """Metaclass that turns each key of a class's `schema` into an attribute.

    Reading the attribute looks the key up in the instance's `_data` dict,
    passes the value through the instance's `_validate_key` method and caches
    the result. A key missing from `_data` raises the class's `schema_error`.

    The frozenset of keys is stored as `_schema_keys`.
    """
    def __new__(cls, name, parents, members):
        schema = members.get("schema")

        if schema:
            keys = frozenset(schema._schema)
            for key in keys:
                members[key] = cls._make_getter(key, schema._schema[key])
            members["_schema_keys"] = keys

        return super(LazyAttributeMeta, cls).__new__(cls, name, parents, members)

    @classmethod
    def _make_getter(cls, key, key_schema):
        def getter(self):
            if key not in self._data:
                raise self.schema_error("Required key is missing: %r" % key)

            return self._validate_key(key, self._data[key], key_schema)

        return cached_property(getter, name=key)
