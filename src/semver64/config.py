# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


"""
Warning and debug switches.

The switches only decide which messages are logged. Parsing, ordering and
prerelease synthesis never read them. See 'semver64config.yaml' for the
settings and the order in which they are layered.
"""
from semver64 import module_root_path
from semver64.utils.data_utils import cached_property, LazyAttributeMeta
from semver64.utils.logging_ import get_debug_printer, get_warning_printer
from semver64.exceptions import ConfigurationError
from schema import Schema, SchemaError
from functools import lru_cache
import json
import yaml
import os


class Switch(object):
    """Lazy validator for a boolean setting.

    Unless the config is locked, or the key has been overridden, the value
    read from config files gives way to $SEMVER64_<KEY>, then to
    $SEMVER64_<KEY>_JSON.
    """
    schema = Schema(bool)
    true_words = frozenset(["1", "true", "t", "yes", "y", "on"])
    false_words = frozenset(["0", "false", "f", "no", "n", "off"])

    def __init__(self, config, key):
        self.config = config
        self.key = key
        self.env_var_name = "SEMVER64_%s" % key.upper()

    def validate(self, data):
        try:
            return self.schema.validate(self._from_environment(data))
        except SchemaError as e:
            raise ConfigurationError("Misconfigured setting '%s': %s"
                                     % (self.key, str(e)))

    def _from_environment(self, data):
        if self.config.locked or self.key in self.config.overrides:
            return data

        value = os.getenv(self.env_var_name)
        if value is not None:
            return self._parse_word(value)

        varname = self.env_var_name + "_JSON"
        value = os.getenv(varname)
        if value is not None:
            try:
                return json.loads(value)
            except ValueError:
                raise ConfigurationError(
                    "Expected $%s to be JSON-encoded string." % varname)

        return data

    def _parse_word(self, value):
        word = value.lower()
        if word in self.true_words:
            return True
        elif word in self.false_words:
            return False

        words = sorted(self.true_words | self.false_words)
        raise ConfigurationError("Expected $%s to be one of: %s"
                                 % (self.env_var_name, ", ".join(words)))


config_schema = Schema({
    "debug_next_prerelease":                        Switch,
    "debug_all":                                    Switch,
    "debug_none":                                   Switch,
    "warn_lenient_corrections":                     Switch,
    "warn_all":                                     Switch,
    "warn_none":                                    Switch,
    "quiet":                                        Switch,
})


class Config(object, metaclass=LazyAttributeMeta):
    """semver64 settings.

    Use the `config` singleton rather than constructing a `Config` directly.
    Each setting is an attribute, validated the first time it is read.
    """
    schema = config_schema
    schema_error = ConfigurationError

    def __init__(self, filepaths, overrides=None, locked=False):
        """Create a config.

        Args:
            filepaths (list of str): YAML files to read, in increasing order
                of precedence. Missing files are skipped.
            overrides (dict): Settings that take precedence over all others.
            locked (bool): If True, environment variables are ignored.
        """
        self.filepaths = filepaths
        self.overrides = overrides or {}
        self.locked = locked

    def override(self, key, value):
        """Set a setting to the given value."""
        if key not in self._schema_keys:
            raise AttributeError("no such setting: %r" % key)

        self.overrides[key] = value
        self._uncache(key)

    def warn(self, key):
        """Returns True if the warning setting is enabled."""
        return (
            not self.quiet and not self.warn_none
            and (self.warn_all or getattr(self, "warn_%s" % key))
        )

    def debug(self, key):
        """Returns True if the debug setting is enabled."""
        return (
            not self.quiet and not self.debug_none
            and (self.debug_all or getattr(self, "debug_%s" % key))
        )

    def debug_printer(self, key):
        return get_debug_printer(self.debug(key))

    def warn_printer(self, key):
        return get_warning_printer(self.warn(key))

    def _uncache(self, key):
        # the class attribute underneath is the cached_property descriptor
        for name in (key, "_data"):
            if name in self.__dict__:
                delattr(self, name)

    def _swap(self, other):
        """Swap this config with another.

        The unit tests use this to shield the global config from user
        settings.
        """
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__

    def _validate_key(self, key, value, key_schema):
        return key_schema(self, key).validate(value)

    @cached_property
    def _data(self):
        data = {}
        for filepath in self.filepaths:
            if os.path.isfile(filepath):
                data.update(_load_config_yaml(filepath))

        data.update(self.overrides)
        return data

    @classmethod
    def _create_main_config(cls):
        filepaths = [get_module_root_config()]

        filepath = os.getenv("SEMVER64_CONFIG_FILE")
        if filepath:
            filepaths.extend(filepath.split(os.pathsep))

        if os.getenv("SEMVER64_DISABLE_HOME_CONFIG", "").lower() not in ("1", "t", "true"):
            filepaths.append(os.path.expanduser("~/.semver64config"))

        return cls(filepaths)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.filepaths)


def _create_locked_config(overrides=None):
    """Create a config that only reads the bundled defaults.

    Home and $SEMVER64_CONFIG_FILE configs are not read, and environment
    variables are ignored.
    """
    return Config([get_module_root_config()], overrides=overrides, locked=True)


@lru_cache()
def _load_config_yaml(filepath):
    with open(filepath) as f:
        content = f.read()
    try:
        doc = yaml.load(content, Loader=yaml.FullLoader) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError("Error loading configuration from %s: %s"
                                 % (filepath, str(e)))

    if not isinstance(doc, dict):
        raise ConfigurationError("Error loading configuration from %s: Expected "
                                 "dict, got %s" % (filepath, type(doc).__name__))
    return doc


def get_module_root_config():
    return os.path.join(module_root_path, "semver64config.yaml")


# singleton
config = Config._create_main_config()
