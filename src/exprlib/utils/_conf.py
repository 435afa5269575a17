# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

import configparser
import logging
import os

logger = logging.getLogger("exprlib.utils.conf")

ENV_PREFIX = "EXPRLIB_"

DEFAULT_CONFIG = {
    "logging": {
        "log_level": "WARNING",
    },
    "cli": {
        "prompt": "> ",
        "interactive": "true",
    },
}

CONFIG_FILES = [
    os.path.expanduser("~/.exprlibrc"),  # user-specific config
    "/etc/exprlib.ini",  # system-wide config
    "exprlib.ini",  # local directory config
]


class ConfigSection:
    """Wrapper for a config section to allow attribute-style access to options."""

    def __init__(self, section):
        self._section = section

    def __getattr__(self, name):
        if name in self._section:
            return self._section[name]
        raise AttributeError(f"No option '{name}' in this section")

    def __getitem__(self, key):
        return self._section[key]

    def get(self, option, fallback=None):
        return self._section.get(option, fallback)

    def getint(self, option, fallback=None):
        return self._section.getint(option, fallback)

    def getfloat(self, option, fallback=None):
        return self._section.getfloat(option, fallback)

    def getboolean(self, option, fallback=None):
        return self._section.getboolean(option, fallback)


class ConfMod:
    def __init__(self, name, config_files=None, environ=None):
        self.__name__ = name
        self.readrc(config_files, environ)

    def readrc(self, config_files=None, environ=None):
        """(re)load defaults, config files and environment overrides"""
        self.config = configparser.ConfigParser(interpolation=None)
        self.config.read_dict(DEFAULT_CONFIG)

        if config_files is None:
            config_files = CONFIG_FILES
        found_files = self.config.read(config_files)
        logger.debug(f"found {len(found_files)} config files: {found_files}")

        self._load_from_env(os.environ if environ is None else environ)

    def _load_from_env(self, environ):
        """Load configuration from environment variables.

        Format: EXPRLIB_SECTION_OPTION=value
        Example: EXPRLIB_LOGGING_LOG_LEVEL=DEBUG sets config['logging']['log_level']
        """
        for key, value in environ.items():
            if key.startswith(ENV_PREFIX):
                parts = key[len(ENV_PREFIX) :].lower().split("_", 1)
                if len(parts) == 2:
                    section, option = parts
                    if not self.config.has_section(section):
                        self.config.add_section(section)
                    self.config[section][option] = value

    def get(self, section, option, fallback=None, type_=str):
        """Get a configuration value with type conversion."""
        try:
            if type_ is bool:
                return self.config.getboolean(section, option)
            elif type_ is int:
                return self.config.getint(section, option)
            elif type_ is float:
                return self.config.getfloat(section, option)
            else:
                return self.config.get(section, option)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def __getattr__(self, name):
        # conf.cli.prompt instead of conf.get("cli", "prompt")
        config = self.__dict__.get("config")
        if config is not None and name in config:
            return ConfigSection(config[name])
        raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

    def __getitem__(self, section):
        return self.config[section]

    @property
    def log_level(self):
        return self.get("logging", "log_level", "WARNING")

    @property
    def prompt(self):
        return self.get("cli", "prompt", "> ")

    @property
    def interactive(self):
        return self.get("cli", "interactive", True, bool)
