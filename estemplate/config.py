#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
from envyaml import EnvYAML

from estemplate.logger import logger
from estemplate.utils import nest

# Lower case names, as used in other Elastic configuration files, to the
# Python log level names
log_level_mappings = {
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "error": "ERROR",
    "fatal": "CRITICAL",
    "unknown": "NOTSET",
}


def load_config(config_file=None):
    """Load the configuration file on top of the defaults.

    `${VAR}` references in the file are interpolated from the environment.
    """
    configuration = _default_config()
    if config_file is not None:
        logger.info(f"Loading config from {config_file}")
        configuration = dict(_merge_dicts(configuration, EnvYAML(config_file).export()))
    _check_log_level(configuration)
    return configuration


def _default_config():
    return {
        "service": {
            "log_level": "INFO",
        },
        "render": {
            "indent": 2,
            "sort_keys": True,
            "include_name": True,
            "validate": False,
        },
    }


def _check_log_level(configuration):
    log_level = configuration["service"]["log_level"]
    if log_level in log_level_mappings:
        log_level = log_level_mappings[log_level]
    if log_level not in log_level_mappings.values():
        msg = f"Unexpected log level: {log_level}. Allowed values: {', '.join(log_level_mappings.keys())}"
        raise ValueError(msg)
    _update_config_field(configuration, "service.log_level", log_level)


def _update_config_field(configuration, field, value):
    """
    Update configuration field value taking into account the nesting.

    Configuration is a hash of hashes, so we need to dive inside to do proper assignment.

    E.g. _update_config_field({}, "render.indent", 4) will result in the following config:
    {
        "render": {
            "indent": 4
        }
    }
    """
    nest(configuration, field, value)
    logger.debug(f"Overridden {field}")


def _merge_dicts(hsh1, hsh2):
    for k in set(hsh1.keys()).union(hsh2.keys()):
        if k in hsh1 and k in hsh2:
            if isinstance(hsh1[k], dict) and isinstance(hsh2[k], dict):  # only merge objects
                yield (k, dict(_merge_dicts(hsh1[k], hsh2[k])))
            else:
                yield (k, hsh2[k])
        elif k in hsh1:
            yield (k, hsh1[k])
        else:
            yield (k, hsh2[k])
