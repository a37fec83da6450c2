from constants import *
import copy
import yaml
import os

import logging

# Retrieve main logger
logger = logging.getLogger("main")


# Cache variable
_cached_settings = None


def _merge_defaults(settings, config_file):
    """Deep merge user settings over DEFAULT_SETTINGS, one level deep"""
    merged_settings = copy.deepcopy(DEFAULT_SETTINGS)
    if not isinstance(settings, dict):
        logger.warning(f"Configuration file {config_file} is not a mapping, using defaults.")
        return merged_settings

    for section, values in settings.items():
        if isinstance(values, dict) and section in merged_settings and isinstance(merged_settings[section], dict):
            merged_settings[section].update(values)
        else:
            merged_settings[section] = values

    # Invalid sections fall back to their defaults
    for section in DEFAULT_SETTINGS:
        success, errors = verify_settings(section, merged_settings[section])
        if not success:
            for error in errors:
                logger.warning(f"Invalid setting {error['path']}: {error['error']} Using default.")
            merged_settings[section] = copy.deepcopy(DEFAULT_SETTINGS[section])
    return merged_settings


def load_settings(force=False, config_file=None):
    global _cached_settings

    if _cached_settings and not force:
        return _cached_settings

    config_file = config_file or CONFIG_FILE

    if os.path.exists(config_file):
        logger.debug(f"Reading configuration file: {config_file}")
        with open(config_file, "r") as yaml_file:
            settings = yaml.safe_load(yaml_file) or {}
        settings = _merge_defaults(settings, config_file)
    else:
        settings = copy.deepcopy(DEFAULT_SETTINGS)
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "w") as yaml_file:
            yaml.dump(settings, yaml_file)
        logger.info(f"Created default configuration file: {config_file}")

    # Environment wins over the file for the database location
    if os.environ.get("TAGBOARD_DB"):
        settings["database"]["uri"] = os.environ["TAGBOARD_DB"]

    _cached_settings = settings
    return settings


def reset_settings_cache():
    global _cached_settings
    _cached_settings = None


def verify_settings(section, data):
    success = True
    errors = []
    if not isinstance(data, dict):
        return False, [{"path": section, "error": "Section must be a mapping."}]
    if section == "tag_cloud":
        classes = data.get("classes")
        if not isinstance(classes, list) or not classes:
            success = False
            errors.append({"path": "tag_cloud/classes", "error": "At least one tag cloud class is required."})
        elif any(not isinstance(c, str) or not c.strip() for c in classes):
            success = False
            errors.append({"path": "tag_cloud/classes", "error": "Tag cloud classes must be non-empty strings."})
    elif section == "database":
        if not data.get("uri"):
            success = False
            errors.append({"path": "database/uri", "error": "Database URI is required."})
    return success, errors


def get_tag_cloud_classes():
    from flask import current_app, has_app_context

    if has_app_context() and current_app.config.get("TAG_CLOUD_CLASSES"):
        return current_app.config["TAG_CLOUD_CLASSES"]
    return load_settings()["tag_cloud"]["classes"]
