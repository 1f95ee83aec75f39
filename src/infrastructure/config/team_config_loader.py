# src/infrastructure/config/team_config_loader.py - Team configuration loading

import logging
import os
import re
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

import yaml

from ...config import DEFAULT_TEAM_CONFIG_PATH, TEAM_CONFIG_ENV_VAR
from ...domain.entities import Section, TeamConfig
from ...domain.exceptions import ConfigLoadError, ConfigValidationError
from ...domain.validation import SavantValidator

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('team_name', 'total_competitors', 'sections')


def _slugify(text: str) -> str:
    return re.sub(r'[^a-z0-9]+', '-', text.lower()).strip('-')


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Pick the configuration file: explicit path, then environment, then bundled default."""
    if path:
        return Path(path)
    env_path = os.environ.get(TEAM_CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_TEAM_CONFIG_PATH


def config_stamp(path: Union[str, Path]) -> Optional[Tuple[int, int]]:
    """Modification time and size of the file, or None if it cannot be stat'ed.

    Used as part of cache keys so an edited file is reloaded.
    """
    try:
        stat = os.stat(path)
    except OSError:
        return None
    return stat.st_mtime_ns, stat.st_size


def _build_takeaways(raw_takeaways: Any):
    if raw_takeaways is None:
        return ()
    if not isinstance(raw_takeaways, Mapping):
        raise ConfigValidationError("takeaways must be a mapping of category to text",
                                    "takeaways", raw_takeaways)
    takeaways = []
    for category, text in raw_takeaways.items():
        if not isinstance(text, str):
            raise ConfigValidationError(f"Takeaway '{category}' must be a string", "takeaways", text)
        takeaways.append((str(category), text))
    return tuple(takeaways)


def build_team_config(data: Any, strict: bool = True) -> TeamConfig:
    """Build a validated TeamConfig from an in-memory mapping.

    Expected shape:
        team_name: str
        total_competitors: int (>= 2)
        sections: {name: {raw: {...}, ranks: {...}, better: {...}?}}
        short_name: str (optional, used in export file names)
        takeaways: {category: text} (optional)

    With strict=False a section that fails validation is recorded in
    rejected_sections instead of failing the whole configuration, so the
    other tabs still render. At least one section must survive.

    Raises:
        ConfigValidationError: if any field or section breaks the schema
    """
    SavantValidator.validate_required_fields(data, REQUIRED_FIELDS)

    team_name = SavantValidator.validate_team_name(data['team_name'])
    total = SavantValidator.validate_total_competitors(data['total_competitors'])

    raw_sections = data['sections']
    if not isinstance(raw_sections, Mapping) or not raw_sections:
        raise ConfigValidationError("sections must be a non-empty mapping", "sections", raw_sections)

    sections = []
    rejected = []
    for name, section_data in raw_sections.items():
        try:
            SavantValidator.validate_required_fields(section_data, ('raw', 'ranks'), f"section '{name}'")
            sections.append(Section.from_mappings(
                name=str(name),
                raw=section_data['raw'],
                ranks=section_data['ranks'],
                better=section_data.get('better')
            ))
        except ConfigValidationError as e:
            if strict or (not sections and len(rejected) + 1 == len(raw_sections)):
                raise
            logger.error(f"Rejected section '{name}': {e}")
            rejected.append((str(name), str(e)))

    short_name = data.get('short_name') or _slugify(team_name)

    return TeamConfig(
        team_name=team_name,
        total_competitors=total,
        sections=tuple(sections),
        short_name=str(short_name),
        takeaways=_build_takeaways(data.get('takeaways')),
        rejected_sections=tuple(rejected),
        declared_order=tuple(str(name) for name in raw_sections)
    )


def load_team_config(path: Optional[Union[str, Path]] = None, strict: bool = True) -> TeamConfig:
    """Load and validate a team configuration from a YAML file.

    Raises:
        ConfigLoadError: if the file is missing or is not valid YAML
        ConfigValidationError: if the content breaks the schema
    """
    config_path = resolve_config_path(path)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigLoadError(f"Cannot read team configuration {config_path}: {e}", str(config_path)) from e
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in team configuration {config_path}: {e}", str(config_path)) from e

    team_config = build_team_config(data, strict=strict)
    logger.info(f"Loaded team configuration for {team_config.team_name} "
                f"({len(team_config.sections)} sections) from {config_path}")
    return team_config
