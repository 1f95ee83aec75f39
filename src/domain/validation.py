# src/domain/validation.py - Domain validation rules for team configuration data

from numbers import Real
from typing import Any, Iterable, Mapping, Optional
from ..config import MIN_TOTAL_COMPETITORS
from .exceptions import ConfigValidationError


def _describe_keys(keys: Iterable[str]) -> str:
    return ", ".join(sorted(str(k) for k in keys))


class SavantValidator:
    """Domain validator for team configuration business rules."""

    @staticmethod
    def validate_required_fields(data: Any, required: Iterable[str], context: str = "team configuration") -> Mapping:
        """Validate that a mapping carries every required field."""
        if not isinstance(data, Mapping):
            raise ConfigValidationError(f"{context} must be a mapping", context, data)

        for field_name in required:
            if field_name not in data or data[field_name] is None:
                raise ConfigValidationError(
                    f"{context} is missing required field '{field_name}'",
                    field_name, None
                )

        return data

    @staticmethod
    def validate_team_name(team_name: Any, field_name: str = "team_name") -> str:
        """Validate the team display name.

        Business rules:
        - Must be a non-empty string
        """
        if not isinstance(team_name, str):
            raise ConfigValidationError(f"{field_name} must be a string", field_name, team_name)

        normalized = team_name.strip()
        if not normalized:
            raise ConfigValidationError(f"{field_name} cannot be empty", field_name, team_name)

        return normalized

    @staticmethod
    def validate_total_competitors(total: Any, field_name: str = "total_competitors") -> int:
        """Validate the size of the competitor pool.

        Business rules:
        - Must be an integer
        - Must be at least 2 (percentiles divide by total - 1)
        """
        if total is None:
            raise ConfigValidationError(f"{field_name} cannot be None", field_name, total)

        if isinstance(total, bool) or not isinstance(total, int):
            raise ConfigValidationError(f"{field_name} must be an integer", field_name, total)

        if total < MIN_TOTAL_COMPETITORS:
            raise ConfigValidationError(
                f"{field_name} must be at least {MIN_TOTAL_COMPETITORS}, got {total}",
                field_name, total
            )

        return total

    @staticmethod
    def validate_rank(rank: Any, metric_key: str, section: Optional[str] = None) -> int:
        """Validate a conference rank value.

        Only the type is enforced here. A rank outside [1, total] is a data
        anomaly that the percentile engine clamps and logs.
        """
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise ConfigValidationError(
                f"Rank for metric '{metric_key}' must be an integer, got {rank!r}",
                metric_key, rank, section
            )
        return rank

    @staticmethod
    def validate_raw_value(value: Any, metric_key: str, section: Optional[str] = None) -> float:
        """Validate a raw statistic value is numeric."""
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ConfigValidationError(
                f"Raw value for metric '{metric_key}' must be numeric, got {value!r}",
                metric_key, value, section
            )
        return value

    @staticmethod
    def validate_orientation(flag: Any, metric_key: str, section: Optional[str] = None) -> bool:
        """Validate a higher-is-better flag."""
        if not isinstance(flag, bool):
            raise ConfigValidationError(
                f"Orientation for metric '{metric_key}' must be a boolean, got {flag!r}",
                metric_key, flag, section
            )
        return flag

    @staticmethod
    def validate_section_keys(section_name: str, raw: Any, ranks: Any, better: Any = None) -> None:
        """Validate that a section's raw, rank and orientation maps share one key set.

        The orientation map is optional; when present it must cover exactly
        the same metrics as the raw map.
        """
        maps = [('raw', raw), ('ranks', ranks)]
        if better is not None:
            maps.append(('better', better))

        for map_name, mapping in maps:
            if not isinstance(mapping, Mapping):
                raise ConfigValidationError(
                    f"Section '{section_name}': {map_name} must be a mapping",
                    map_name, mapping, section_name
                )

        if not raw:
            raise ConfigValidationError(
                f"Section '{section_name}' must define at least one metric",
                'raw', raw, section_name
            )

        expected = set(raw)
        problems = []
        for map_name, mapping in maps[1:]:
            missing = expected - set(mapping)
            extra = set(mapping) - expected
            if missing:
                problems.append(f"{map_name} is missing key(s): {_describe_keys(missing)}")
            if extra:
                problems.append(f"{map_name} has extra key(s): {_describe_keys(extra)}")

        if problems:
            raise ConfigValidationError(
                f"Section '{section_name}': " + "; ".join(problems),
                'keys', sorted(expected), section_name
            )

    @staticmethod
    def validate_unique_names(names: Iterable[str], field_name: str = "sections") -> None:
        """Validate section names are unique, ignoring case."""
        seen = {}
        duplicates = []
        for name in names:
            folded = str(name).casefold()
            if folded in seen:
                duplicates.append(f"{seen[folded]}/{name}" if seen[folded] != name else name)
            else:
                seen[folded] = name

        if duplicates:
            raise ConfigValidationError(
                f"Duplicate section name(s), ignoring case: {', '.join(duplicates)}",
                field_name, duplicates
            )
