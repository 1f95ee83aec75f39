#!/usr/bin/env python3
"""
Team Configuration Validator CLI Utility

Checks a team configuration file against the schema and prints the derived
percentile rows and summaries, so data maintainers can catch mismatched keys
or out-of-range ranks before the dashboard does.

Usage:
    python scripts/validate_team_config.py
    python scripts/validate_team_config.py --config path/to/team.yaml
    python scripts/validate_team_config.py --section Pitching --verbose
"""

import argparse
import logging
import sys
import os
import pandas as pd

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from src.application import GetSectionAnalysisUseCase, SectionAnalysisRequest
from src.domain.exceptions import ConfigLoadError, ConfigValidationError
from src.domain.metrics import round_half_up
from src.infrastructure import load_team_config, resolve_config_path

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)


def print_section(team_config, section_name: str) -> None:
    """Print one section's rows and summary as a table."""
    response = GetSectionAnalysisUseCase().execute(SectionAnalysisRequest(team_config, section_name))

    table = pd.DataFrame([{
        'Metric': row.label,
        'Value': row.formatted_value,
        'Rank': f"{row.rank}/{response.total_competitors}",
        'Percentile': round(row.percentile, 1),
        'Class': 'above' if row.above_average else 'below',
        'Orientation': row.orientation_text,
    } for row in response.rows])

    summary = response.summary
    print(f"\n=== {section_name} ===")
    print(table.to_string(index=False))
    print(f"Best: {summary.best.label} | Needs work: {summary.worst.label} | "
          f"Median pct: {round_half_up(summary.median_percentile)}")


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Validate a team configuration and print derived percentiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Validate the bundled dataset
  %(prog)s --config team.yaml                # Validate another file
  %(prog)s --section Pitching                # Only print one section
        """
    )

    parser.add_argument('--config', help='Path to a team configuration YAML file')
    parser.add_argument('--section', help='Only print this section')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config_path = resolve_config_path(args.config)

    try:
        team_config = load_team_config(config_path)
    except ConfigLoadError as e:
        logger.error(str(e))
        sys.exit(2)
    except ConfigValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    print(f"{team_config.team_name}: {team_config.total_competitors} competitors, "
          f"sections: {', '.join(team_config.section_names)}")

    try:
        section_names = [args.section] if args.section else team_config.section_names
        for section_name in section_names:
            print_section(team_config, section_name)
    except ConfigValidationError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
