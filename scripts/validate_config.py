#!/usr/bin/env python3
"""Plan catalog validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pumpout_engine.config.loader import ConfigLoader
from pumpout_engine.config.validation import ConfigValidator, ValidationError
from pumpout_engine.errors import ConfigurationError


def validate_catalog(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate settings and every plan entry in the catalog."""
    loader = ConfigLoader.create(config_dir)
    errors = ConfigValidator.validate_config(loader.merge_config())
    errors.extend(ConfigValidator.validate_catalog(loader.load_plan_entries()))
    return errors


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"Validating {loader.catalog_file}...")

    try:
        errors = validate_catalog(config_dir)
    except ConfigurationError as e:
        print(f"Could not load catalog: {e}")
        sys.exit(1)

    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    plans = loader.load_plan_entries()
    for name, entry in plans.items():
        print(f"  {name}: {entry['base_quantity']} pump-outs, "
              f"base ${entry['base_price_cents'] / 100:.2f}")

    print(f"All {len(plans)} plans are valid.")
    sys.exit(0)


if __name__ == "__main__":
    main()
