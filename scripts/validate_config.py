#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ssm_app.config.loader import ConfigLoader
from ssm_app.config.validation import ConfigValidator


def main():
    """Validate config/market.yaml merged over the defaults."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating market configuration in {loader.config_dir}...")

    try:
        config = loader.merge_config()
    except ValueError as e:
        print(f"❌ Could not merge configuration: {e}")
        return 1

    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        return 1

    print("✅ Configuration is valid")
    for section, values in config.items():
        print(f"  [{section}]")
        for key, value in values.items():
            print(f"    {key} = {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
