"""
Package information utility.

This module provides a command-line utility for displaying
information about the BuilderGen installation and environment.
"""

import sys
import platform
from typing import Dict, Any

import buildergen


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to BuilderGen.

    Returns:
        Dictionary containing system information
    """
    info = {
        'python_version': sys.version,
        'platform': platform.platform(),
        'architecture': platform.architecture(),
    }

    try:
        import javalang
        info['javalang_version'] = getattr(javalang, '__version__', 'installed')
    except ImportError:
        info['javalang_version'] = 'Not installed'

    try:
        import yaml
        info['yaml_version'] = yaml.__version__
    except ImportError:
        info['yaml_version'] = 'Not installed'

    return info


def get_buildergen_info() -> Dict[str, Any]:
    """
    Get BuilderGen-specific information.

    Returns:
        Dictionary containing BuilderGen information
    """
    info = {
        'version': buildergen.__version__,
        'author': buildergen.__author__,
    }

    try:
        from buildergen.utils.config import get_config
        config = get_config()
        info['config_file'] = str(config.config_file)
        info['config_file_found'] = config.config_file.exists()
        info['strict_pojo_check'] = config.validation.strict_pojo_check
        info['output_dir'] = config.output.output_dir
    except buildergen.BuilderGenError as e:
        info['config_error'] = str(e)

    return info


def print_info() -> None:
    """Print formatted information about BuilderGen and the system."""
    print("BuilderGen Java Builder Generator")
    print("=" * 40)

    bg_info = get_buildergen_info()
    print(f"\nBuilderGen Version: {bg_info['version']}")
    print(f"Author: {bg_info['author']}")

    if 'config_error' in bg_info:
        print(f"Configuration Error: {bg_info['config_error']}")
    else:
        found = "" if bg_info['config_file_found'] else " (not found, using defaults)"
        print(f"Configuration: {bg_info['config_file']}{found}")
        print(f"Strict POJO Check: {bg_info['strict_pojo_check']}")
        print(f"Output Directory: {bg_info['output_dir']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Architecture: {system_info['architecture'][0]}")
    print(f"javalang: {system_info['javalang_version']}")
    print(f"PyYAML: {system_info['yaml_version']}")


def main() -> None:
    """Main entry point for the buildergen-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
