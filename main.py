# ==============================================================================
# XIVPATH - MAIN ENTRY POINT
# ==============================================================================
# Script entry point for running XivPath from a source checkout.
#
# Usage:
#   python main.py classify <path> [<path> ...]
#   python main.py --check      # Check dependencies and exit
#   python main.py --paths      # Show data paths and exit
#
# When installed, the same commands are available as the `xivpath` script.
# ==============================================================================

import sys
import traceback


# ==============================================================================
# DEPENDENCY CHECKS
# ==============================================================================

def check_dependencies():
    """
    Check if required dependencies are installed.

    Returns:
        Tuple of (all_ok, missing_packages)
    """
    missing = []

    # Only the catalog database needs a third-party package
    core_deps = ['sqlalchemy']

    for dep in core_deps:
        try:
            __import__(dep)
        except ImportError:
            missing.append(dep)

    return (len(missing) == 0, missing)


# ==============================================================================
# MAIN FUNCTION
# ==============================================================================

def main():
    """
    Main entry point for XivPath.

    Handles the launcher-only flags and hands everything else to the CLI.
    """
    argv = sys.argv[1:]

    if '--check' in argv:
        print("Checking dependencies...")
        print(f"  Python: {sys.version}")

        all_ok, missing = check_dependencies()
        if all_ok:
            print("[OK] All core dependencies installed")
        else:
            print(f"[MISSING] {', '.join(missing)}")
        return 0 if all_ok else 1

    all_ok, missing = check_dependencies()
    if not all_ok:
        print(f"[ERROR] Missing required packages: {', '.join(missing)}")
        return 1

    if '--paths' in argv:
        from xivpath.core.config import get_config
        from xivpath.core.paths import Paths

        print("XivPath Paths:")
        print(f"  User Data:      {Paths.get_user_data_dir()}")
        print(f"  Config:         {Paths.get_config_path()}")
        print(f"  Database:       {get_config().database_path}")
        print(f"  Logs:           {Paths.get_logs_dir()}")
        return 0

    try:
        from xivpath.cli import main as cli_main
        return cli_main(argv)
    except Exception as e:
        print(f"\n[FATAL ERROR] {e}")
        traceback.print_exc()
        return 1


# ==============================================================================
# SCRIPT ENTRY POINT
# ==============================================================================
if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
