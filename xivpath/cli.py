# ==============================================================================
# XIVPATH - COMMAND LINE INTERFACE
# ==============================================================================
# Command-line front end for the game path parser.
#
# This provides a command-line interface with the following commands:
#   - classify:  Classify one or more game paths
#   - key:       Extract animation keys from paths
#   - skeletons: List the skeletons a model path needs
#   - catalog:   Classify a listing file, report/save/store the result
#   - stats:     Show catalog database statistics
#
# Usage:
#   xivpath classify chara/weapon/w2001/obj/body/b0001/b0001.imc
#   xivpath classify --json "chara\equipment\e0001\model\c0101e0001_top.mdl"
#   xivpath catalog --input paths.txt --output catalog.csv --format csv --store
#
# ==============================================================================

import argparse
import json
import sys
from typing import List, Optional

from . import __version__
from .core.config import get_config
from .core.logging_setup import setup_logging
from .core.paths import Paths
from .parsers.game_path_parser import get_parser
from .parsers.skeletons import UnsupportedModelError, resolve_skeletons_for_model


# ==============================================================================
# COLOR HELPERS FOR TERMINAL OUTPUT
# ==============================================================================
class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        """Disable colors (for non-supporting terminals and pipes)."""
        cls.HEADER = ''
        cls.BLUE = ''
        cls.CYAN = ''
        cls.GREEN = ''
        cls.YELLOW = ''
        cls.RED = ''
        cls.BOLD = ''
        cls.END = ''


def print_header(text: str):
    """Print a header."""
    print(f"\n{Colors.BOLD}{Colors.CYAN}{'=' * 60}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}  {text}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{'=' * 60}{Colors.END}\n")


def print_success(text: str):
    print(f"{Colors.GREEN}✓ {text}{Colors.END}")


def print_error(text: str):
    print(f"{Colors.RED}✗ {text}{Colors.END}")


def print_info(text: str):
    print(f"{Colors.BLUE}ℹ {text}{Colors.END}")


def print_warning(text: str):
    print(f"{Colors.YELLOW}⚠ {text}{Colors.END}")


def progress_callback(current: int, total: int, filename: str):
    """Progress callback for long operations."""
    percent = (current / total) * 100 if total > 0 else 0
    bar_length = 30
    filled = int(bar_length * current / total) if total > 0 else 0
    bar = '█' * filled + '░' * (bar_length - filled)

    # Truncate filename if too long
    max_name_len = 40
    if len(filename) > max_name_len:
        filename = '...' + filename[-(max_name_len-3):]

    print(f"\r[{bar}] {percent:5.1f}% | {current}/{total} | {filename}", end='', flush=True)

    if current >= total:
        print()


# ==============================================================================
# DATABASE INITIALIZATION
# ==============================================================================
def get_database():
    """Open the catalog database configured for this user."""
    from .core.database import Database
    return Database(get_config().database_path)


# ==============================================================================
# CLASSIFY COMMANDS
# ==============================================================================
def cmd_classify(args) -> int:
    """Classify game paths."""
    parser = get_parser()
    results = [(path, parser.classify(path)) for path in args.paths]

    if args.json:
        print(json.dumps([dict(path=path, **info.to_dict()) for path, info in results], indent=2))
        return 0

    for path, info in results:
        status = f"{Colors.GREEN}+{Colors.END}" if info.is_complete else f"{Colors.YELLOW}-{Colors.END}"
        print(f"{status} {Colors.BOLD}{path}{Colors.END}")
        print(f"    {'File type:':<14}{info.file_type.value}")
        print(f"    {'Object type:':<14}{info.object_type.value}")
        for key, value in info.to_dict().get('payload', {}).items():
            print(f"    {key + ':':<14}{value}")

    return 0


def cmd_key(args) -> int:
    """Extract animation keys."""
    parser = get_parser()
    for path in args.paths:
        key = parser.extract_animation_key(path)
        if key:
            print(f"{path}\t{key}")
        else:
            print_warning(f"No animation key: {path}")
    return 0


def cmd_skeletons(args) -> int:
    """List skeletons for a model path."""
    try:
        skeletons = resolve_skeletons_for_model(args.path)
    except UnsupportedModelError as e:
        print_error(str(e))
        return 1

    if not skeletons:
        print_warning(f"No skeletons resolved for {args.path}")
        return 1

    for skeleton in skeletons:
        print(skeleton)
    return 0


# ==============================================================================
# CATALOG COMMANDS
# ==============================================================================
def cmd_catalog(args) -> int:
    """Classify every path in a listing file."""
    print_header("Generating Path Catalog")

    from .core.cataloger import PathCataloger

    try:
        paths = PathCataloger.read_listing(args.input)
    except OSError as e:
        print_error(f"Could not read listing {args.input}: {e}")
        return 1

    print_info(f"Found {len(paths)} paths")

    db = get_database() if args.store else None
    try:
        cataloger = PathCataloger(db=db)
        entries = cataloger.classify_paths(paths, progress_callback if not args.quiet else None)

        stats = cataloger.get_statistics(entries)
        print(f"\n{Colors.BOLD}By Object Type:{Colors.END}")
        for name, count in sorted(stats['by_object_type'].items()):
            print(f"  {name}: {count}")
        print(f"\nFully decoded: {stats['complete_count']}/{stats['total_count']}")

        if args.output:
            format = args.format or get_config().catalog_format
            if not cataloger.save_catalog(entries, args.output, format=format):
                print_error(f"Failed to save catalog to {args.output}")
                return 1
            print_success(f"Saved catalog to {args.output}")

        if args.store:
            added = cataloger.store(entries)
            print_success(f"Stored {len(entries)} paths ({added} new)")
    finally:
        if db is not None:
            db.close()

    return 0


# ==============================================================================
# STATS COMMAND
# ==============================================================================
def cmd_stats(args) -> int:
    """Show catalog database statistics."""
    print_header("XivPath Catalog Statistics")

    db = get_database()
    try:
        stats = db.get_stats()
    finally:
        db.close()

    print(f"Paths stored:         {stats['total']}")
    print(f"Fully decoded:        {stats['complete']}")
    for name, count in sorted(stats['by_object_type'].items()):
        print(f"  {name:<20}{count}")
    return 0


# ==============================================================================
# MAIN ARGUMENT PARSER
# ==============================================================================
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='xivpath',
        description="XivPath - game resource path classifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s classify chara/weapon/w2001/obj/body/b0001/b0001.imc
  %(prog)s key chara/action/emote/b_pose01_loop.tmb
  %(prog)s skeletons chara/equipment/e0001/model/c0101e0001_top.mdl
  %(prog)s catalog --input paths.txt --output catalog.json --format json
        """
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # -------------------------------------------------------------------------
    # CLASSIFY commands
    # -------------------------------------------------------------------------
    classify_parser = subparsers.add_parser('classify', help='Classify game paths')
    classify_parser.add_argument('paths', nargs='+', help='Game paths')
    classify_parser.add_argument('--json', action='store_true', help='Print JSON')
    classify_parser.set_defaults(func=cmd_classify)

    key_parser = subparsers.add_parser('key', help='Extract animation keys')
    key_parser.add_argument('paths', nargs='+', help='Game paths')
    key_parser.set_defaults(func=cmd_key)

    skeletons_parser = subparsers.add_parser('skeletons', help='List skeletons for a model')
    skeletons_parser.add_argument('path', help='Model (.mdl) game path')
    skeletons_parser.set_defaults(func=cmd_skeletons)

    # -------------------------------------------------------------------------
    # CATALOG commands
    # -------------------------------------------------------------------------
    catalog_parser = subparsers.add_parser('catalog', help='Classify a listing file')
    catalog_parser.add_argument('--input', required=True, help='File with one game path per line')
    catalog_parser.add_argument('--output', help='Output file for catalog')
    catalog_parser.add_argument('--format', choices=['txt', 'json', 'csv'],
                                help='Catalog format (default from config)')
    catalog_parser.add_argument('--store', action='store_true',
                                help='Store results in the catalog database')
    catalog_parser.add_argument('--quiet', '-q', action='store_true', help='No progress bar')
    catalog_parser.set_defaults(func=cmd_catalog)

    # -------------------------------------------------------------------------
    # STATS command
    # -------------------------------------------------------------------------
    stats_parser = subparsers.add_parser('stats', help='Show catalog statistics')
    stats_parser.set_defaults(func=cmd_stats)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.no_color or not sys.stdout.isatty():
        Colors.disable()

    config = get_config()
    setup_logging(
        'DEBUG' if args.verbose else config.log_level,
        log_file=Paths.get_log_file_path() if config.log_to_file else None,
    )

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
