# ==============================================================================
# PATH CATALOGER MODULE
# ==============================================================================
# Classifies lists of game paths and organizes them by ObjectType.
#
# Input is any iterable of game paths, or a listing file with one path per
# line (blank lines and lines starting with '#' are skipped). Each path is
# run through the game path parser; the results can be reported, saved as
# txt/json/csv, or stored in the catalog database.
#
# Usage:
#   cataloger = PathCataloger()
#   entries = cataloger.classify_paths(cataloger.read_listing("paths.txt"))
#   by_type = cataloger.categorize(entries)
#   cataloger.save_catalog(entries, "catalog.json", format="json")
# ==============================================================================

import csv
import json
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .config import CATALOG_FORMATS
from .database import Database
from ..parsers.enums import ObjectType
from ..parsers.game_object_info import GameObjectInfo
from ..parsers.game_path_parser import GamePathParser, get_parser


logger = logging.getLogger(__name__)


# ==============================================================================
# CATALOG ENTRY DATA CLASS
# ==============================================================================
@dataclass(frozen=True)
class CatalogEntry:
    """
    A game path with its classification.

    Attributes:
        path (str):            Path as given (not normalized)
        info (GameObjectInfo): Parser result
    """
    path: str
    info: GameObjectInfo


# ==============================================================================
# PATH CATALOGER CLASS
# ==============================================================================
class PathCataloger:
    """
    Classifies and catalogs game paths.

    Attributes:
        parser (GamePathParser): Parser used for classification
        db (Database):           Optional catalog database
    """

    def __init__(self, parser: Optional[GamePathParser] = None, db: Optional[Database] = None):
        self.parser = parser or get_parser()
        self.db = db

    # ==========================================================================
    # INPUT
    # ==========================================================================

    @staticmethod
    def read_listing(listing_file: str) -> List[str]:
        """
        Read game paths from a listing file.

        Args:
            listing_file: Text file with one game path per line

        Returns:
            Paths in file order
        """
        paths = []
        with open(listing_file, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                paths.append(line)
        return paths

    # ==========================================================================
    # CLASSIFICATION
    # ==========================================================================

    def classify_paths(self, paths: Iterable[str], progress_callback=None) -> List[CatalogEntry]:
        """
        Classify every path.

        Args:
            paths: Game paths
            progress_callback: Optional callback(current, total, path)

        Returns:
            One CatalogEntry per path, in input order
        """
        paths = list(paths)
        total = len(paths)
        entries = []
        for idx, path in enumerate(paths):
            if progress_callback:
                progress_callback(idx + 1, total, path)
            entries.append(CatalogEntry(path, self.parser.classify(path)))
        return entries

    @staticmethod
    def categorize(entries: Iterable[CatalogEntry]) -> Dict[ObjectType, List[CatalogEntry]]:
        """
        Group entries by ObjectType.

        Returns:
            ObjectType -> entries, only for types that occur
        """
        result: Dict[ObjectType, List[CatalogEntry]] = {}
        for entry in entries:
            result.setdefault(entry.info.object_type, []).append(entry)
        return result

    # ==========================================================================
    # STORAGE
    # ==========================================================================

    def store(self, entries: Iterable[CatalogEntry]) -> int:
        """
        Store entries in the catalog database.

        Returns:
            Number of newly stored paths

        Raises:
            RuntimeError: If the cataloger has no database
        """
        if self.db is None:
            raise RuntimeError("PathCataloger has no database to store into")

        added = self.db.add_paths((entry.path, entry.info) for entry in entries)
        logger.info("Stored catalog entries: %d new", added)
        return added

    # ==========================================================================
    # REPORTING
    # ==========================================================================

    def get_statistics(self, entries: List[CatalogEntry]) -> dict:
        """
        Get statistics about a set of entries.

        Returns:
            Dictionary with total/complete counts and counts per
            ObjectType and FileType name
        """
        by_object_type: Dict[str, int] = {}
        by_file_type: Dict[str, int] = {}
        complete = 0

        for entry in entries:
            object_name = entry.info.object_type.name
            file_name = entry.info.file_type.name
            by_object_type[object_name] = by_object_type.get(object_name, 0) + 1
            by_file_type[file_name] = by_file_type.get(file_name, 0) + 1
            if entry.info.is_complete:
                complete += 1

        return {
            'total_count': len(entries),
            'complete_count': complete,
            'by_object_type': by_object_type,
            'by_file_type': by_file_type,
        }

    def generate_report(self, entries: List[CatalogEntry]) -> str:
        """
        Generate a text report of classified paths.

        Returns:
            Formatted report string
        """
        stats = self.get_statistics(entries)

        lines = ["=" * 60, "GAME PATH CATALOG REPORT", "=" * 60, ""]

        lines.append("SUMMARY")
        lines.append("-" * 40)
        lines.append(f"Total paths: {stats['total_count']}")
        lines.append(f"Fully decoded: {stats['complete_count']}")
        lines.append("")

        lines.append("BY OBJECT TYPE")
        lines.append("-" * 40)
        for name in sorted(stats['by_object_type']):
            lines.append(f"  {name}: {stats['by_object_type'][name]}")
        lines.append("")

        lines.append("BY FILE TYPE")
        lines.append("-" * 40)
        for name in sorted(stats['by_file_type']):
            lines.append(f"  {name}: {stats['by_file_type'][name]}")
        lines.append("")

        lines.append("PATHS")
        lines.append("-" * 40)
        for entry in entries:
            info = entry.info
            marker = "+" if info.is_complete else "-"
            lines.append(f"  {marker} {info.object_type.name:<14} {info.file_type.name:<10} {entry.path}")

        return "\n".join(lines)

    def save_catalog(self, entries: List[CatalogEntry], output_file: str,
                     format: str = 'txt') -> bool:
        """
        Save a catalog to a file.

        Args:
            entries: Classified paths
            output_file: Output file path
            format: Output format ('txt', 'json', 'csv')

        Returns:
            True if the file was written, False if writing failed

        Raises:
            ValueError: If format is not one of CATALOG_FORMATS
        """
        if format not in CATALOG_FORMATS:
            raise ValueError(f"Unknown catalog format: {format}")

        try:
            if format == 'txt':
                with open(output_file, 'w', encoding='utf-8') as f:
                    f.write(self.generate_report(entries))

            elif format == 'json':
                data = [dict(path=entry.path, **entry.info.to_dict()) for entry in entries]
                with open(output_file, 'w', encoding='utf-8') as f:
                    json.dump(data, f, indent=2)

            else:
                with open(output_file, 'w', newline='', encoding='utf-8') as f:
                    writer = csv.writer(f)
                    writer.writerow(['path', 'file_type', 'object_type', 'primary_id',
                                     'secondary_id', 'variant', 'complete'])
                    for entry in entries:
                        info = entry.info
                        writer.writerow([entry.path, info.file_type.name, info.object_type.name,
                                         info.primary_id, info.secondary_id, info.variant,
                                         info.is_complete])
        except OSError as e:
            logger.error("Failed to save catalog %s: %s", output_file, e)
            return False

        logger.info("Saved catalog to %s", output_file)
        return True
