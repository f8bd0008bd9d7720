# ==============================================================================
# DATABASE MODULE
# ==============================================================================
# SQLite storage for classified game paths. Uses SQLAlchemy ORM for clean
# data access.
#
# Tables:
#   - classified_paths: One row per normalized game path with its FileType,
#                       ObjectType, main ids and the full payload as JSON
# ==============================================================================

import json
import os
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import create_engine, func, Column, Integer, String, DateTime, Boolean, Text
from sqlalchemy.orm import declarative_base, sessionmaker

from ..parsers.enums import ObjectType
from ..parsers.game_object_info import GameObjectInfo
from ..parsers.game_path_parser import normalize_path

# ==============================================================================
# SQLAlchemy Base Class
# ==============================================================================
Base = declarative_base()


# ==============================================================================
# CLASSIFIED PATH MODEL
# ==============================================================================
# A game path together with what the parser made of it.
#
# Example:
#   row = ClassifiedPath(path="chara/weapon/w2001/obj/body/b0001/b0001.imc",
#                        file_type="IMC", object_type="WEAPON",
#                        primary_id=2001, secondary_id=1, complete=True)
# ==============================================================================
class ClassifiedPath(Base):
    """
    A classified game path.

    Attributes:
        id (int):            Unique identifier
        path (str):          Normalized game path
        file_type (str):     FileType name
        object_type (str):   ObjectType name
        primary_id (int):    Main id of the object (set, monster, icon, ...)
        secondary_id (int):  Second id (weapon body, monster body, demihuman equip)
        variant (int):       Variant, if the path encodes one
        payload (str):       JSON of the decoded payload fields
        complete (bool):     Whether the path decoded fully
        added_at:            When this path was first stored
        updated_at:          Last time this entry was modified
    """
    __tablename__ = 'classified_paths'

    id = Column(Integer, primary_key=True, autoincrement=True)
    path = Column(String(500), unique=True, nullable=False)
    file_type = Column(String(20), nullable=False)
    object_type = Column(String(20), nullable=False, index=True)
    primary_id = Column(Integer, nullable=True)
    secondary_id = Column(Integer, nullable=True)
    variant = Column(Integer, nullable=True)
    payload = Column(Text, nullable=True)
    complete = Column(Boolean, default=False)
    added_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def apply(self, info: GameObjectInfo):
        """Copy the fields of a descriptor onto this row."""
        data = info.to_dict()
        self.file_type = data['file_type']
        self.object_type = data['object_type']
        self.primary_id = info.primary_id
        self.secondary_id = info.secondary_id
        self.variant = info.variant
        self.payload = json.dumps(data['payload'], sort_keys=True) if 'payload' in data else None
        self.complete = info.is_complete

    def __repr__(self):
        return f"<ClassifiedPath(id={self.id}, path='{self.path}', type={self.object_type})>"


# ==============================================================================
# DATABASE CLASS
# ==============================================================================
# Main database manager class. Handles connection, session management,
# and provides convenience methods for common operations.
#
# Usage:
#   db = Database(Paths.get_database_path())
#   db.add_paths([(path, classify(path)) for path in paths])
#   weapons = db.get_paths_by_object_type(ObjectType.WEAPON)
# ==============================================================================
class Database:
    """
    Database manager for the path catalog.

    Attributes:
        db_path (str): Path to the SQLite database file
        engine: SQLAlchemy engine instance
        Session: SQLAlchemy session factory
    """

    # Number of paths looked up per IN (...) query
    BATCH_SIZE = 500

    def __init__(self, db_path: str):
        """
        Initialize the database connection.

        Args:
            db_path: Path to the SQLite database file.
                    The file will be created if it doesn't exist.
        """
        self.db_path = db_path

        directory = os.path.dirname(db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        self.engine = create_engine(f'sqlite:///{db_path}', echo=False)

        # Rows are handed back to callers after the session is closed
        self.Session = sessionmaker(bind=self.engine, expire_on_commit=False)

        Base.metadata.create_all(self.engine)

    def close(self):
        """Release the connection pool."""
        self.engine.dispose()

    # ==========================================================================
    # WRITING
    # ==========================================================================

    def add_paths(self, classified: Iterable[Tuple[str, GameObjectInfo]]) -> int:
        """
        Store classified paths, updating rows for paths already present.

        Args:
            classified: (game path, descriptor) pairs

        Returns:
            Number of paths that were not stored before
        """
        entries: Dict[str, GameObjectInfo] = {}
        for path, info in classified:
            entries[normalize_path(path)] = info

        added = 0
        paths = list(entries)
        session = self.Session()
        try:
            for start in range(0, len(paths), self.BATCH_SIZE):
                batch = paths[start:start + self.BATCH_SIZE]
                existing = {
                    row.path: row
                    for row in session.query(ClassifiedPath).filter(ClassifiedPath.path.in_(batch))
                }
                for path in batch:
                    row = existing.get(path)
                    if row is None:
                        row = ClassifiedPath(path=path)
                        session.add(row)
                        added += 1
                    row.apply(entries[path])

            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

        return added

    def clear(self) -> int:
        """
        Delete all stored paths.

        Returns:
            Number of rows deleted
        """
        session = self.Session()
        try:
            count = session.query(ClassifiedPath).delete()
            session.commit()
            return count
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # ==========================================================================
    # READING
    # ==========================================================================

    def get_path(self, path: str) -> Optional[ClassifiedPath]:
        session = self.Session()
        try:
            return session.query(ClassifiedPath).filter(
                ClassifiedPath.path == normalize_path(path)
            ).first()
        finally:
            session.close()

    def get_paths_by_object_type(self, object_type: ObjectType) -> List[ClassifiedPath]:
        """Get all stored paths of one ObjectType, ordered by path."""
        session = self.Session()
        try:
            return session.query(ClassifiedPath).filter(
                ClassifiedPath.object_type == object_type.name
            ).order_by(ClassifiedPath.path).all()
        finally:
            session.close()

    def get_incomplete_paths(self) -> List[ClassifiedPath]:
        """Get all stored paths that did not decode fully."""
        session = self.Session()
        try:
            return session.query(ClassifiedPath).filter(
                ClassifiedPath.complete.is_(False)
            ).order_by(ClassifiedPath.path).all()
        finally:
            session.close()

    def get_stats(self) -> Dict[str, object]:
        """
        Get catalog statistics.

        Returns:
            Dict with 'total', 'complete' and 'by_object_type' counts
        """
        session = self.Session()
        try:
            total = session.query(ClassifiedPath).count()
            complete = session.query(ClassifiedPath).filter(
                ClassifiedPath.complete.is_(True)
            ).count()
            by_type = dict(
                session.query(ClassifiedPath.object_type, func.count(ClassifiedPath.id))
                .group_by(ClassifiedPath.object_type)
                .all()
            )
            return {
                'total': total,
                'complete': complete,
                'by_object_type': by_type,
            }
        finally:
            session.close()
